"""Service layer — graph operations wrapped in ServiceResult envelopes."""
