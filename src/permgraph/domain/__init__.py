"""Domain layer — edges, errors, and the graph itself.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
