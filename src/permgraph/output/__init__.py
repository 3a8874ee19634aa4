"""Output layer — turn ServiceResults into text for the terminal."""
