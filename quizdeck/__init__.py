"""Command-line quiz and flashcard manager for short-answer questions."""

__version__ = "0.1.0"
