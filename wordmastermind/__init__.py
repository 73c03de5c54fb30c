"""Word Mastermind: a terminal word-guessing game."""

__version__ = "1.0.0"
