"""
cardstack - review flashcard decks in the terminal.

Loads a deck of question/answer cards from a text file, derives the
session's card sequence (shuffle, chunk, subset) and walks through the
cards one screen at a time, tracking which were answered correctly.
"""

__version__ = "0.4.0"
