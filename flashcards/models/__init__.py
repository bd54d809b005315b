"""
Models package.
"""
from flashcards.models.flashcard import Flashcard

__all__ = [
    'Flashcard',
]
