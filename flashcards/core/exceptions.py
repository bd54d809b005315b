"""
Custom exceptions for the application.
"""


class FlashcardsException(Exception):
    """Base exception for all Flashcards application exceptions."""
    pass


class ValidationError(FlashcardsException):
    """Raised when request input is malformed or incomplete."""
    pass


class NotFoundError(FlashcardsException):
    """Raised when a requested flashcard is not found."""
    pass


class ConfigurationError(FlashcardsException):
    """Raised when a feature is requested that the deployment has not configured."""
    pass


class DependencyError(FlashcardsException):
    """Raised when the database or an external provider fails."""
    pass


class TranslationError(DependencyError):
    """Raised when the translation provider fails, times out, or returns nothing usable."""
    pass
