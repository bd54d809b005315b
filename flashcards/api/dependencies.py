"""
FastAPI dependencies that assemble the flashcard service for a request.
"""
from functools import lru_cache

from fastapi import Depends
from sqlmodel import Session

from flashcards.core.config import settings
from flashcards.core.database import get_session
from flashcards.repositories.flashcard_repository import FlashcardRepository
from flashcards.services.flashcard_service import FlashcardService
from flashcards.services.translation_service import TranslationClient, get_translation_client


@lru_cache
def get_translator() -> TranslationClient:
    """Process-wide translation client; stateless per call."""
    return get_translation_client(settings)


def get_flashcard_service(
    session: Session = Depends(get_session),
    translator: TranslationClient = Depends(get_translator),
) -> FlashcardService:
    return FlashcardService(
        repository=FlashcardRepository(session),
        translator=translator,
        hint_source_language=settings.hint_source_language,
        hint_default_language=settings.hint_default_language,
    )
