"""
Flashcard schemas.
"""
from pydantic import BaseModel
from typing import List, Literal, Optional
from datetime import datetime

TranslatedField = Literal["question", "answer"]


class FlashcardResponse(BaseModel):
    """Flashcard response schema."""
    id: int
    question: str
    answer: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class FlashcardsResponse(BaseModel):
    """Response schema for the flashcards list."""
    flashcards: List[FlashcardResponse]


class CreateFlashcardRequest(BaseModel):
    """
    Request schema for creating a flashcard.

    Either side may be left empty (but not both). The empty side is filled with
    an AI translation of the other, which requires both language codes.
    """
    question: str = ""
    answer: str = ""
    question_lang: str = ""  # e.g. "en"
    answer_lang: str = ""  # e.g. "el"


class UpdateFlashcardRequest(BaseModel):
    """Request schema for updating a flashcard. Unset fields keep their stored value."""
    question: Optional[str] = None
    answer: Optional[str] = None


class CreateFlashcardResponse(BaseModel):
    """Response schema for a created flashcard and whether AI filled one side."""
    flashcard: FlashcardResponse
    ai_translation_used: bool = False
    translated_field: Optional[TranslatedField] = None


class RandomFlashcardResponse(BaseModel):
    """Response schema for a random flashcard with an optional AI hint."""
    flashcard: FlashcardResponse
    ai_hint: Optional[str] = None
