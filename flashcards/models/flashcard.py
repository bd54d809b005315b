"""
Flashcard model.
"""
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Flashcard(SQLModel, table=True):
    """Flashcard table - a question/answer pair. Both sides are always non-empty."""
    __tablename__ = "flashcards"

    id: Optional[int] = Field(default=None, primary_key=True)
    question: str
    answer: str
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
