"""
Flashcard persistence on top of SQLModel.
"""
import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from flashcards.core.exceptions import DependencyError, NotFoundError
from flashcards.models.flashcard import Flashcard, utcnow

logger = logging.getLogger(__name__)


class FlashcardRepository:
    """Owns all reads and writes of the flashcards table for one session."""

    def __init__(self, session: Session):
        self.session = session

    def _commit(self, action: str) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Database error while trying to {action}: {e}")
            raise DependencyError(f"failed to {action}") from e

    def create(self, question: str, answer: str) -> Flashcard:
        now = utcnow()
        flashcard = Flashcard(question=question, answer=answer, created_at=now, updated_at=now)
        self.session.add(flashcard)
        self._commit("create flashcard")
        self.session.refresh(flashcard)
        logger.info(f"Created flashcard {flashcard.id}")
        return flashcard

    def get_all(self) -> List[Flashcard]:
        query = select(Flashcard).order_by(Flashcard.created_at.desc(), Flashcard.id.desc())  # type: ignore
        try:
            return list(self.session.exec(query).all())
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing flashcards: {e}")
            raise DependencyError("failed to retrieve flashcards") from e

    def get_by_id(self, flashcard_id: int) -> Flashcard:
        try:
            flashcard = self.session.get(Flashcard, flashcard_id)
        except SQLAlchemyError as e:
            logger.error(f"Database error while loading flashcard {flashcard_id}: {e}")
            raise DependencyError("failed to retrieve flashcard") from e
        if not flashcard:
            raise NotFoundError(f"flashcard with id {flashcard_id} not found")
        return flashcard

    def update(
        self,
        flashcard_id: int,
        question: Optional[str] = None,
        answer: Optional[str] = None
    ) -> Flashcard:
        flashcard = self.get_by_id(flashcard_id)

        if question is not None:
            flashcard.question = question
        if answer is not None:
            flashcard.answer = answer
        flashcard.updated_at = utcnow()

        self.session.add(flashcard)
        self._commit("update flashcard")
        self.session.refresh(flashcard)
        logger.info(f"Updated flashcard {flashcard_id}")
        return flashcard

    def delete(self, flashcard_id: int) -> None:
        flashcard = self.get_by_id(flashcard_id)
        self.session.delete(flashcard)
        self._commit("delete flashcard")
        logger.info(f"Deleted flashcard {flashcard_id}")

    def get_random(self) -> Flashcard:
        try:
            flashcard = self.session.exec(
                select(Flashcard).order_by(func.random()).limit(1)
            ).first()
        except SQLAlchemyError as e:
            logger.error(f"Database error while picking a random flashcard: {e}")
            raise DependencyError("failed to retrieve flashcard") from e
        if not flashcard:
            raise NotFoundError("no flashcards found")
        return flashcard
