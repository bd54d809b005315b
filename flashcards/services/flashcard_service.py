"""
Flashcard service: business rules for creating, updating and reading flashcards.

Creating a card with one side missing fills that side with an AI translation of
the other before anything is stored. Hints for randomly fetched cards are best
effort and never fail the request.
"""
import enum
import logging
from dataclasses import dataclass
from typing import List, Optional

from flashcards.core.exceptions import (
    ConfigurationError,
    FlashcardsException,
    TranslationError,
    ValidationError,
)
from flashcards.models.flashcard import Flashcard
from flashcards.repositories.flashcard_repository import FlashcardRepository
from flashcards.schemas.flashcard import (
    CreateFlashcardRequest,
    TranslatedField,
    UpdateFlashcardRequest,
)
from flashcards.services.translation_service import TranslationClient

logger = logging.getLogger(__name__)

MISSING_LANGUAGES_MESSAGE = "Both question_lang and answer_lang are required when translation is needed"


class CreatePlan(enum.Enum):
    """What a create request needs before it can be stored."""
    BOTH_PROVIDED = "both_provided"
    NEEDS_ANSWER = "needs_answer"
    NEEDS_QUESTION = "needs_question"
    BOTH_MISSING = "both_missing"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def classify_create_request(request: CreateFlashcardRequest) -> CreatePlan:
    has_question = not _is_blank(request.question)
    has_answer = not _is_blank(request.answer)
    if has_question and has_answer:
        return CreatePlan.BOTH_PROVIDED
    if has_question:
        return CreatePlan.NEEDS_ANSWER
    if has_answer:
        return CreatePlan.NEEDS_QUESTION
    return CreatePlan.BOTH_MISSING


@dataclass
class CreateFlashcardResult:
    flashcard: Flashcard
    ai_translation_used: bool = False
    translated_field: Optional[TranslatedField] = None


class FlashcardService:
    """Orchestrates the repository and the translation client."""

    def __init__(
        self,
        repository: FlashcardRepository,
        translator: TranslationClient,
        hint_source_language: str = "en",
        hint_default_language: str = "el"
    ):
        self.repository = repository
        self.translator = translator
        self.hint_source_language = hint_source_language
        self.hint_default_language = hint_default_language

    def create_flashcard(self, request: CreateFlashcardRequest) -> CreateFlashcardResult:
        """
        Create a flashcard, translating the missing side if there is one.

        Raises:
            ValidationError: both sides empty, or a side is missing without both language codes
            ConfigurationError: a side is missing and AI translation is disabled
            TranslationError: the translation provider failed; nothing is stored
        """
        plan = classify_create_request(request)

        if plan is CreatePlan.BOTH_MISSING:
            raise ValidationError("both question and answer are empty")

        if plan is CreatePlan.BOTH_PROVIDED:
            flashcard = self.repository.create(request.question.strip(), request.answer.strip())
            return CreateFlashcardResult(flashcard=flashcard)

        if _is_blank(request.question_lang) or _is_blank(request.answer_lang):
            raise ValidationError(MISSING_LANGUAGES_MESSAGE)

        if not self.translator.enabled:
            raise ConfigurationError("AI translation not available")

        question_lang = request.question_lang.strip()
        answer_lang = request.answer_lang.strip()

        if plan is CreatePlan.NEEDS_ANSWER:
            question = request.question.strip()
            answer = self._translate(question, question_lang, answer_lang, "question to answer")
            translated_field: TranslatedField = "answer"
        else:
            answer = request.answer.strip()
            question = self._translate(answer, answer_lang, question_lang, "answer to question")
            translated_field = "question"

        flashcard = self.repository.create(question, answer)
        logger.info(f"Created flashcard {flashcard.id} with AI-translated {translated_field}")
        return CreateFlashcardResult(
            flashcard=flashcard,
            ai_translation_used=True,
            translated_field=translated_field,
        )

    def _translate(self, text: str, source_lang: str, target_lang: str, direction: str) -> str:
        try:
            translated = self.translator.translate(text, source_lang, target_lang)
        except TranslationError as e:
            raise TranslationError(f"failed to translate {direction}: {e}") from e

        translated = (translated or "").strip()
        if not translated:
            raise TranslationError(f"failed to translate {direction}: empty translation")
        return translated

    def get_all_flashcards(self) -> List[Flashcard]:
        return self.repository.get_all()

    def get_flashcard(self, flashcard_id: int) -> Flashcard:
        return self.repository.get_by_id(flashcard_id)

    def update_flashcard(self, flashcard_id: int, request: UpdateFlashcardRequest) -> Flashcard:
        if request.question is None and request.answer is None:
            raise ValidationError("at least one field must be provided for update")
        if request.question is not None and _is_blank(request.question):
            raise ValidationError("question cannot be empty")
        if request.answer is not None and _is_blank(request.answer):
            raise ValidationError("answer cannot be empty")

        return self.repository.update(
            flashcard_id,
            question=request.question.strip() if request.question is not None else None,
            answer=request.answer.strip() if request.answer is not None else None,
        )

    def delete_flashcard(self, flashcard_id: int) -> None:
        self.repository.delete(flashcard_id)

    def get_random_flashcard(self) -> Flashcard:
        return self.repository.get_random()

    def generate_hint(self, flashcard: Flashcard, lang: str = "") -> Optional[str]:
        """
        Translate the card's question into `lang` as a hint.

        Returns None instead of raising when AI is disabled or the provider fails.
        """
        if not self.translator.enabled:
            logger.debug("AI hint generation not available: translation disabled")
            return None

        target_lang = lang.strip() if lang and lang.strip() else self.hint_default_language
        try:
            hint = self.translator.translate(flashcard.question, self.hint_source_language, target_lang)
        except FlashcardsException as e:
            logger.warning(f"AI hint generation failed for flashcard {flashcard.id}: {e}")
            return None
        except Exception as e:
            logger.warning(f"AI hint generation failed unexpectedly for flashcard {flashcard.id}: {e}", exc_info=True)
            return None

        hint = (hint or "").strip()
        return hint or None
