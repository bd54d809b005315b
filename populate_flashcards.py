"""
Script to import flashcards from a tab-separated file.

Each non-blank line is:
    question<TAB>answer[<TAB>question_lang<TAB>answer_lang]

Lines starting with '#' are comments. Either side may be left empty as long as
both language codes are given; the missing side is then filled by AI translation,
exactly as through the API.
"""
import sys
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from sqlmodel import Session
from flashcards.core.config import settings
from flashcards.core.database import engine, init_db
from flashcards.core.exceptions import FlashcardsException
from flashcards.core.logging_config import configure_logging
from flashcards.repositories.flashcard_repository import FlashcardRepository
from flashcards.schemas.flashcard import CreateFlashcardRequest
from flashcards.services.flashcard_service import FlashcardService
from flashcards.services.translation_service import get_translation_client

logger = logging.getLogger(__name__)


@dataclass
class ImportSummary:
    created: int = 0
    translated: int = 0
    failed: int = 0


def parse_flashcard_line(line: str) -> Optional[CreateFlashcardRequest]:
    """
    Parse one line of the import file.

    Returns None for blank and comment lines.

    Raises:
        ValueError: if the line has the wrong number of columns
    """
    stripped = line.rstrip("\r\n")
    if (not stripped.strip() and "\t" not in stripped) or stripped.lstrip().startswith("#"):
        return None

    columns = [column.strip() for column in stripped.split("\t")]
    if len(columns) not in (2, 4):
        raise ValueError(f"expected 2 or 4 tab-separated columns, got {len(columns)}")

    if len(columns) == 2:
        question, answer = columns
        return CreateFlashcardRequest(question=question, answer=answer)

    question, answer, question_lang, answer_lang = columns
    return CreateFlashcardRequest(
        question=question,
        answer=answer,
        question_lang=question_lang,
        answer_lang=answer_lang,
    )


def populate_flashcards(file_path: Path, service: FlashcardService) -> ImportSummary:
    """Create a flashcard for every valid line in file_path."""
    summary = ImportSummary()

    with open(file_path, 'r', encoding='utf-8') as f:
        for line_num, line in enumerate(f, 1):
            try:
                request = parse_flashcard_line(line)
            except ValueError as e:
                logger.warning("Skipping line %d: %s", line_num, e)
                summary.failed += 1
                continue
            if request is None:
                continue

            try:
                result = service.create_flashcard(request)
            except FlashcardsException as e:
                logger.warning("Could not import line %d: %s: %s", line_num, type(e).__name__, e)
                summary.failed += 1
                continue

            summary.created += 1
            if result.ai_translation_used:
                summary.translated += 1

    logger.info(
        "Imported %d flashcards (%d AI-translated), %d lines failed",
        summary.created, summary.translated, summary.failed
    )
    return summary


if __name__ == "__main__":
    configure_logging(settings.log_level)

    if len(sys.argv) > 1:
        import_path = Path(sys.argv[1])
    else:
        import_path = Path(__file__).parent / "flashcards.tsv"

    if not import_path.exists():
        logger.error("File not found: %s", import_path)
        sys.exit(1)

    logger.info("Starting flashcard import from %s...", import_path)
    try:
        init_db()
        with Session(engine) as session:
            flashcard_service = FlashcardService(
                repository=FlashcardRepository(session),
                translator=get_translation_client(settings),
                hint_source_language=settings.hint_source_language,
                hint_default_language=settings.hint_default_language,
            )
            populate_flashcards(import_path, flashcard_service)
        logger.info("Successfully completed!")
    except Exception as e:
        logger.error("Error during flashcard import: %s", e, exc_info=True)
        sys.exit(1)
