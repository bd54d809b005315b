"""
Script to clear all rows from the flashcards table.
"""
import sys
from sqlmodel import Session, text
from flashcards.core.config import settings
from flashcards.core.database import engine
from flashcards.core.logging_config import configure_logging
import logging

logger = logging.getLogger(__name__)


def clear_tables():
    """Delete every flashcard."""
    with Session(engine) as session:
        try:
            logger.info("Deleting all flashcards...")
            result = session.exec(text("DELETE FROM flashcards"))
            logger.info("Deleted %s flashcards", getattr(result, 'rowcount', 'unknown'))
            session.commit()
            logger.info("Successfully cleared flashcards table")
        except Exception as e:
            session.rollback()
            logger.error("Error clearing tables: %s", e, exc_info=True)
            raise


if __name__ == "__main__":
    configure_logging(settings.log_level)
    logger.info("Starting table clearing...")
    try:
        clear_tables()
        logger.info("Successfully completed!")
    except Exception as e:
        logger.error("Error during table clearing: %s", e, exc_info=True)
        sys.exit(1)
