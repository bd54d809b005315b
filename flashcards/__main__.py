"""
Run the API server: python -m flashcards
"""
import uvicorn

from flashcards.core.config import settings
from flashcards.core.logging_config import configure_logging


def main() -> None:
    configure_logging(settings.log_level)
    uvicorn.run(
        "flashcards.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
