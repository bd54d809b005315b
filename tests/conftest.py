"""Pytest configuration and fixtures."""

import os

# Settings are read at import time, so the environment must be in place first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["GOOGLE_GEMINI_API_KEY"] = ""
os.environ["GOOGLE_TRANSLATE_API_KEY"] = ""

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

from flashcards.api.dependencies import get_translator  # noqa: E402
from flashcards.core.database import get_session  # noqa: E402
from flashcards.main import app  # noqa: E402
from flashcards.models.flashcard import Flashcard  # noqa: E402
from flashcards.repositories.flashcard_repository import FlashcardRepository  # noqa: E402
from flashcards.services.translation_service import TranslationClient  # noqa: E402
from tests.fakes import FakeTranslator  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite://"

# Create test engine
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    SQLModel.metadata.create_all(test_engine)

    with Session(test_engine) as session:
        yield session

    SQLModel.metadata.drop_all(test_engine)


@pytest.fixture
def repository(db_session: Session) -> FlashcardRepository:
    return FlashcardRepository(db_session)


@pytest.fixture
def translator() -> FakeTranslator:
    return FakeTranslator()


@pytest.fixture
def sample_flashcard(repository: FlashcardRepository) -> Flashcard:
    return repository.create("hello", "γεια σας")


def _make_client(db_session: Session, translator: TranslationClient) -> TestClient:
    def override_get_session() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_translator] = lambda: translator
    return TestClient(app)


@pytest.fixture
def client(db_session: Session, translator: FakeTranslator) -> Generator[TestClient, Any, None]:
    """Create a test client with the test database session and a fake translator."""
    with _make_client(db_session, translator) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def client_without_ai(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client whose translator is disabled, as when no API key is set."""
    from flashcards.services.translation_service import DisabledTranslationClient

    with _make_client(db_session, DisabledTranslationClient()) as test_client:
        yield test_client

    app.dependency_overrides.clear()
