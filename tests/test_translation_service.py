"""Tests for the translation clients."""

from typing import Any, Dict, List, Optional

import pytest
import requests

from flashcards.core.config import Settings
from flashcards.core.exceptions import ConfigurationError, TranslationError
from flashcards.services import translation_service
from flashcards.services.translation_service import (
    DisabledTranslationClient,
    GeminiTranslationClient,
    GoogleTranslateClient,
    build_translation_prompt,
    get_translation_client,
    language_name,
)


class FakeResponse:
    def __init__(self, payload: Any = None, status_code: int = 200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error", response=self)

    def json(self) -> Any:
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


class RecordingPost:
    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def __call__(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response


def gemini_payload(text: str) -> Dict[str, Any]:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


@pytest.fixture
def patch_post(monkeypatch: pytest.MonkeyPatch):
    def _patch(post: RecordingPost) -> RecordingPost:
        monkeypatch.setattr(translation_service.requests, "post", post)
        return post

    return _patch


class TestLanguageNames:
    def test_known_codes_map_to_names(self) -> None:
        assert language_name("en") == "English"
        assert language_name("el") == "Greek"
        assert language_name("EL") == "Greek"

    def test_unknown_code_falls_back_to_raw_code(self) -> None:
        assert language_name("xx") == "xx"

    def test_prompt_uses_descriptive_names(self) -> None:
        prompt = build_translation_prompt("hello", "en", "el")
        assert "from English to Greek" in prompt
        assert prompt.endswith("Text: hello")


class TestGeminiTranslationClient:
    def test_translate_returns_stripped_text(self, patch_post) -> None:
        post = patch_post(RecordingPost(FakeResponse(gemini_payload("  γεια σας\n"))))
        client = GeminiTranslationClient(api_key="key", model_name="gemini-test", timeout=10)

        assert client.translate("hello", "en", "el") == "γεια σας"

        call = post.calls[0]
        assert call["url"].endswith("/gemini-test:generateContent")
        assert call["params"] == {"key": "key"}
        assert call["timeout"] == 10
        assert "from English to Greek" in call["json"]["contents"][0]["parts"][0]["text"]

    def test_timeout_surfaces_as_translation_error(self, patch_post) -> None:
        patch_post(RecordingPost(error=requests.exceptions.Timeout("read timed out")))
        client = GeminiTranslationClient(api_key="key")

        with pytest.raises(TranslationError, match="read timed out"):
            client.translate("hello", "en", "el")

    def test_http_error_surfaces_as_translation_error(self, patch_post) -> None:
        patch_post(RecordingPost(FakeResponse({"error": {"message": "quota"}}, status_code=429)))
        client = GeminiTranslationClient(api_key="key")

        with pytest.raises(TranslationError, match="quota"):
            client.translate("hello", "en", "el")

    def test_malformed_response_is_translation_error(self, patch_post) -> None:
        patch_post(RecordingPost(FakeResponse({"candidates": []})))
        client = GeminiTranslationClient(api_key="key")

        with pytest.raises(TranslationError, match="Unexpected Gemini response format"):
            client.translate("hello", "en", "el")

    def test_empty_output_is_translation_error(self, patch_post) -> None:
        patch_post(RecordingPost(FakeResponse(gemini_payload("   "))))
        client = GeminiTranslationClient(api_key="key")

        with pytest.raises(TranslationError, match="empty translation"):
            client.translate("hello", "en", "el")

    def test_requires_api_key(self) -> None:
        with pytest.raises(ConfigurationError):
            GeminiTranslationClient(api_key="")


class TestGoogleTranslateClient:
    def test_translate_maps_codes_and_unescapes(self, patch_post) -> None:
        post = patch_post(
            RecordingPost(FakeResponse({"data": {"translations": [{"translatedText": "l&#39;ami"}]}}))
        )
        client = GoogleTranslateClient(api_key="key", timeout=5)

        assert client.translate("friend", "en", "fr") == "l'ami"

        params = post.calls[0]["params"]
        assert params["source"] == "en"
        assert params["target"] == "fr"
        assert post.calls[0]["timeout"] == 5

    def test_internal_japanese_code_is_mapped(self, patch_post) -> None:
        post = patch_post(
            RecordingPost(FakeResponse({"data": {"translations": [{"translatedText": "こんにちは"}]}}))
        )
        client = GoogleTranslateClient(api_key="key")

        client.translate("hello", "en", "jp")

        assert post.calls[0]["params"]["target"] == "ja"

    def test_unexpected_format_is_translation_error(self, patch_post) -> None:
        patch_post(RecordingPost(FakeResponse({"data": {}})))
        client = GoogleTranslateClient(api_key="key")

        with pytest.raises(TranslationError):
            client.translate("hello", "en", "el")

    def test_connection_error_is_translation_error(self, patch_post) -> None:
        patch_post(RecordingPost(error=requests.exceptions.ConnectionError("unreachable")))
        client = GoogleTranslateClient(api_key="key")

        with pytest.raises(TranslationError, match="unreachable"):
            client.translate("hello", "en", "el")


class TestDisabledTranslationClient:
    def test_is_not_enabled_and_refuses_to_translate(self) -> None:
        client = DisabledTranslationClient()

        assert client.enabled is False
        with pytest.raises(ConfigurationError, match="AI translation not available"):
            client.translate("hello", "en", "el")


class TestGetTranslationClient:
    def test_gemini_with_key(self) -> None:
        settings = Settings(
            database_url="sqlite://",
            translation_provider="gemini",
            google_gemini_api_key="key",
            gemini_model="gemini-test",
            translation_timeout_seconds=3,
        )

        client = get_translation_client(settings)

        assert isinstance(client, GeminiTranslationClient)
        assert client.model_name == "gemini-test"
        assert client.timeout == 3

    def test_google_with_key(self) -> None:
        settings = Settings(
            database_url="sqlite://", translation_provider="google", google_translate_api_key="key"
        )

        assert isinstance(get_translation_client(settings), GoogleTranslateClient)

    @pytest.mark.parametrize("provider", ["gemini", "google", "unknown"])
    def test_missing_key_disables_translation(self, provider: str) -> None:
        settings = Settings(
            database_url="sqlite://",
            translation_provider=provider,
            google_gemini_api_key="",
            google_translate_api_key="",
        )

        client = get_translation_client(settings)

        assert isinstance(client, DisabledTranslationClient)
        assert client.enabled is False
