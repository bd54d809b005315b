"""
Translation clients used to fill in a missing flashcard side and to produce hints.

Every client exposes ``translate(text, source_lang, target_lang)``. Provider
failures of any kind (timeout, HTTP error, malformed or empty response) surface
as a single TranslationError. Nothing is retried.
"""
import html
import logging
from abc import ABC, abstractmethod

import requests

from flashcards.core.config import Settings
from flashcards.core.exceptions import ConfigurationError, TranslationError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0

# Descriptive names make LLM prompts unambiguous; unknown codes are used as-is
LANGUAGE_NAMES = {
    'en': 'English',
    'el': 'Greek',
    'fr': 'French',
    'de': 'German',
    'es': 'Spanish',
    'it': 'Italian',
    'pt': 'Portuguese',
    'nl': 'Dutch',
    'ru': 'Russian',
    'ja': 'Japanese',
    'jp': 'Japanese',
    'zh': 'Chinese',
    'ar': 'Arabic',
}


def language_name(lang_code: str) -> str:
    """Return the descriptive name for a language code, or the raw code if unknown."""
    return LANGUAGE_NAMES.get(lang_code.strip().lower(), lang_code)


def build_translation_prompt(text: str, source_lang: str, target_lang: str) -> str:
    return (
        f"Translate the following text from {language_name(source_lang)} to "
        f"{language_name(target_lang)}. Provide ONLY the translation, no explanations "
        f"or additional text.\n\nText: {text}"
    )


def _describe_request_error(provider: str, e: requests.exceptions.RequestException) -> str:
    error_msg = f"{provider} request failed: {str(e)}"
    if e.response is not None:
        try:
            error_msg += f" - {e.response.json()}"
        except ValueError:
            error_msg += f" - Status: {e.response.status_code}"
    return error_msg


class TranslationClient(ABC):
    """Base class for translation providers."""

    enabled = True

    @abstractmethod
    def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        raise NotImplementedError


class DisabledTranslationClient(TranslationClient):
    """Stands in for a provider when no API key is configured."""

    enabled = False

    def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        raise ConfigurationError("AI translation not available")


class GeminiTranslationClient(TranslationClient):
    """Translates by prompting a Gemini model through the generateContent REST API."""

    BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"

    def __init__(
        self,
        api_key: str,
        model_name: str = "gemini-2.5-flash",
        timeout: float = DEFAULT_TIMEOUT_SECONDS
    ):
        if not api_key:
            raise ConfigurationError("Google Gemini API key is required")
        self.api_key = api_key
        self.model_name = model_name
        self.timeout = timeout

    def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        prompt = build_translation_prompt(text, source_lang, target_lang)
        payload = {
            "contents": [{
                "parts": [{
                    "text": prompt
                }]
            }],
            "generationConfig": {
                "temperature": 0.2,
                "maxOutputTokens": 256,
            }
        }

        logger.debug(f"Gemini translation request: '{text}' from '{source_lang}' to '{target_lang}'")

        try:
            response = requests.post(
                f"{self.BASE_URL}/{self.model_name}:generateContent",
                params={"key": self.api_key},
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout
            )
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            error_msg = _describe_request_error("Gemini API", e)
            logger.error(error_msg)
            raise TranslationError(error_msg) from e
        except ValueError as e:
            logger.error(f"Gemini API returned a non-JSON body: {e}")
            raise TranslationError(f"Gemini API returned invalid JSON: {str(e)}") from e

        try:
            translated_text = data['candidates'][0]['content']['parts'][0].get('text', '').strip()
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            logger.error(f"Unexpected Gemini response format: {data}")
            raise TranslationError(f"Unexpected Gemini response format: {data}") from e

        if not translated_text:
            raise TranslationError("Gemini returned an empty translation")

        logger.info(f"Translated '{text}' from {source_lang} to {target_lang}: '{translated_text}'")
        return translated_text


class GoogleTranslateClient(TranslationClient):
    """Translates through the Google Cloud Translation v2 REST API."""

    BASE_URL = "https://translation.googleapis.com/language/translate/v2"

    # Mapping from our internal language codes to Google Translate API codes
    LANGUAGE_CODE_MAPPING = {
        'jp': 'ja',  # Japanese: our code 'jp' -> Google API code 'ja'
    }

    def __init__(self, api_key: str, timeout: float = DEFAULT_TIMEOUT_SECONDS):
        if not api_key:
            raise ConfigurationError("Google Translate API key is required")
        self.api_key = api_key
        self.timeout = timeout

    def _map_language_code(self, lang_code: str) -> str:
        return self.LANGUAGE_CODE_MAPPING.get(lang_code.lower(), lang_code.lower())

    def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        params = {
            'key': self.api_key,
            'q': text,
            'target': self._map_language_code(target_lang),
            'format': 'text',
        }
        if source_lang:
            params['source'] = self._map_language_code(source_lang)

        logger.debug(f"Translation request: '{text}' from '{source_lang or 'auto'}' to '{target_lang}'")

        try:
            response = requests.post(self.BASE_URL, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            error_msg = _describe_request_error("Translation API", e)
            logger.error(error_msg)
            raise TranslationError(error_msg) from e
        except ValueError as e:
            logger.error(f"Translation API returned a non-JSON body: {e}")
            raise TranslationError(f"Translation API returned invalid JSON: {str(e)}") from e

        try:
            translated_text = html.unescape(data['data']['translations'][0]['translatedText']).strip()
        except (KeyError, IndexError, TypeError) as e:
            logger.error(f"Unexpected Translation API response format: {data}")
            raise TranslationError(f"Unexpected API response format: {data}") from e

        if not translated_text:
            raise TranslationError("Translation API returned an empty translation")

        logger.info(f"Translated '{text}' from {source_lang or 'auto'} to {target_lang}: '{translated_text}'")
        return translated_text


def get_translation_client(settings: Settings) -> TranslationClient:
    """
    Build the translation client named by settings.translation_provider.

    A missing API key disables AI features instead of failing startup.
    """
    provider = settings.translation_provider.strip().lower()
    timeout = settings.translation_timeout_seconds

    if provider == "gemini":
        if settings.google_gemini_api_key:
            logger.info(f"AI translation enabled with Gemini model {settings.gemini_model}")
            return GeminiTranslationClient(
                api_key=settings.google_gemini_api_key,
                model_name=settings.gemini_model,
                timeout=timeout
            )
        logger.warning("Google Gemini API key not configured. AI translation and hints are disabled.")
        return DisabledTranslationClient()

    if provider == "google":
        if settings.google_translate_api_key:
            logger.info("AI translation enabled with Google Cloud Translation")
            return GoogleTranslateClient(api_key=settings.google_translate_api_key, timeout=timeout)
        logger.warning("Google Translate API key not configured. AI translation and hints are disabled.")
        return DisabledTranslationClient()

    logger.warning(f"Unknown translation provider '{settings.translation_provider}'. AI translation is disabled.")
    return DisabledTranslationClient()
