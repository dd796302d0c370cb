"""OpenAI chat-completions client with retry logic."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any, Final

import openai
from openai import OpenAI

from songvocab.analyzer.banding import parse_level
from songvocab.analyzer.models import CEFRLevel, LLMCandidate
from songvocab.config import Settings, settings
from songvocab.exceptions import LLMAPIError, LLMResponseError, TranslationError
from songvocab.llm.languages import language_label
from songvocab.llm.parsing import parse_candidates, parse_json_content, parse_translations
from songvocab.llm.prompts import (
    LANGUAGE_DETECTION_SYSTEM,
    TRANSLATION_SYSTEM,
    build_extraction_prompt,
    build_extraction_system_prompt,
    build_language_detection_prompt,
    build_translation_prompt,
)
from songvocab.logging import get_logger

logger = get_logger("llm.client")

# Connection problems, timeouts, 429 and 5xx are worth another attempt;
# any other API error fails immediately
RETRYABLE_ERRORS: Final[tuple[type[openai.APIError], ...]] = (
    openai.APIConnectionError,
    openai.RateLimitError,
    openai.InternalServerError,
)

DEFAULT_LANGUAGE: Final[str] = "English"


class OpenAIClient:
    """Chat-completions wrapper built on the OpenAI SDK.

    Implements the candidate-extraction and translation collaborator
    interfaces used by the analyzer. The SDK's own retries are disabled;
    retries follow the settings' exponential backoff instead.
    """

    DEFAULT_MAX_RETRIES = 3
    DEFAULT_RETRY_DELAY = 1.0

    def __init__(
        self,
        api_key: str | None = None,
        settings_obj: Settings | None = None,
        client: OpenAI | None = None,
        max_retries: int | None = None,
        retry_delay: float | None = None,
    ) -> None:
        """
        Initialize OpenAIClient.

        Args:
            api_key: OpenAI API key. Falls back to settings.
            settings_obj: Settings instance. Uses global settings if None.
            client: SDK client to reuse. A new one is created if None.
            max_retries: Maximum attempts for failed requests.
            retry_delay: Base delay between retries (exponential backoff).
        """
        self._settings = settings_obj or settings
        self._api_key = api_key or self._settings.get_api_key()

        if not self._api_key:
            raise LLMAPIError("OpenAI API key is required")

        self._client = client or OpenAI(
            api_key=self._api_key,
            base_url=self._settings.openai_base_url,
            timeout=self._settings.request_timeout,
            max_retries=0,
        )
        self._max_retries = max_retries or self._settings.max_retries
        self._retry_delay = (
            retry_delay if retry_delay is not None else self._settings.retry_delay
        )

    def chat(
        self,
        messages: list[dict[str, str]],
        model: str,
        temperature: float = 0.0,
        max_tokens: int | None = None,
        json_mode: bool = False,
    ) -> str:
        """Send a chat completion request and return the reply text.

        Raises:
            LLMAPIError: If the request fails or the reply has no content.
        """
        request: dict[str, Any] = {
            "model": model,
            "messages": messages,
            "temperature": temperature,
        }
        if max_tokens is not None:
            request["max_tokens"] = max_tokens
        if json_mode:
            request["response_format"] = {"type": "json_object"}

        logger.debug("Chat request: model=%s, messages=%d", model, len(messages))
        response = self._retry_request(
            lambda: self._client.chat.completions.create(**request)
        )

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise LLMAPIError("No response from LLM")
        return str(content)

    def detect_language(self, lyrics: str) -> str:
        """Ask which language the lyrics are in.

        Returns:
            Language name in English, "English" if the reply is blank.
        """
        reply = self.chat(
            [
                {"role": "system", "content": LANGUAGE_DETECTION_SYSTEM},
                {"role": "user", "content": build_language_detection_prompt(lyrics)},
            ],
            model=self._settings.detection_model,
            temperature=0,
            max_tokens=30,
        )
        name = reply.strip().split("\n", 1)[0].strip() or DEFAULT_LANGUAGE
        logger.info("Detected lyrics language: %s", name)
        return name

    def extract_candidates(
        self,
        lyrics: str,
        level: CEFRLevel | str,
        language_label: str = DEFAULT_LANGUAGE,
    ) -> list[LLMCandidate]:
        """Ask for learnable words and phrases at a level.

        Raises:
            LLMAPIError: If the request fails.
            LLMResponseError: If the reply is not the expected JSON.
        """
        cefr_level = parse_level(level)
        reply = self.chat(
            [
                {"role": "system", "content": build_extraction_system_prompt(language_label)},
                {
                    "role": "user",
                    "content": build_extraction_prompt(lyrics, cefr_level, language_label),
                },
            ],
            model=self._settings.extraction_model,
            temperature=0.7,
            json_mode=True,
        )
        return parse_candidates(parse_json_content(reply))

    def translate(
        self,
        terms: list[str],
        target_language: str,
        source_language: str = DEFAULT_LANGUAGE,
    ) -> list[str]:
        """Translate terms into the target language, one string per term.

        Args:
            terms: Words or phrases in the source language.
            target_language: Target language code, e.g. "es".
            source_language: Name of the source language.

        Raises:
            LLMAPIError: If the request fails.
            TranslationError: If the reply is not a translations array.
        """
        if not terms:
            return []

        reply = self.chat(
            [
                {"role": "system", "content": TRANSLATION_SYSTEM},
                {
                    "role": "user",
                    "content": build_translation_prompt(
                        terms,
                        source_label=source_language,
                        target_code=target_language,
                        target_label=language_label(target_language),
                    ),
                },
            ],
            model=self._settings.translation_model,
            temperature=0.3,
            json_mode=True,
        )
        try:
            return parse_translations(parse_json_content(reply))
        except LLMResponseError as e:
            raise TranslationError(f"Invalid JSON from translation LLM: {e.message}") from e

    @staticmethod
    def _error_message(error: openai.APIStatusError) -> str:
        body = error.body
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return str(error.message or "Unknown error")

    def _retry_request(self, request_fn: Callable[[], Any], retries: int | None = None) -> Any:
        """Execute a request with retry logic and exponential backoff.

        Connection errors, timeouts, rate limits and server errors are
        retried. Other API errors, such as a rejected key, raise immediately.
        """
        retries = retries or self._max_retries
        last_error: openai.APIError | None = None

        for attempt in range(retries):
            try:
                return request_fn()
            except RETRYABLE_ERRORS as e:
                last_error = e
                logger.debug("Request attempt %d/%d failed: %s", attempt + 1, retries, e)
                if attempt < retries - 1:
                    delay = self._retry_delay * (2**attempt)
                    time.sleep(delay)
            except openai.APIStatusError as e:
                raise LLMAPIError(
                    f"LLM API error: {e.status_code} - {self._error_message(e)}",
                    status_code=e.status_code,
                ) from e

        raise LLMAPIError(
            f"Request failed after {retries} attempts: {last_error}",
            status_code=getattr(last_error, "status_code", None),
        ) from last_error
