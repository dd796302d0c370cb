"""Tests for OpenAIClient."""

import json
from unittest.mock import patch

import httpx
import openai
import pytest
from openai import OpenAI
from openai.types.chat import ChatCompletion
from pydantic import SecretStr

from songvocab.analyzer.models import DifficultyBand
from songvocab.exceptions import LLMAPIError, LLMResponseError, TranslationError
from songvocab.llm.client import OpenAIClient

REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


def completion(content: str | None, choices: bool = True) -> ChatCompletion:
    return ChatCompletion.model_validate(
        {
            "id": "chatcmpl-test",
            "object": "chat.completion",
            "created": 0,
            "model": "gpt-test",
            "choices": [
                {
                    "index": 0,
                    "finish_reason": "stop",
                    "message": {"role": "assistant", "content": content},
                }
            ]
            if choices
            else [],
        }
    )


def status_error(error_class, status_code: int, message: str = "", body=None):
    return error_class(
        message, response=httpx.Response(status_code, request=REQUEST), body=body
    )


def _client(mock_settings, mock_openai) -> OpenAIClient:
    return OpenAIClient(settings_obj=mock_settings, client=mock_openai)


def _request(mock_openai) -> dict:
    return mock_openai.chat.completions.create.call_args.kwargs


class TestOpenAIClientInit:
    def test_requires_api_key(self, mock_settings):
        mock_settings.openai_api_key = SecretStr("")
        with pytest.raises(LLMAPIError, match="API key is required"):
            OpenAIClient(settings_obj=mock_settings)

    def test_accepts_key_directly(self, mock_settings, mock_openai):
        mock_settings.openai_api_key = SecretStr("")
        client = OpenAIClient(api_key="sk-direct", settings_obj=mock_settings, client=mock_openai)
        assert client._api_key == "sk-direct"

    def test_uses_settings(self, mock_settings, mock_openai):
        client = _client(mock_settings, mock_openai)
        assert client._api_key == "sk-test-key-123456"
        assert client._max_retries == 3
        assert client._retry_delay == 0.0

    def test_builds_sdk_client_without_sdk_retries(self, mock_settings):
        client = OpenAIClient(settings_obj=mock_settings)
        assert isinstance(client._client, OpenAI)
        assert client._client.max_retries == 0
        assert client._client.api_key == "sk-test-key-123456"


class TestChat:
    def test_returns_content(self, mock_settings, mock_openai):
        mock_openai.chat.completions.create.return_value = completion("hello")
        client = _client(mock_settings, mock_openai)

        assert client.chat([{"role": "user", "content": "hi"}], model="gpt-test") == "hello"

        request = _request(mock_openai)
        assert request["model"] == "gpt-test"
        assert request["messages"] == [{"role": "user", "content": "hi"}]
        assert "response_format" not in request
        assert "max_tokens" not in request

    def test_json_mode(self, mock_settings, mock_openai):
        mock_openai.chat.completions.create.return_value = completion("{}")
        client = _client(mock_settings, mock_openai)

        client.chat([], model="gpt-test", json_mode=True, max_tokens=10)

        request = _request(mock_openai)
        assert request["response_format"] == {"type": "json_object"}
        assert request["max_tokens"] == 10

    def test_empty_content_raises(self, mock_settings, mock_openai):
        mock_openai.chat.completions.create.return_value = completion(None)
        client = _client(mock_settings, mock_openai)

        with pytest.raises(LLMAPIError, match="No response"):
            client.chat([], model="gpt-test")

    def test_missing_choices_raises(self, mock_settings, mock_openai):
        mock_openai.chat.completions.create.return_value = completion("x", choices=False)
        client = _client(mock_settings, mock_openai)

        with pytest.raises(LLMAPIError, match="No response"):
            client.chat([], model="gpt-test")

    def test_client_error_not_retried(self, mock_settings, mock_openai):
        mock_openai.chat.completions.create.side_effect = status_error(
            openai.AuthenticationError,
            401,
            "Error code: 401",
            body={"message": "Invalid API key", "type": "invalid_request_error"},
        )
        client = _client(mock_settings, mock_openai)

        with pytest.raises(LLMAPIError) as exc_info:
            client.chat([], model="gpt-test")

        assert exc_info.value.status_code == 401
        assert "Invalid API key" in exc_info.value.message
        assert mock_openai.chat.completions.create.call_count == 1

    def test_client_error_without_body_uses_message(self, mock_settings, mock_openai):
        mock_openai.chat.completions.create.side_effect = status_error(
            openai.BadRequestError, 400, "Bad Request"
        )
        client = _client(mock_settings, mock_openai)

        with pytest.raises(LLMAPIError, match="400 - Bad Request"):
            client.chat([], model="gpt-test")

    @patch("songvocab.llm.client.time.sleep")
    def test_server_error_retried(self, mock_sleep, mock_settings, mock_openai):
        mock_openai.chat.completions.create.side_effect = [
            status_error(openai.InternalServerError, 503, "Service Unavailable"),
            completion("ok"),
        ]
        client = _client(mock_settings, mock_openai)

        assert client.chat([], model="gpt-test") == "ok"
        assert mock_openai.chat.completions.create.call_count == 2
        mock_sleep.assert_called_once()

    @patch("songvocab.llm.client.time.sleep")
    def test_retries_exhausted(self, mock_sleep, mock_settings, mock_openai):
        mock_openai.chat.completions.create.side_effect = openai.APIConnectionError(
            request=REQUEST
        )
        client = _client(mock_settings, mock_openai)

        with pytest.raises(LLMAPIError, match="failed after 3 attempts"):
            client.chat([], model="gpt-test")

        assert mock_openai.chat.completions.create.call_count == 3
        assert mock_sleep.call_count == 2

    @patch("songvocab.llm.client.time.sleep")
    def test_rate_limit_status_kept(self, mock_sleep, mock_settings, mock_openai):
        mock_openai.chat.completions.create.side_effect = status_error(
            openai.RateLimitError, 429, "Too Many Requests"
        )
        client = _client(mock_settings, mock_openai)

        with pytest.raises(LLMAPIError) as exc_info:
            client.chat([], model="gpt-test")

        assert exc_info.value.status_code == 429
        assert mock_openai.chat.completions.create.call_count == 3

    def test_exponential_backoff(self, mock_settings, mock_openai):
        mock_openai.chat.completions.create.side_effect = openai.APITimeoutError(request=REQUEST)
        client = OpenAIClient(
            settings_obj=mock_settings, client=mock_openai, max_retries=3, retry_delay=1.0
        )

        with patch("songvocab.llm.client.time.sleep") as mock_sleep:
            with pytest.raises(LLMAPIError):
                client.chat([], model="gpt-test")

        assert [call.args[0] for call in mock_sleep.call_args_list] == [1.0, 2.0]


class TestDetectLanguage:
    def test_first_line(self, mock_settings, mock_openai):
        mock_openai.chat.completions.create.return_value = completion("Spanish\nbecause...")
        client = _client(mock_settings, mock_openai)

        assert client.detect_language("Hola, que tal") == "Spanish"
        request = _request(mock_openai)
        assert request["model"] == mock_settings.detection_model
        assert "Hola, que tal" in request["messages"][1]["content"]

    def test_blank_defaults_to_english(self, mock_settings, mock_openai):
        mock_openai.chat.completions.create.return_value = completion("   \n")
        client = _client(mock_settings, mock_openai)

        assert client.detect_language("la la la") == "English"


class TestExtractCandidates:
    def test_parses_words(self, mock_settings, mock_openai):
        reply = json.dumps(
            {
                "words": [
                    {
                        "word": "troubles",
                        "difficulty": "stretch",
                        "explanation": "Plural of trouble",
                        "example": "all my troubles seemed so far away",
                    }
                ]
            }
        )
        mock_openai.chat.completions.create.return_value = completion(reply)
        client = _client(mock_settings, mock_openai)

        candidates = client.extract_candidates("lyrics", "b1", "English")

        assert len(candidates) == 1
        assert candidates[0].word == "troubles"
        assert candidates[0].difficulty is DifficultyBand.STRETCH
        request = _request(mock_openai)
        assert request["model"] == mock_settings.extraction_model
        assert request["response_format"] == {"type": "json_object"}
        assert "intermediate (B1)" in request["messages"][1]["content"]

    def test_fenced_reply(self, mock_settings, mock_openai):
        reply = '```json\n{"words": [{"word": "shadow", "difficulty": "comfortable"}]}\n```'
        mock_openai.chat.completions.create.return_value = completion(reply)
        client = _client(mock_settings, mock_openai)

        assert client.extract_candidates("lyrics", "A2")[0].word == "shadow"

    def test_invalid_reply(self, mock_settings, mock_openai):
        mock_openai.chat.completions.create.return_value = completion("not json")
        client = _client(mock_settings, mock_openai)

        with pytest.raises(LLMResponseError):
            client.extract_candidates("lyrics", "A2")


class TestTranslate:
    def test_translates(self, mock_settings, mock_openai):
        reply = json.dumps({"translations": ["problemas", "sombra"]})
        mock_openai.chat.completions.create.return_value = completion(reply)
        client = _client(mock_settings, mock_openai)

        assert client.translate(["troubles", "shadow"], "es") == ["problemas", "sombra"]
        request = _request(mock_openai)
        assert request["model"] == mock_settings.translation_model
        prompt = request["messages"][1]["content"]
        assert "Spanish" in prompt
        assert "1. troubles" in prompt
        assert "2. shadow" in prompt

    def test_empty_terms_skip_request(self, mock_settings, mock_openai):
        client = _client(mock_settings, mock_openai)

        assert client.translate([], "es") == []
        mock_openai.chat.completions.create.assert_not_called()

    def test_invalid_reply_raises_translation_error(self, mock_settings, mock_openai):
        mock_openai.chat.completions.create.return_value = completion("nope")
        client = _client(mock_settings, mock_openai)

        with pytest.raises(TranslationError):
            client.translate(["troubles"], "es")
