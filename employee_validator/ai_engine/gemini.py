"""
Google Gemini backend — generateContent REST endpoint over httpx.

Needs GEMINI_API_KEY. Gemini tends to wrap JSON in markdown fences; they are
stripped before decoding.
"""

from __future__ import annotations

from typing import Any

import httpx

from employee_validator.ai_engine.llm import GEMINI_PROMPT, analysis_to_result, parse_json_content
from employee_validator.ai_engine.models import AIAnalysisResult, AIProvider
from employee_validator.config.env import DEFAULT_AI_TIMEOUT_SEC, DEFAULT_GEMINI_MODEL
from employee_validator.core.exceptions import (
    AIConfigurationError,
    AIProviderError,
    AIResponseError,
    AITimeoutError,
)

GEMINI_URL_TEMPLATE = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"


def extract_candidate_text(payload: Any) -> str:
    """First candidate's first text part; raises AIResponseError on any other shape."""
    name = AIProvider.GEMINI.value
    if not isinstance(payload, dict):
        raise AIResponseError(name, "Invalid Gemini response structure")
    if payload.get("error"):
        error = payload["error"]
        message = error.get("message") if isinstance(error, dict) else str(error)
        raise AIResponseError(name, message or "Gemini API error")
    candidates = payload.get("candidates")
    if not candidates:
        raise AIResponseError(name, "Invalid Gemini response structure")
    try:
        return candidates[0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise AIResponseError(name, "Invalid Gemini response structure") from e


class GeminiChecker:
    """TextQualityChecker backed by Google Gemini."""

    provider = AIProvider.GEMINI

    def __init__(
        self,
        api_key: str,
        *,
        model: str = DEFAULT_GEMINI_MODEL,
        timeout: float = DEFAULT_AI_TIMEOUT_SEC,
        client: httpx.Client | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._client = client

    @property
    def url(self) -> str:
        return GEMINI_URL_TEMPLATE.format(model=self.model)

    def _post(self, body: dict[str, Any]) -> httpx.Response:
        params = {"key": self.api_key}
        if self._client is not None:
            return self._client.post(self.url, params=params, json=body, timeout=self.timeout)
        with httpx.Client(timeout=self.timeout) as client:
            return client.post(self.url, params=params, json=body)

    def check(self, text: str) -> AIAnalysisResult:
        name = self.provider.value
        if not self.api_key:
            raise AIConfigurationError(name, "Gemini API key not configured")

        body = {"contents": [{"parts": [{"text": GEMINI_PROMPT.format(text=text)}]}]}
        try:
            resp = self._post(body)
            payload = resp.json()
        except httpx.TimeoutException as e:
            raise AITimeoutError(name, f"Gemini timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            raise AIProviderError(name, f"Gemini request failed: {e}") from e
        except ValueError as e:
            raise AIResponseError(name, "Failed to process Gemini response") from e

        # Error bodies carry {"error": {...}}; extract_candidate_text reports their message
        if resp.is_error and not (isinstance(payload, dict) and payload.get("error")):
            raise AIProviderError(name, f"Gemini HTTP {resp.status_code}")
        content = extract_candidate_text(payload)
        return analysis_to_result(self.provider, parse_json_content(self.provider, content))
