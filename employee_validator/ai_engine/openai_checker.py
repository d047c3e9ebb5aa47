"""
OpenAI backend — chat completions in JSON mode.

Needs OPENAI_API_KEY; without it check() raises AIConfigurationError and
the service falls back to LanguageTool.
"""

from __future__ import annotations

from typing import Any

import openai
from openai import OpenAI

from employee_validator.ai_engine.llm import OPENAI_PROMPT, analysis_to_result, parse_json_content
from employee_validator.ai_engine.models import AIAnalysisResult, AIProvider
from employee_validator.config.env import DEFAULT_AI_TIMEOUT_SEC, DEFAULT_OPENAI_MODEL
from employee_validator.core.exceptions import (
    AIConfigurationError,
    AIProviderError,
    AIResponseError,
    AITimeoutError,
)


class OpenAIChecker:
    """TextQualityChecker backed by OpenAI chat completions."""

    provider = AIProvider.OPENAI

    def __init__(
        self,
        api_key: str,
        *,
        model: str = DEFAULT_OPENAI_MODEL,
        timeout: float = DEFAULT_AI_TIMEOUT_SEC,
        client: Any | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._client = client

    def _get_client(self) -> Any:
        if self._client is None:
            if not self.api_key:
                raise AIConfigurationError(self.provider.value, "OpenAI API key not configured")
            # No SDK retries: the only retry is the LanguageTool fallback
            self._client = OpenAI(api_key=self.api_key, timeout=self.timeout, max_retries=0)
        return self._client

    def check(self, text: str) -> AIAnalysisResult:
        name = self.provider.value
        client = self._get_client()
        try:
            resp = client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": OPENAI_PROMPT.format(text=text)}],
                temperature=0.3,
                response_format={"type": "json_object"},
            )
        except openai.APITimeoutError as e:
            raise AITimeoutError(name, f"OpenAI timed out after {self.timeout}s") from e
        except openai.OpenAIError as e:
            raise AIProviderError(name, str(e) or "OpenAI request failed") from e

        try:
            content = resp.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            raise AIResponseError(name, "Failed to parse OpenAI response") from e
        return analysis_to_result(self.provider, parse_json_content(self.provider, content))
