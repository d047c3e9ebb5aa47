"""
Application settings.

Responsibilities:
- Collect the env accessors from config.env into one typed snapshot.
- Provide defaults for every optional setting.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from employee_validator.config import env


@dataclass(frozen=True)
class Settings:
    """Snapshot of service configuration. Build with get_settings()."""

    ai_provider: str = env.DEFAULT_PROVIDER
    openai_api_key: str = ""
    openai_model: str = env.DEFAULT_OPENAI_MODEL
    gemini_api_key: str = ""
    gemini_model: str = env.DEFAULT_GEMINI_MODEL
    languagetool_url: str = env.DEFAULT_LANGUAGETOOL_URL
    languagetool_language: str = env.DEFAULT_LANGUAGETOOL_LANGUAGE
    ai_timeout_sec: float = env.DEFAULT_AI_TIMEOUT_SEC
    api_host: str = env.DEFAULT_API_HOST
    api_port: int = env.DEFAULT_API_PORT
    cors_origins: list[str] = field(default_factory=lambda: ["*"])


def get_settings() -> Settings:
    """
    Return the current application settings.

    Reads the environment on every call; nothing is cached, so tests can
    monkeypatch env vars between requests.
    """
    return Settings(
        ai_provider=env.get_ai_provider(),
        openai_api_key=env.get_openai_api_key(),
        openai_model=env.get_openai_model(),
        gemini_api_key=env.get_gemini_api_key(),
        gemini_model=env.get_gemini_model(),
        languagetool_url=env.get_languagetool_url(),
        languagetool_language=env.get_languagetool_language(),
        ai_timeout_sec=env.get_ai_timeout_sec(),
        api_host=env.get_api_host(),
        api_port=env.get_api_port(),
        cors_origins=env.get_cors_origins(),
    )
