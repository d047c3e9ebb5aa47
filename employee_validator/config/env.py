"""
Environment variable loading for Employee Validator.

- AI_PROVIDER: languagetool | openai | gemini (default: languagetool)
- OPENAI_API_KEY / OPENAI_MODEL: OpenAI chat completions backend
- GEMINI_API_KEY / GEMINI_MODEL: Google Gemini generateContent backend
- LANGUAGETOOL_URL / LANGUAGETOOL_LANGUAGE: free grammar checker (always available)
- AI_TIMEOUT_SEC: bound on every outbound provider call (default: 8 seconds)
- API_HOST / API_PORT / CORS_ORIGINS: HTTP server
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

# Project root: config is employee_validator/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

SUPPORTED_PROVIDERS = ("languagetool", "openai", "gemini")
DEFAULT_PROVIDER = "languagetool"

DEFAULT_OPENAI_MODEL = "gpt-3.5-turbo"
DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"
DEFAULT_LANGUAGETOOL_URL = "https://api.languagetool.org/v2/check"
DEFAULT_LANGUAGETOOL_LANGUAGE = "en-US"
DEFAULT_AI_TIMEOUT_SEC = 8.0

DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 3000


def load_validator_env() -> None:
    """Load .env from project root. Safe to call multiple times."""
    try:
        from dotenv import load_dotenv
        load_dotenv(_ENV_PATH)
    except ImportError:
        pass


def _get(name: str, default: str = "") -> str:
    return (os.getenv(name) or default).strip()


def get_ai_provider() -> str:
    """
    Return AI_PROVIDER from env: languagetool | openai | gemini.
    Unknown values resolve to languagetool.
    """
    load_validator_env()
    raw = _get("AI_PROVIDER", DEFAULT_PROVIDER).lower()
    return raw if raw in SUPPORTED_PROVIDERS else DEFAULT_PROVIDER


def get_openai_api_key() -> str:
    load_validator_env()
    return _get("OPENAI_API_KEY")


def get_openai_model() -> str:
    load_validator_env()
    return _get("OPENAI_MODEL", DEFAULT_OPENAI_MODEL) or DEFAULT_OPENAI_MODEL


def get_gemini_api_key() -> str:
    load_validator_env()
    return _get("GEMINI_API_KEY")


def get_gemini_model() -> str:
    load_validator_env()
    return _get("GEMINI_MODEL", DEFAULT_GEMINI_MODEL) or DEFAULT_GEMINI_MODEL


def get_languagetool_url() -> str:
    load_validator_env()
    return _get("LANGUAGETOOL_URL", DEFAULT_LANGUAGETOOL_URL) or DEFAULT_LANGUAGETOOL_URL


def get_languagetool_language() -> str:
    load_validator_env()
    return _get("LANGUAGETOOL_LANGUAGE", DEFAULT_LANGUAGETOOL_LANGUAGE) or DEFAULT_LANGUAGETOOL_LANGUAGE


def get_ai_timeout_sec() -> float:
    """Return AI_TIMEOUT_SEC; invalid or non-positive values use the default."""
    load_validator_env()
    try:
        value = float(_get("AI_TIMEOUT_SEC", str(DEFAULT_AI_TIMEOUT_SEC)))
    except ValueError:
        return DEFAULT_AI_TIMEOUT_SEC
    return value if value > 0 else DEFAULT_AI_TIMEOUT_SEC


def get_api_host() -> str:
    load_validator_env()
    return _get("API_HOST", DEFAULT_API_HOST) or DEFAULT_API_HOST


def get_api_port() -> int:
    load_validator_env()
    try:
        return int(_get("API_PORT", str(DEFAULT_API_PORT)))
    except ValueError:
        return DEFAULT_API_PORT


def get_cors_origins() -> list[str]:
    """Comma-separated CORS_ORIGINS; default allows all origins."""
    load_validator_env()
    origins = [o.strip() for o in _get("CORS_ORIGINS", "*").split(",") if o.strip()]
    return origins or ["*"]
