"""
Pytest fixtures for Employee Validator tests.

AI provider env vars are cleared for every test so nothing depends on the
developer's shell or .env; no test touches the network.
"""

from __future__ import annotations

import pytest

AI_ENV_VARS = (
    "AI_PROVIDER",
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "GEMINI_API_KEY",
    "GEMINI_MODEL",
    "LANGUAGETOOL_URL",
    "LANGUAGETOOL_LANGUAGE",
    "AI_TIMEOUT_SEC",
    "CORS_ORIGINS",
)

GOOD_BIO = (
    "Backend engineer with six years of experience building payment services "
    "and APIs for banks in Phnom Penh."
)


@pytest.fixture(autouse=True)
def clean_ai_env(monkeypatch):
    """Default configuration: LanguageTool provider, no API keys."""
    for name in AI_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def client():
    """FastAPI TestClient over the full app (middleware, routers, error handlers)."""
    from fastapi.testclient import TestClient

    from employee_validator.api_server.server import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def good_bio() -> str:
    """105-character bio that earns the maximum rule-based score (18)."""
    return GOOD_BIO
