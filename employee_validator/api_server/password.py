"""
FastAPI router: POST /check-password.

Returns the 0-10 strength tier with requirement flags. The password itself
is never logged.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, Field

from employee_validator.scoring.password import validate_password
from employee_validator.validator_logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["password"])


class PasswordRequest(BaseModel):
    """POST /check-password body."""

    password: str | None = Field(None, description="Password to score; empty or missing scores tier 0")


@router.post("/check-password")
def check_password(body: PasswordRequest) -> dict[str, Any]:
    """Score password strength: {strength, strengthText, strengthColor, requirements, analysis}."""
    result = validate_password(body.password)
    logger.debug("password_checked", strength=result.strength, complexity=result.complexity)
    return result.to_dict()
