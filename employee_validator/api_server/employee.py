"""
FastAPI router: employee profile field validation.

POST /validate-name, /validate-email, /validate-phone, /validate-bio,
/validate-bio-ai, /validate-skills, /validate-all and GET /ai-status.
Each field endpoint returns the field result plus the 20-point strength label.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, Field

from employee_validator.ai_engine import enrichment
from employee_validator.ai_engine.service import get_ai_provider_info
from employee_validator.scoring.aggregator import field_response, validate_all
from employee_validator.scoring.bio import validate_bio
from employee_validator.scoring.email_address import validate_email
from employee_validator.scoring.name import validate_full_name
from employee_validator.scoring.phone import validate_cambodian_phone
from employee_validator.scoring.skills import validate_skills
from employee_validator.validator_logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["employee"])


# -----------------------------------------------------------------------------
# Request models
# -----------------------------------------------------------------------------

class NameRequest(BaseModel):
    name: str | None = Field(None, description="Full name, e.g. 'Sok Dara'")


class EmailRequest(BaseModel):
    email: str | None = Field(None, description="Email address")


class PhoneRequest(BaseModel):
    phone: str | None = Field(None, description="Cambodian phone number, local or +855 format")


class BioRequest(BaseModel):
    bio: str | None = Field(None, description="Short bio, at least 20 characters")


class SkillsRequest(BaseModel):
    skills: str | None = Field(None, description="Comma-separated skills")


class EmployeeRequest(BaseModel):
    """POST /validate-all body: all five profile fields."""

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    bio: str | None = None
    skills: str | None = None


# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------

def _log_field(field: str, payload: dict[str, Any]) -> dict[str, Any]:
    logger.info(
        "field_validated",
        field=field,
        valid=payload["valid"],
        score=payload["score"],
        error_count=len(payload["errors"]),
        warning_count=len(payload["warnings"]),
    )
    return payload


@router.post("/validate-name")
def validate_name_route(body: NameRequest) -> dict[str, Any]:
    return _log_field("name", field_response("name", validate_full_name(body.name)))


@router.post("/validate-email")
def validate_email_route(body: EmailRequest) -> dict[str, Any]:
    return _log_field("email", field_response("email", validate_email(body.email)))


@router.post("/validate-phone")
def validate_phone_route(body: PhoneRequest) -> dict[str, Any]:
    return _log_field("phone", field_response("phone", validate_cambodian_phone(body.phone)))


@router.post("/validate-bio")
def validate_bio_route(body: BioRequest) -> dict[str, Any]:
    """Rule-based bio check only; see /validate-bio-ai for the enriched score."""
    return _log_field("bio", field_response("bio", validate_bio(body.bio)))


@router.post("/validate-bio-ai")
def validate_bio_ai_route(body: BioRequest) -> dict[str, Any]:
    """
    Bio check enriched by the configured AI provider.

    Provider failures never fail the request: the response then carries
    aiAnalysis={"error": ...}. Invalid basic results skip the provider call
    and return aiAnalysis=null.
    """
    return _log_field("bio", enrichment.enrich_bio(body.bio))


@router.post("/validate-skills")
def validate_skills_route(body: SkillsRequest) -> dict[str, Any]:
    return _log_field("skills", field_response("skills", validate_skills(body.skills)))


@router.post("/validate-all")
def validate_all_route(body: EmployeeRequest) -> dict[str, Any]:
    """Score all five fields; summary is out of 100."""
    out = validate_all(
        name=body.name,
        email=body.email,
        phone=body.phone,
        bio=body.bio,
        skills=body.skills,
    )
    summary = out["summary"]
    logger.info(
        "employee_validated",
        valid=summary["valid"],
        score=summary["score"],
        valid_fields=summary["validFields"],
    )
    return out


@router.get("/ai-status")
def ai_status() -> dict[str, Any]:
    """Configured AI provider and which providers have API keys."""
    return get_ai_provider_info()
