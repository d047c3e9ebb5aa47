"""
Scoring package — deterministic field scorers and the composite aggregator.

Every scorer is a pure function of its input and the static tables in
reference_data; no state is kept between calls.
"""

from employee_validator.scoring.aggregator import (
    FIELD_SCORERS,
    field_response,
    summarize,
    validate_all,
)
from employee_validator.scoring.bio import validate_bio
from employee_validator.scoring.email_address import validate_email
from employee_validator.scoring.models import (
    AggregateSummary,
    PasswordResult,
    ValidationResult,
)
from employee_validator.scoring.name import validate_full_name
from employee_validator.scoring.password import validate_password
from employee_validator.scoring.phone import validate_cambodian_phone
from employee_validator.scoring.skills import validate_skills
from employee_validator.scoring.strength import (
    field_strength_color,
    field_strength_text,
    overall_strength_color,
    overall_strength_text,
    password_strength,
)

__all__ = [
    "FIELD_SCORERS",
    "field_response",
    "summarize",
    "validate_all",
    "validate_bio",
    "validate_email",
    "AggregateSummary",
    "PasswordResult",
    "ValidationResult",
    "validate_full_name",
    "validate_password",
    "validate_cambodian_phone",
    "validate_skills",
    "field_strength_color",
    "field_strength_text",
    "overall_strength_color",
    "overall_strength_text",
    "password_strength",
]
