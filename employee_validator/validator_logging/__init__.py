"""
Structured logging for Employee Validator.

JSON logs with timestamp, event_type and request_id.
Use get_logger() in all modules for aggregation-friendly output.
"""

from employee_validator.validator_logging.logger import get_logger

__all__ = ["get_logger"]
