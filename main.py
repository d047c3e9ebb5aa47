"""
Main entrypoint: run the Employee Validator API with uvicorn.

Env: API_HOST, API_PORT, AI_PROVIDER, OPENAI_API_KEY, GEMINI_API_KEY, LOG_LEVEL, etc.

Equivalent: uvicorn employee_validator.api_server.app:app --host 0.0.0.0 --port 3000
"""

import os

# Configure structured JSON logging before other imports that may log
from employee_validator.validator_logging import get_logger

logger = get_logger("main")


def main() -> None:
    """Run the FastAPI server in the main thread."""
    from employee_validator.config import get_settings

    settings = get_settings()

    from employee_validator.api_server.app import app
    import uvicorn

    logger.info("main_server_starting", host=settings.api_host, port=settings.api_port)
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
