"""
FastAPI/ASGI application entrypoint.

Build and configure the ASGI app; mount routes from server.
Run with: uvicorn employee_validator.api_server.app:app --host 0.0.0.0 --port 3000
"""

from employee_validator.api_server.server import app

__all__ = ["app"]
