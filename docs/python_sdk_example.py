"""
Employee Validator API Python client example.

Uses the requests library. Generated from FastAPI OpenAPI schema.
Run: pip install requests

Usage:
    from docs.python_sdk_example import EmployeeValidatorClient
    client = EmployeeValidatorClient("http://localhost:3000")
    result = client.validate_phone("+855 12 345 678")
"""

from __future__ import annotations

from typing import Any

import requests


class EmployeeValidatorClientError(Exception):
    """Raised when the API returns an error response."""

    def __init__(self, message: str, status_code: int | None = None, response: requests.Response | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class EmployeeValidatorClient:
    """Client for the Employee Validator API."""

    def __init__(self, base_url: str = "http://localhost:3000", timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = requests.Session()

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
    ) -> requests.Response:
        url = f"{self.base_url}{path}"
        resp = self._session.request(method, url, json=json, timeout=self.timeout)
        if not resp.ok:
            if resp.headers.get("content-type", "").startswith("application/json"):
                body = resp.json()
                detail = body.get("detail") or body.get("error") or resp.text
            else:
                detail = resp.text
            raise EmployeeValidatorClientError(
                f"API error: {detail}",
                status_code=resp.status_code,
                response=resp,
            )
        return resp

    def check_password(self, password: str) -> dict[str, Any]:
        """Password strength tier (0-10) with requirement flags."""
        return self._request("POST", "/check-password", json={"password": password}).json()

    def validate_name(self, name: str) -> dict[str, Any]:
        return self._request("POST", "/validate-name", json={"name": name}).json()

    def validate_email(self, email: str) -> dict[str, Any]:
        return self._request("POST", "/validate-email", json={"email": email}).json()

    def validate_phone(self, phone: str) -> dict[str, Any]:
        """Cambodian phone number, local or +855 format."""
        return self._request("POST", "/validate-phone", json={"phone": phone}).json()

    def validate_bio(self, bio: str, *, use_ai: bool = False) -> dict[str, Any]:
        """Rule-based bio score, or the AI-enriched score when use_ai=True."""
        path = "/validate-bio-ai" if use_ai else "/validate-bio"
        return self._request("POST", path, json={"bio": bio}).json()

    def validate_skills(self, skills: str | list[str]) -> dict[str, Any]:
        """Skills as a comma-separated string or a list (joined with commas)."""
        if isinstance(skills, list):
            skills = ", ".join(skills)
        return self._request("POST", "/validate-skills", json={"skills": skills}).json()

    def validate_all(
        self,
        *,
        name: str = "",
        email: str = "",
        phone: str = "",
        bio: str = "",
        skills: str = "",
    ) -> dict[str, Any]:
        """All five profile fields; summary score is out of 100."""
        body = {"name": name, "email": email, "phone": phone, "bio": bio, "skills": skills}
        return self._request("POST", "/validate-all", json=body).json()

    def ai_status(self) -> dict[str, Any]:
        return self._request("GET", "/ai-status").json()

    def health(self) -> dict[str, str]:
        """Liveness probe."""
        return self._request("GET", "/health").json()


# -----------------------------------------------------------------------------
# Example usage
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    client = EmployeeValidatorClient("http://localhost:3000")

    print("Health:", client.health())
    print("AI status:", client.ai_status())

    pw = client.check_password("x9#Lm$Qv7&Rt2@Wz")
    print("Password:", pw["strength"], pw["strengthText"])

    phone = client.validate_phone("+855 12 345 678")
    print("Phone:", phone["score"], phone["details"].get("carrier"))

    report = client.validate_all(
        name="Sok Dara",
        email="sok.dara@gmail.com",
        phone="+855 12 345 678",
        bio="Backend engineer with six years of experience building payment services.",
        skills="Python, FastAPI, PostgreSQL",
    )
    summary = report["summary"]
    print("Overall:", summary["score"], "/", summary["maxScore"], summary["strengthText"])
