"""Error hierarchy for backend access.

Transport failures (`httpx.TransportError`) and body decode failures
(`json.JSONDecodeError`) are deliberately absent: they reach callers as-is.
"""

from __future__ import annotations

from typing import Any


class RigBuilderError(Exception):
    """Base for all rigbuilder errors."""


class ApiError(RigBuilderError):
    """The backend answered, but not with something usable."""


class HTTPStatusFailure(ApiError):
    """Non-2xx response on a path that requires success."""

    def __init__(self, status_code: int, reason: str, url: str | None = None) -> None:
        self.status_code = status_code
        self.reason = reason
        self.url = url
        super().__init__(f"HTTP {status_code}: {reason}")


class ResponseValidationError(ApiError):
    """Parsed body does not conform to the expected shape."""

    prefix = "Invalid API response: "

    def __init__(self, issues: list[str], errors: list[dict[str, Any]] | None = None) -> None:
        self.issues = issues
        self.errors = errors or []
        super().__init__(self.prefix + ", ".join(issues))
