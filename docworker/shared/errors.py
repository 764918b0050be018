"""
Project exception hierarchy.

Errors raised by Playwright, Pillow or botocore are never wrapped in these
types; they reach the queue unchanged.
"""

from typing import Any


class DocWorkerError(Exception):
    """Base error with a stable code and structured details."""

    code = "DOCWORKER_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigError(DocWorkerError):
    """Missing or invalid deployment setting."""

    code = "CONFIG_ERROR"


class BrowserNotFoundError(DocWorkerError):
    """The Chromium executable could not be resolved."""

    code = "BROWSER_NOT_FOUND"
