"""Exception hierarchy for cookieless fingerprinting."""

from __future__ import annotations

from typing import Any


class CookielessError(Exception):
    """Base exception for all cookieless errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for logging or API responses."""
        result: dict[str, Any] = {"error": self.message}
        if self.details:
            result["details"] = self.details
        return result


class InvalidConfiguration(CookielessError):
    """Raised when a configuration value cannot be used.

    The typical case is a validity period of zero or less, which would
    otherwise divide the clock by zero.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result
