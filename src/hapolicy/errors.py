"""Error hierarchy for the hapolicy package."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "PolicyError",
    "ConfigNotFoundError",
    "ConfigError",
    "MatchLimitExceededError",
    "InvalidResourceError",
    "ErrorCodes",
]


class PolicyError(Exception):
    """Base error for all hapolicy errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(PolicyError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(PolicyError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class MatchLimitExceededError(PolicyError):
    """Raised when a pattern or candidate is too long to match safely.

    This is a resource-limit condition and never stands for a plain
    non-match.
    """

    def __init__(self, subject: str, length: int, limit: int, **kwargs: Any) -> None:
        super().__init__(
            code="MATCH_LIMIT_EXCEEDED",
            message=f"{subject.capitalize()} length {length} exceeds limit {limit}",
            details={"subject": subject, "length": length, "limit": limit},
            **kwargs,
        )

    @property
    def subject(self) -> str:
        """Which input was too long: 'pattern' or 'candidate'."""
        return self.details["subject"]

    @property
    def length(self) -> int:
        """The offending input length in code points."""
        return self.details["length"]

    @property
    def limit(self) -> int:
        """The configured maximum length."""
        return self.details["limit"]


class InvalidResourceError(PolicyError):
    """Raised when a resource identifier has no service path."""

    def __init__(self, resource: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="RESOURCE_INVALID",
            message=f"Invalid resource '{resource}': {reason}",
            details={"resource": resource, "reason": reason},
            **kwargs,
        )

    @property
    def resource(self) -> str:
        """The resource identifier that failed to parse."""
        return self.details["resource"]


class ErrorCodes:
    """All hapolicy error codes as constants.

    Example:
        if error.code == ErrorCodes.MATCH_LIMIT_EXCEEDED:
            deny_request()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    MATCH_LIMIT_EXCEEDED = "MATCH_LIMIT_EXCEEDED"
    RESOURCE_INVALID = "RESOURCE_INVALID"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
