"""
Custom exceptions for the esimqa suite.

This module defines the exceptions raised by the suite's own helpers.
Driver timeouts and network errors from Playwright are never wrapped;
they propagate as they are.
"""

from typing import TYPE_CHECKING, Any, Optional, Sequence

if TYPE_CHECKING:
    from .soft_assert import AssertionFailure


class EsimQAError(Exception):
    """Base exception for all esimqa errors."""

    def __init__(self, message: str,
                 details: Optional[dict[str, Any]] = None) -> None:
        """
        Initialize the base exception.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


# Configuration Exceptions
class ConfigurationError(EsimQAError):
    """Base exception for configuration-related errors."""


class MissingConfigError(ConfigurationError):
    """Raised when a required configuration value is missing."""

    def __init__(
        self, config_key: str, details: Optional[dict[str, Any]] = None
    ) -> None:
        """
        Initialize missing config error.

        Args:
            config_key: The missing configuration key.
            details: Optional dictionary with additional error details.
        """
        super().__init__(
            f"Missing required configuration: '{config_key}'", details)
        self.config_key = config_key


class InvalidConfigError(ConfigurationError):
    """Raised when a configuration value is invalid."""

    def __init__(
        self,
        config_key: str,
        value: Any,
        reason: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize invalid config error.

        Args:
            config_key: The configuration key with invalid value.
            value: The invalid value.
            reason: Optional reason why the value is invalid.
            details: Optional dictionary with additional error details.
        """
        message = f"Invalid configuration value for '{config_key}': {value}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, details)
        self.config_key = config_key
        self.value = value
        self.reason = reason


# API Exceptions
class ApiError(EsimQAError):
    """Base exception for partner API errors."""


class TokenRequestError(ApiError):
    """Raised when the client-credentials exchange does not yield a token."""

    def __init__(
        self,
        status: int,
        reason: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize token request error.

        Args:
            status: HTTP status returned by the token endpoint.
            reason: Why the response could not be used.
            details: Optional dictionary with additional error details.
        """
        super().__init__(
            f"Token request failed with status {status}: {reason}", details)
        self.status = status
        self.reason = reason


# Assertion Exceptions
class SoftAssertionError(AssertionError):
    """Raised once, at the end of a scenario, for all recorded mismatches.

    Subclasses AssertionError so pytest reports a test failure, not an
    error. The message is every failure line joined by newlines.
    """

    def __init__(self, failures: "Sequence[AssertionFailure]") -> None:
        self.failures = tuple(failures)
        super().__init__("\n".join(f.message for f in self.failures))
