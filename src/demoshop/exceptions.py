"""
Custom exceptions for demoshop-e2e.

Automation-layer failures (Playwright ``Error``/``TimeoutError``) and
assertion failures are deliberately not part of this hierarchy: page
objects let them propagate unchanged so a failing step points at the
real cause.
"""

from pathlib import Path
from typing import Any, Optional


class DemoShopError(Exception):
    """Base exception for all demoshop-e2e errors."""

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
class ConfigurationError(DemoShopError):
    """Base exception for configuration-related errors."""


class MissingConfigError(ConfigurationError):
    """Raised when a required configuration value is missing."""

    def __init__(
        self,
        config_key: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize missing config error.

        Args:
            config_key: The environment variable or key that is missing.
            details: Optional dictionary with additional error details.
        """
        message = f"Missing required configuration: {config_key}"
        super().__init__(message, details)
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
            config_key: The configuration key with the invalid value.
            value: The invalid value.
            reason: Why the value was rejected.
            details: Optional dictionary with additional error details.
        """
        message = f"Invalid configuration value for '{config_key}': {value}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, details)
        self.config_key = config_key
        self.value = value
        self.reason = reason


# Credential Exceptions
class CredentialsError(DemoShopError):
    """Base exception for credential record errors."""


class CredentialsFileError(CredentialsError):
    """Raised when the credential file exists but cannot be used."""

    def __init__(
        self,
        path: Path,
        reason: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"Unusable credentials file '{path}': {reason}"
        super().__init__(message, details)
        self.path = path
        self.reason = reason
