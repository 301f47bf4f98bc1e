"""
Mysterio Custom Exceptions

Defines the exception classes raised by the configuration loader and the CLI.
Parse errors from malformed JSON and I/O errors are not wrapped: they reach
the caller as the standard library raised them.
"""

from typing import Any


class MysterioError(Exception):
    """Base exception class for Mysterio-specific errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for JSON serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


class ConfigurationError(MysterioError):
    """Raised when the loader is misconfigured (bad merging order, no secret name, ...)."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.config_key = config_key


class SecretStoreError(MysterioError):
    """Raised when the secret store answers with an unusable payload."""

    def __init__(
        self,
        message: str,
        secret_name: str | None = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.secret_name = secret_name
