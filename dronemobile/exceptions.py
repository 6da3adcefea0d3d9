"""Exceptions for the DroneMobile client library."""

from __future__ import annotations

from typing import Any


class DroneMobileError(Exception):
    """Base exception for all DroneMobile client errors."""

    def __init__(self, message: str = "", *args: Any) -> None:
        self.message = message
        super().__init__(message, *args)


class AuthenticationError(DroneMobileError):
    """Raised when the credential exchange is rejected or malformed."""


class NotAuthenticatedError(DroneMobileError):
    """Raised when an authenticated operation is called before login."""

    def __init__(self, message: str = "Not logged in") -> None:
        super().__init__(message)


class AuthorizationError(DroneMobileError):
    """Raised when the user is not authorized to perform an action."""


class ConfigurationError(DroneMobileError):
    """Raised when required configuration is missing or invalid."""


class ApiError(DroneMobileError):
    """Raised when the API returns an error response."""

    def __init__(
        self,
        message: str = "",
        status_code: int | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body

    def __str__(self) -> str:
        if self.status_code:
            return f"{self.message} (HTTP {self.status_code})"
        return self.message


class VehicleListError(ApiError):
    """Raised when a vehicle list page request fails."""

    def __init__(self, status_code: int, response_body: Any = None) -> None:
        super().__init__(
            f"Failed to get vehicles: {status_code}",
            status_code=status_code,
            response_body=response_body,
        )

    def __str__(self) -> str:
        return self.message


class CommandError(ApiError):
    """Raised when the command endpoint rejects a command.

    The message is always ``"Command failed"``; the response body is kept
    on the exception for diagnostics.
    """

    def __init__(
        self,
        command: str,
        device_key: str,
        status_code: int | None = None,
        response_body: Any = None,
    ) -> None:
        self.command = command
        self.device_key = device_key
        super().__init__(
            "Command failed",
            status_code=status_code,
            response_body=response_body,
        )

    def __str__(self) -> str:
        return self.message


class ConnectionError(DroneMobileError):
    """Raised when a connection to the API cannot be established."""


class TimeoutError(DroneMobileError):
    """Raised when an API request times out."""


class InvalidParameterError(DroneMobileError):
    """Raised when an invalid parameter is provided."""

    def __init__(self, parameter: str, value: Any, reason: str | None = None) -> None:
        self.parameter = parameter
        self.value = value
        self.reason = reason
        msg = f"Invalid parameter '{parameter}': {value}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
