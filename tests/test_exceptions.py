"""Tests for exception classes."""

import pytest

from dronemobile.exceptions import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    CommandError,
    ConfigurationError,
    ConnectionError,
    DroneMobileError,
    InvalidParameterError,
    NotAuthenticatedError,
    TimeoutError,
    VehicleListError,
)


class TestDroneMobileError:
    """Tests for base DroneMobileError."""

    def test_basic_message(self):
        """Test basic error with message."""
        error = DroneMobileError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_empty_message(self):
        """Test error with empty message."""
        assert DroneMobileError().message == ""

    @pytest.mark.parametrize(
        "cls",
        [
            AuthenticationError,
            NotAuthenticatedError,
            AuthorizationError,
            ConfigurationError,
            ApiError,
            ConnectionError,
            TimeoutError,
        ],
    )
    def test_hierarchy(self, cls):
        """Test that every error derives from DroneMobileError."""
        assert issubclass(cls, DroneMobileError)


class TestNotAuthenticatedError:
    """Tests for NotAuthenticatedError."""

    def test_default_message(self):
        """Test the default message."""
        assert str(NotAuthenticatedError()) == "Not logged in"


class TestApiError:
    """Tests for ApiError."""

    def test_with_status_code(self):
        """Test error with status code."""
        error = ApiError("Bad request", status_code=400)
        assert error.status_code == 400
        assert str(error) == "Bad request (HTTP 400)"

    def test_without_status_code(self):
        """Test error without status code."""
        error = ApiError("Something failed")
        assert error.status_code is None
        assert str(error) == "Something failed"

    def test_response_body(self):
        """Test error keeps the response body."""
        error = ApiError("Error", status_code=500, response_body={"error": "x"})
        assert error.response_body == {"error": "x"}


class TestVehicleListError:
    """Tests for VehicleListError."""

    def test_message_names_status(self):
        """Test the message names the status code."""
        error = VehicleListError(503)
        assert str(error) == "Failed to get vehicles: 503"
        assert error.status_code == 503
        assert isinstance(error, ApiError)


class TestCommandError:
    """Tests for CommandError."""

    def test_generic_message(self):
        """Test that the message never carries the underlying cause."""
        error = CommandError(
            "arm", "ABC123", status_code=500, response_body={"error": "offline"}
        )
        assert str(error) == "Command failed"
        assert error.message == "Command failed"
        assert error.command == "arm"
        assert error.device_key == "ABC123"
        assert error.status_code == 500
        assert error.response_body == {"error": "offline"}


class TestInvalidParameterError:
    """Tests for InvalidParameterError."""

    def test_basic(self):
        """Test basic invalid parameter error."""
        error = InvalidParameterError("limit", 0)
        assert error.parameter == "limit"
        assert error.value == 0
        assert str(error) == "Invalid parameter 'limit': 0"

    def test_with_reason(self):
        """Test invalid parameter error with reason."""
        error = InvalidParameterError("limit", 10, "not allowed when all is true")
        assert "(not allowed when all is true)" in str(error)
