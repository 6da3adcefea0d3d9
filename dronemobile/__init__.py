"""DroneMobile - An async Python library for the DroneMobile API.

This library provides a clean, async interface for listing the vehicles
on a DroneMobile account and sending them remote commands.

Example usage:
    from dronemobile import DroneMobileClient

    async with await DroneMobileClient.create(username, password) as client:
        for vehicle in await client.list_vehicles():
            print(vehicle.name, await vehicle.lock())
"""

from .api import DroneMobileClient
from .auth import AuthManager, CognitoCredentialExchanger, CredentialExchanger, Session
from .config import DroneMobileConfig
from .const import ACCOUNTS_URL, API_URL
from .device import Vehicle
from .exceptions import (
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
from .models import Command, VehicleListOptions, VehiclePage
from .transport import AiohttpTransport, TransportResponse

__version__ = "0.1.0"

__all__ = [
    # Main client
    "DroneMobileClient",
    "DroneMobileConfig",
    # Vehicle wrapper
    "Vehicle",
    # Data models
    "Command",
    "VehicleListOptions",
    "VehiclePage",
    # Auth
    "AuthManager",
    "CognitoCredentialExchanger",
    "CredentialExchanger",
    "Session",
    # Transport
    "AiohttpTransport",
    "TransportResponse",
    # Endpoints
    "API_URL",
    "ACCOUNTS_URL",
    # Exceptions
    "DroneMobileError",
    "AuthenticationError",
    "NotAuthenticatedError",
    "AuthorizationError",
    "ConfigurationError",
    "ApiError",
    "VehicleListError",
    "CommandError",
    "ConnectionError",
    "TimeoutError",
    "InvalidParameterError",
]
