"""Shared fixtures for tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from dronemobile.api import DroneMobileClient
from dronemobile.auth import Session
from dronemobile.transport import AiohttpTransport, TransportResponse


@pytest.fixture
def mock_transport():
    """Create a mock transport."""
    transport = MagicMock(spec=AiohttpTransport)
    transport.request = AsyncMock()
    transport.send = AsyncMock()
    transport.close = AsyncMock()
    transport.closed = False
    return transport


@pytest.fixture
def fake_exchanger():
    """Create a credential exchanger that always succeeds."""
    exchanger = MagicMock()
    exchanger.exchange = AsyncMock(return_value="test-token")
    return exchanger


@pytest.fixture
def sample_vehicle_data():
    """Sample vehicle record from the vehicle list."""
    return {
        "id": 1234,
        "device_key": "ABC123",
        "vehicle_name": "My Truck",
        "last_known_state": {
            "controller": {"armed": True, "engine_on": False},
        },
    }


@pytest.fixture
def client(fake_exchanger):
    """Create a client with mocked transports that has not logged in."""
    client = DroneMobileClient(
        "user@example.com",
        "password123",
        credential_exchanger=fake_exchanger,
    )
    for name in ("_api_transport", "_accounts_transport", "_auth_transport"):
        transport = MagicMock(spec=AiohttpTransport)
        transport.send = AsyncMock()
        transport.request = AsyncMock()
        transport.close = AsyncMock()
        setattr(client, name, transport)
    return client


@pytest.fixture
def logged_in_client(client):
    """Create a client with mocked transports and a held token."""
    client._auth._session = Session(access_token="test-token")
    return client


@pytest.fixture
def ok_response():
    """A successful command endpoint response."""
    return TransportResponse(200, {"command_success": True, "parsed": {}})
