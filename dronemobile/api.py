"""High-level DroneMobile API client.

This module provides the main entry point for interacting with the
DroneMobile cloud: listing the vehicles on an account and sending remote
commands to them.
"""

from __future__ import annotations

import asyncio
import logging
import ssl
from typing import TYPE_CHECKING, Any

import aiohttp

from .auth import AuthManager, CognitoCredentialExchanger, CredentialExchanger, Session
from .const import (
    ACCOUNTS_URL,
    API_URL,
    AUTH_CLIENT_ID,
    AUTH_REGION,
    CMD_ARM,
    CMD_DISARM,
    CMD_LOCATION,
    CMD_REMOTE_AUX1,
    CMD_REMOTE_AUX2,
    CMD_REMOTE_START,
    CMD_REMOTE_STOP,
    CMD_TRUNK,
    COMMAND_CONTENT_TYPE,
    COMMAND_TOKEN_HEADER,
    SEND_COMMAND_PATH,
    VEHICLE_LIST_PATH,
    cognito_url,
)
from .device import Vehicle
from .exceptions import CommandError, VehicleListError
from .models import Command, VehicleListOptions, VehiclePage
from .transport import AiohttpTransport, TransportResponse

if TYPE_CHECKING:
    from .config import DroneMobileConfig

_LOGGER = logging.getLogger(__name__)


class DroneMobileClient:
    """High-level async client for the DroneMobile API.

    The DroneMobile cloud is split across three services:
    - AWS Cognito for authentication
    - the vehicle API for listing vehicles (bearer token)
    - the accounts API for remote commands (``x-drone-api`` token)

    Example usage with context manager (recommended):
        async with await DroneMobileClient.create(username, password) as client:
            for vehicle in await client.vehicles():
                print(await client.lock(vehicle["device_key"]))

    Example usage with manual lifecycle:
        client = await DroneMobileClient.create(username, password)
        try:
            status = await client.status(device_key)
        finally:
            await client.close()
    """

    def __init__(
        self,
        username: str | None = None,
        password: str | None = None,
        *,
        api_url: str = API_URL,
        accounts_url: str = ACCOUNTS_URL,
        auth_region: str = AUTH_REGION,
        auth_client_id: str = AUTH_CLIENT_ID,
        session: aiohttp.ClientSession | None = None,
        timeout: float | None = None,
        ssl_context: ssl.SSLContext | None = None,
        credential_exchanger: CredentialExchanger | None = None,
    ) -> None:
        """Initialize the client.

        Note: Use the `create()` classmethod to get a logged-in client.

        Args:
            username: DroneMobile account username/email.
            password: DroneMobile account password.
            api_url: URL of the vehicle API.
            accounts_url: URL of the accounts (command) API.
            auth_region: AWS region of the Cognito user pool.
            auth_client_id: Cognito app client ID.
            session: Optional existing aiohttp session to use.
            timeout: Request timeout in seconds; aiohttp's default if None.
            ssl_context: Optional SSL context for custom certificates.
            credential_exchanger: Optional replacement for the Cognito
                credential exchange.
        """
        self._api_url = api_url.rstrip("/")
        self._accounts_url = accounts_url.rstrip("/")

        self._api_transport = AiohttpTransport(
            api_url, session=session, timeout=timeout, ssl_context=ssl_context
        )
        self._accounts_transport = AiohttpTransport(
            accounts_url, session=session, timeout=timeout, ssl_context=ssl_context
        )
        self._auth_transport = AiohttpTransport(
            cognito_url(auth_region),
            session=session,
            timeout=timeout,
            ssl_context=ssl_context,
        )

        if credential_exchanger is None:
            credential_exchanger = CognitoCredentialExchanger(
                self._auth_transport, client_id=auth_client_id
            )
        self._auth = AuthManager(credential_exchanger, username, password)
        self._closed = False

    @classmethod
    async def create(
        cls, username: str, password: str, **kwargs: Any
    ) -> DroneMobileClient:
        """Create a new client and log in.

        Args:
            username: DroneMobile account username/email.
            password: DroneMobile account password.
            **kwargs: Any keyword accepted by the constructor.

        Returns:
            An authenticated DroneMobileClient instance.

        Raises:
            AuthenticationError: If login fails.
        """
        client = cls(username, password, **kwargs)
        try:
            await client.login()
        except Exception:
            await client.close()
            raise
        return client

    @classmethod
    async def from_config(
        cls, config: DroneMobileConfig, **kwargs: Any
    ) -> DroneMobileClient:
        """Create and log in a client from a `DroneMobileConfig`."""
        return await cls.create(
            config.username,
            config.password,
            api_url=config.api_url,
            accounts_url=config.accounts_url,
            auth_region=config.auth_region,
            auth_client_id=config.auth_client_id,
            timeout=config.timeout,
            **kwargs,
        )

    async def __aenter__(self) -> DroneMobileClient:
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager and clean up resources."""
        await self.close()

    @property
    def is_authenticated(self) -> bool:
        """Return True if the client holds a session token."""
        return self._auth.is_authenticated

    @property
    def session(self) -> Session:
        """Return the current session."""
        return self._auth.session

    async def login(self) -> None:
        """Log in and replace the session token."""
        await self._auth.login()

    async def vehicles(
        self,
        *,
        all: bool = True,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[dict[str, Any]]:
        """Get the vehicles tied to the account.

        Args:
            all: Fetch every page. ``limit`` and ``offset`` must be unset.
            limit: Page size when ``all`` is False (default 100).
            offset: Offset of the page when ``all`` is False (default 0).

        Returns:
            Vehicle records in offset order.

        Raises:
            NotAuthenticatedError: If not logged in.
            InvalidParameterError: If the options are inconsistent.
            VehicleListError: If any page request fails.
        """
        options = VehicleListOptions(all=all, limit=limit, offset=offset)
        token = self._auth.require_token()
        _LOGGER.debug("Fetching vehicles from API")

        first = await self._fetch_page(token, options.page_size, options.start)
        vehicles = list(first.results)

        if options.all:
            remaining = first.remaining_offsets()
            if remaining:
                _LOGGER.debug("Fetching %d more vehicle pages", len(remaining))
                pages = await asyncio.gather(
                    *(
                        self._fetch_page(token, first.limit, page_offset)
                        for page_offset in remaining
                    ),
                    return_exceptions=True,
                )
                for page in pages:
                    if isinstance(page, BaseException):
                        raise page
                for page in pages:
                    vehicles.extend(page.results)

        return vehicles

    async def _fetch_page(self, token: str, limit: int, offset: int) -> VehiclePage:
        response = await self._api_transport.send(
            "GET",
            VEHICLE_LIST_PATH,
            params={"limit": limit, "offset": offset},
            headers={"authorization": f"Bearer {token}"},
        )
        if not response.ok:
            raise VehicleListError(response.status, response.body)
        return VehiclePage.from_api(response.body, limit=limit, offset=offset)

    async def list_vehicles(self) -> list[Vehicle]:
        """List every vehicle on the account as `Vehicle` wrappers."""
        return [Vehicle(self, record) for record in await self.vehicles()]

    async def _dispatch(self, vehicle_id: str, command: str) -> TransportResponse:
        token = self._auth.require_token()
        _LOGGER.debug("Sending command '%s' to vehicle '%s'", command, vehicle_id)

        response = await self._accounts_transport.send(
            "POST",
            SEND_COMMAND_PATH,
            json=Command(command, vehicle_id).to_payload(),
            headers={
                "content-type": COMMAND_CONTENT_TYPE,
                COMMAND_TOKEN_HEADER: token,
            },
        )

        if not response.ok:
            _LOGGER.error(
                "Command '%s' failed with HTTP %s: %s",
                command,
                response.status,
                response.body,
            )
            raise CommandError(
                command,
                vehicle_id,
                status_code=response.status,
                response_body=response.body,
            )
        return response

    async def send_command(self, vehicle_id: str, command: str) -> str:
        """Send a command to a vehicle.

        The command keyword is passed through as given.

        Args:
            vehicle_id: Device key of the vehicle to target.
            command: Command keyword to send.

        Returns:
            ``"<command> command was successful!"``

        Raises:
            NotAuthenticatedError: If not logged in.
            CommandError: If the command endpoint returns a non-2xx status.
        """
        await self._dispatch(vehicle_id, command)
        return f"{command} command was successful!"

    async def start(self, vehicle_id: str) -> str:
        """Start the vehicle."""
        return await self.send_command(vehicle_id, CMD_REMOTE_START)

    async def stop(self, vehicle_id: str) -> str:
        """Stop the vehicle."""
        return await self.send_command(vehicle_id, CMD_REMOTE_STOP)

    async def lock(self, vehicle_id: str) -> str:
        """Lock the vehicle."""
        return await self.send_command(vehicle_id, CMD_ARM)

    async def unlock(self, vehicle_id: str) -> str:
        """Unlock the vehicle."""
        return await self.send_command(vehicle_id, CMD_DISARM)

    async def trunk(self, vehicle_id: str) -> str:
        """Open the trunk of the vehicle."""
        return await self.send_command(vehicle_id, CMD_TRUNK)

    async def aux1(self, vehicle_id: str) -> str:
        """Trigger the AUX1 action on the vehicle."""
        return await self.send_command(vehicle_id, CMD_REMOTE_AUX1)

    async def aux2(self, vehicle_id: str) -> str:
        """Trigger the AUX2 action on the vehicle."""
        return await self.send_command(vehicle_id, CMD_REMOTE_AUX2)

    async def location(self, vehicle_id: str) -> Any:
        """Request the location of the vehicle.

        Returns:
            The command endpoint's response body, unparsed.
        """
        _LOGGER.debug("Getting vehicle location")
        response = await self._dispatch(vehicle_id, CMD_LOCATION)
        return response.body

    async def status(self, vehicle_id: str) -> dict[str, Any] | None:
        """Get the current record of a vehicle.

        Returns:
            The first listed record with a matching device key, or None.
        """
        _LOGGER.debug("Getting vehicle status")
        for record in await self.vehicles(all=True):
            if record.get("device_key") == vehicle_id:
                return record
        return None

    async def close(self) -> None:
        """Close the client and release resources."""
        if self._closed:
            return

        self._closed = True
        await self._auth_transport.close()
        await self._api_transport.close()
        await self._accounts_transport.close()
