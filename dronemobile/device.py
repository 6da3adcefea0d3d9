"""Vehicle wrapper with high-level helper methods.

A `Vehicle` binds one record from the vehicle list to the client so that
commands can be sent without repeating the device key.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .api import DroneMobileClient


class Vehicle:
    """A vehicle on a DroneMobile account.

    Attributes:
        device_key: The device key used to target commands.
        name: The vehicle name (if available).
        info: The raw vehicle record from the last list call.
    """

    def __init__(self, client: DroneMobileClient, info: dict[str, Any]) -> None:
        """Initialize the vehicle wrapper.

        Args:
            client: The DroneMobileClient instance for API calls.
            info: The vehicle record as returned by the vehicle list.
        """
        self._client = client
        self._info = info
        self._last_refresh: datetime | None = None

    @property
    def device_key(self) -> str:
        """Return the device key."""
        return str(self._info.get("device_key", ""))

    @property
    def name(self) -> str | None:
        """Return the vehicle name."""
        return self._info.get("vehicle_name") or self._info.get("name")

    @property
    def info(self) -> dict[str, Any]:
        """Return the raw vehicle record."""
        return self._info

    @property
    def last_refresh(self) -> datetime | None:
        """Return when the record was last refreshed."""
        return self._last_refresh

    async def refresh(self) -> bool:
        """Re-read this vehicle's record from the vehicle list.

        Returns:
            True if the vehicle is still listed. The previous record is
            kept when it is not.
        """
        record = await self._client.status(self.device_key)
        if record is None:
            return False
        self._info = record
        self._last_refresh = datetime.now(timezone.utc)
        return True

    async def send_command(self, command: str) -> str:
        """Send a raw command keyword to the vehicle."""
        return await self._client.send_command(self.device_key, command)

    async def start(self) -> str:
        return await self._client.start(self.device_key)

    async def stop(self) -> str:
        return await self._client.stop(self.device_key)

    async def lock(self) -> str:
        return await self._client.lock(self.device_key)

    async def unlock(self) -> str:
        return await self._client.unlock(self.device_key)

    async def trunk(self) -> str:
        return await self._client.trunk(self.device_key)

    async def aux1(self) -> str:
        return await self._client.aux1(self.device_key)

    async def aux2(self) -> str:
        return await self._client.aux2(self.device_key)

    async def location(self) -> Any:
        """Request the vehicle's location."""
        return await self._client.location(self.device_key)

    def __repr__(self) -> str:
        return f"Vehicle(device_key={self.device_key!r}, name={self.name!r})"
