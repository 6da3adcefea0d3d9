"""Data models for DroneMobile API requests and responses."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from .const import DEFAULT_LIMIT, DEFAULT_OFFSET
from .exceptions import InvalidParameterError


@dataclass(frozen=True)
class Command:
    """A command keyword aimed at one device."""

    keyword: str
    device_key: str

    def to_payload(self) -> dict[str, str]:
        """Return the JSON body expected by the command endpoint."""
        return {"deviceKey": self.device_key, "command": self.keyword}


@dataclass(frozen=True)
class VehicleListOptions:
    """Paging options for a vehicle list call.

    When ``all`` is true the whole account is fetched in pages of the
    default size, so ``limit`` and ``offset`` must be left unset.
    """

    all: bool = True
    limit: int | None = None
    offset: int | None = None

    def __post_init__(self) -> None:
        if self.all:
            if self.limit is not None:
                raise InvalidParameterError(
                    "limit", self.limit, "not allowed when all is true"
                )
            if self.offset is not None:
                raise InvalidParameterError(
                    "offset", self.offset, "not allowed when all is true"
                )
        if self.limit is not None and self.limit <= 0:
            raise InvalidParameterError("limit", self.limit, "must be positive")
        if self.offset is not None and self.offset < 0:
            raise InvalidParameterError("offset", self.offset, "must not be negative")

    @property
    def page_size(self) -> int:
        """Return the number of records requested per page."""
        return self.limit if self.limit is not None else DEFAULT_LIMIT

    @property
    def start(self) -> int:
        """Return the offset of the first page."""
        return self.offset if self.offset is not None else DEFAULT_OFFSET


@dataclass
class VehiclePage:
    """One page of the vehicle list."""

    count: int
    results: list[dict[str, Any]] = field(default_factory=list)
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET

    @classmethod
    def from_api(
        cls, data: Any, limit: int = DEFAULT_LIMIT, offset: int = DEFAULT_OFFSET
    ) -> VehiclePage:
        """Create from the list endpoint's JSON body."""
        if not isinstance(data, dict):
            return cls(count=0, results=[], limit=limit, offset=offset)

        results = [item for item in data.get("results") or [] if isinstance(item, dict)]

        try:
            count = int(data.get("count", len(results)))
        except (TypeError, ValueError):
            count = len(results)

        return cls(count=count, results=results, limit=limit, offset=offset)

    def remaining_offsets(self) -> list[int]:
        """Return the offsets of the pages after this one.

        There are ``ceil(count / limit) - 1`` of them, starting at
        ``limit`` and stepping by ``limit``.
        """
        if self.count <= self.limit:
            return []
        pages = math.ceil(self.count / self.limit) - 1
        return [(i + 1) * self.limit for i in range(pages)]
