#!/usr/bin/env python3
"""Basic usage of the DroneMobile client.

Lists the vehicles on the account and shows the status of the first one.
Pass a command keyword (e.g. ``lock``, ``unlock``, ``start``) to also send
that command to the first vehicle.

Usage:
    export DRONEMOBILE_USERNAME=your_username
    export DRONEMOBILE_PASSWORD=your_password
    python examples/basic_usage.py [start|stop|lock|unlock|trunk|aux1|aux2|location]

Set DRONEMOBILE_LOG_LEVEL=DEBUG to see every request.
"""

import asyncio
import json
import logging
import os
import sys

from dronemobile import (
    AuthenticationError,
    ConfigurationError,
    DroneMobileClient,
    DroneMobileConfig,
    DroneMobileError,
)

ACTIONS = ("start", "stop", "lock", "unlock", "trunk", "aux1", "aux2", "location")


def print_separator(title: str = "") -> None:
    """Print a visual separator."""
    if title:
        print(f"\n{'=' * 60}")
        print(f"  {title}")
        print(f"{'=' * 60}")
    else:
        print("-" * 60)


async def main() -> int:
    logging.basicConfig(
        level=os.environ.get("DRONEMOBILE_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    action = sys.argv[1] if len(sys.argv) > 1 else None
    if action is not None and action not in ACTIONS:
        print(f"Unknown action {action!r}; expected one of: {', '.join(ACTIONS)}")
        return 1

    try:
        config = DroneMobileConfig.from_env()
    except ConfigurationError as exc:
        print(exc)
        print(__doc__)
        return 1

    try:
        client = await DroneMobileClient.from_config(config)
    except AuthenticationError as exc:
        print(exc)
        return 1

    async with client:
        try:
            vehicles = await client.list_vehicles()
            print_separator("VEHICLES")
            for vehicle in vehicles:
                print(f"  {vehicle.device_key}: {vehicle.name}")

            if not vehicles:
                print("No vehicles found for this account.")
                return 0

            first = vehicles[0]
            print_separator(f"STATUS {first.device_key}")
            status = await client.status(first.device_key)
            print(json.dumps(status, indent=2, default=str))

            if action is not None:
                print_separator(f"{action.upper()} {first.device_key}")
                result = await getattr(first, action)()
                if isinstance(result, str):
                    print(result)
                else:
                    print(json.dumps(result, indent=2, default=str))
        except DroneMobileError as exc:
            print(f"{type(exc).__name__}: {exc}")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
