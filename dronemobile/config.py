"""Client configuration for dronemobile."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from .const import ACCOUNTS_URL, API_URL, AUTH_CLIENT_ID, AUTH_REGION
from .exceptions import ConfigurationError

_ENV_CONFIG_MAP = {
    "DRONEMOBILE_USERNAME": "username",
    "DRONEMOBILE_PASSWORD": "password",
    "DRONEMOBILE_API_URL": "api_url",
    "DRONEMOBILE_ACCOUNTS_URL": "accounts_url",
    "DRONEMOBILE_AUTH_REGION": "auth_region",
    "DRONEMOBILE_AUTH_CLIENT_ID": "auth_client_id",
}


@dataclasses.dataclass(frozen=True)
class DroneMobileConfig:
    """Client configuration.

    Parameters
    ----------
    username : str
        DroneMobile account email.
    password : str
        DroneMobile account password.
    api_url : str
        Base URL of the vehicle API.
    accounts_url : str
        Base URL of the accounts API that accepts commands.
    auth_region : str
        AWS region of the Cognito user pool.
    auth_client_id : str
        Cognito app client ID.
    timeout : float or None
        Total request timeout in seconds. ``None`` keeps aiohttp's default.
    """

    username: str
    password: str
    api_url: str = API_URL
    accounts_url: str = ACCOUNTS_URL
    auth_region: str = AUTH_REGION
    auth_client_id: str = AUTH_CLIENT_ID
    timeout: float | None = None

    def __repr__(self) -> str:
        return (
            f"DroneMobileConfig(username={self.username!r}, password='***', "
            f"api_url={self.api_url!r}, accounts_url={self.accounts_url!r})"
        )

    @classmethod
    def from_env(cls, **overrides: Any) -> DroneMobileConfig:
        """Create configuration from environment variables.

        Reads ``DRONEMOBILE_USERNAME`` and ``DRONEMOBILE_PASSWORD``, plus the
        optional ``DRONEMOBILE_API_URL``, ``DRONEMOBILE_ACCOUNTS_URL``,
        ``DRONEMOBILE_AUTH_REGION``, ``DRONEMOBILE_AUTH_CLIENT_ID`` and
        ``DRONEMOBILE_TIMEOUT``. Explicit keyword arguments override
        environment values.

        Raises
        ------
        ConfigurationError
            If the credentials are missing or the timeout is not a number.
        """
        env = os.environ

        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val:
                config_kwargs[field_name] = val

        timeout_env = env.get("DRONEMOBILE_TIMEOUT")
        if timeout_env and "timeout" not in overrides:
            try:
                config_kwargs["timeout"] = float(timeout_env)
            except ValueError as e:
                raise ConfigurationError(
                    f"DRONEMOBILE_TIMEOUT must be a number, got {timeout_env!r}"
                ) from e

        config_kwargs.update(overrides)

        missing = [
            name for name in ("username", "password") if not config_kwargs.get(name)
        ]
        if missing:
            raise ConfigurationError(
                "Missing required configuration: " + ", ".join(missing)
            )

        return cls(**config_kwargs)
