"""Authentication for the DroneMobile API.

Credentials are exchanged for an ID token with the AWS Cognito user pool
that backs DroneMobile accounts. The token is held for the lifetime of a
client; there is no refresh and nothing is persisted.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Protocol

from .const import AUTH_CLIENT_ID, AUTH_FLOW, COGNITO_CONTENT_TYPE, COGNITO_TARGET
from .exceptions import (
    ApiError,
    AuthenticationError,
    DroneMobileError,
    NotAuthenticatedError,
)

if TYPE_CHECKING:
    from .transport import AiohttpTransport

_LOGGER = logging.getLogger(__name__)


class CredentialExchanger(Protocol):
    """Anything that turns a username and password into a bearer token."""

    async def exchange(self, username: str, password: str) -> str:
        """Return a token for the given credentials."""
        ...


class CognitoCredentialExchanger:
    """Exchange credentials for a token with Cognito ``InitiateAuth``.

    Args:
        transport: Transport bound to the Cognito endpoint of the region.
        client_id: The Cognito app client ID.
    """

    def __init__(
        self,
        transport: AiohttpTransport,
        client_id: str = AUTH_CLIENT_ID,
    ) -> None:
        self._transport = transport
        self._client_id = client_id

    async def exchange(self, username: str, password: str) -> str:
        """Authenticate with the user pool and return the ID token.

        Raises:
            AuthenticationError: If the provider rejects the request or
                the response carries no ID token.
        """
        payload = {
            "AuthFlow": AUTH_FLOW,
            "ClientId": self._client_id,
            "AuthParameters": {
                "USERNAME": username,
                "PASSWORD": password,
            },
        }
        headers = {
            "X-Amz-Target": COGNITO_TARGET,
            "Content-Type": COGNITO_CONTENT_TYPE,
        }

        try:
            data = await self._transport.request(
                "POST", "/", data=json.dumps(payload), headers=headers
            )
        except DroneMobileError as e:
            raise AuthenticationError(
                f"Authentication failed: {_provider_message(e)}"
            ) from e

        if not isinstance(data, dict):
            raise AuthenticationError("Authentication failed: invalid response")

        if challenge := data.get("ChallengeName"):
            raise AuthenticationError(
                f"Authentication failed: unsupported challenge {challenge}"
            )

        result = data.get("AuthenticationResult") or {}
        id_token = result.get("IdToken")
        if not id_token:
            raise AuthenticationError("Authentication failed: IdToken is missing")

        return str(id_token)


def _provider_message(error: DroneMobileError) -> str:
    """Pull the provider's own message out of a failed request."""
    if isinstance(error, ApiError):
        body: Any = error.response_body
        if isinstance(body, str):
            try:
                body = json.loads(body)
            except ValueError:
                return body or error.message
        if isinstance(body, dict):
            message = body.get("message") or body.get("Message") or body.get("__type")
            if message:
                return str(message)
    return error.message or str(error)


@dataclass(frozen=True)
class Session:
    """Authentication state of a client.

    A new Session replaces the old one on every login; it is never
    mutated in place.
    """

    access_token: str | None = None
    obtained_at: datetime | None = None

    @property
    def is_authenticated(self) -> bool:
        """Return True if a token is held."""
        return bool(self.access_token)


class AuthManager:
    """Holds the session for a client and performs login.

    Args:
        exchanger: The credential exchanger to log in with.
        username: DroneMobile account username/email.
        password: DroneMobile account password.
    """

    def __init__(
        self,
        exchanger: CredentialExchanger,
        username: str | None = None,
        password: str | None = None,
    ) -> None:
        self._exchanger = exchanger
        self._username = username
        self._password = password
        self._session = Session()

    @property
    def session(self) -> Session:
        """Return the current session."""
        return self._session

    @property
    def is_authenticated(self) -> bool:
        """Return True if a token is held."""
        return self._session.is_authenticated

    async def login(self) -> str:
        """Exchange the configured credentials for a token.

        May be called again to establish a new session; the previous
        token is simply replaced.

        Returns:
            The access token.

        Raises:
            AuthenticationError: If credentials are missing or the
                exchange fails.
        """
        if not self._username or not self._password:
            raise AuthenticationError("Username and password are required for login")

        _LOGGER.debug("Logging into the API")
        token = await self._exchanger.exchange(self._username, self._password)
        self._session = Session(
            access_token=token,
            obtained_at=datetime.now(timezone.utc),
        )
        _LOGGER.debug("Access token obtained")
        return token

    def require_token(self) -> str:
        """Return the held token.

        Raises:
            NotAuthenticatedError: If login has not succeeded yet.
        """
        token = self._session.access_token
        if not token:
            raise NotAuthenticatedError()
        return token

    def clear(self) -> None:
        """Drop the current session."""
        self._session = Session()
