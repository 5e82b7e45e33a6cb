"""Email/password authentication against an HTTP sign-in endpoint."""

import logging
from typing import Protocol

import httpx

from docchat.config import ClientConfig, get_client_config
from docchat.exceptions import AuthenticationError, NetworkError, ServerError

logger = logging.getLogger(__name__)

# Statuses that mean "wrong credentials" rather than "backend broken"
REJECTED_STATUSES = {400, 401, 403, 404}


class AuthBackend(Protocol):
    """Anything that can sign a user in."""

    async def sign_in(self, email: str, password: str) -> None: ...


def _error_detail(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        detail = body.get("detail") or body.get("message")
        if isinstance(detail, str):
            return detail
    return None


class HttpAuthBackend:
    """Signs in by posting the credentials to the configured auth URL.

    Any 2xx answer means the user is signed in. No token is kept.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or get_client_config()
        self._transport = transport

    async def sign_in(self, email: str, password: str) -> None:
        """Authenticate a user.

        Args:
            email: Account email.
            password: Account password.

        Raises:
            AuthenticationError: If the backend rejects the credentials.
            ServerError: On any other non-success status.
            NetworkError: If the backend cannot be reached.
        """
        async with httpx.AsyncClient(transport=self._transport) as client:
            try:
                response = await client.post(
                    self._config.auth_url,
                    json={"email": email, "password": password},
                )
            except httpx.RequestError as e:
                logger.warning(f"Sign-in request failed: {e}")
                raise NetworkError(f"Connection failed: {e}") from e

        if response.is_success:
            logger.debug("Sign-in succeeded")
            return

        detail = _error_detail(response)
        if response.status_code in REJECTED_STATUSES:
            logger.debug(f"Sign-in rejected (HTTP {response.status_code})")
            raise AuthenticationError(
                detail or "Invalid email or password", response.status_code
            )
        logger.warning(f"Sign-in failed with HTTP {response.status_code}")
        raise ServerError(response.status_code, detail)
