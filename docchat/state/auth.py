"""Login/logout flow over an auth backend and the session store."""

import logging

from docchat.client.auth_backend import AuthBackend
from docchat.exceptions import DocChatError, ValidationError
from docchat.models import AuthState, AuthStatus
from docchat.session import SessionStore
from docchat.state.observable import Observable

logger = logging.getLogger(__name__)

MISSING_CREDENTIALS_ERROR = "Please enter both email and password"


def _validate_credentials(email: str, password: str) -> tuple[str, str]:
    """Strip both values and require them to be non-empty.

    Raises:
        ValidationError: If either value is empty after stripping.
    """
    email = email.strip()
    password = password.strip()
    if not email or not password:
        raise ValidationError(MISSING_CREDENTIALS_ERROR)
    return email, password


class AuthController(Observable):
    """Drives a login attempt through LOADING to SUCCESS or ERROR.

    Only checks that both fields are non-empty; email format and password
    policy are left to the backend.

    A login call made while another is still loading is ignored.
    """

    def __init__(self, backend: AuthBackend, session: SessionStore) -> None:
        super().__init__()
        self._backend = backend
        self._session = session
        self.state = AuthState.idle()

    @property
    def is_logged_in(self) -> bool:
        return self._session.is_logged_in

    def _set_state(self, state: AuthState) -> None:
        self.state = state
        self.notify()

    async def login(self, email: str, password: str) -> bool:
        """Attempt to sign in.

        Args:
            email: Account email, surrounding whitespace ignored.
            password: Account password, surrounding whitespace ignored.

        Returns:
            True on success. False if validation or sign-in failed, or if an
            earlier attempt is still loading.
        """
        if self.state.status == AuthStatus.LOADING:
            return False

        try:
            email, password = _validate_credentials(email, password)
        except ValidationError as e:
            self._set_state(AuthState.error(e.message))
            return False

        self._set_state(AuthState.loading())
        try:
            await self._backend.sign_in(email, password)
        except DocChatError as e:
            self._set_state(AuthState.error(e.message))
            return False

        self._session.set_logged_in()
        self._set_state(AuthState.success())
        return True

    def logout(self) -> None:
        """Clear the session flag. No server call is made."""
        self._session.clear()
        logger.info("Signed out")
        self._set_state(AuthState.idle())
