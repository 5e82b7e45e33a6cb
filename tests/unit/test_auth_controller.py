"""Unit tests for AuthController with a fake auth backend."""

import asyncio

import pytest

from docchat.exceptions import AuthenticationError, DocChatError, NetworkError
from docchat.models import AuthStatus
from docchat.session import SessionStore
from docchat.state.auth import MISSING_CREDENTIALS_ERROR, AuthController


class FakeAuthBackend:
    def __init__(self, error: DocChatError | None = None) -> None:
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def sign_in(self, email: str, password: str) -> None:
        self.calls.append((email, password))
        if self.error is not None:
            raise self.error


class GatedAuthBackend(FakeAuthBackend):
    """Blocks every sign-in until the gate is opened."""

    def __init__(self) -> None:
        super().__init__()
        self.gate = asyncio.Event()

    async def sign_in(self, email: str, password: str) -> None:
        self.calls.append((email, password))
        await self.gate.wait()


class TestLogin:
    """Tests for the login state machine."""

    async def test_success_goes_loading_then_success(self, session_store: SessionStore) -> None:
        backend = FakeAuthBackend()
        controller = AuthController(backend, session_store)
        statuses: list[AuthStatus] = []
        controller.subscribe(lambda c: statuses.append(c.state.status))

        assert await controller.login("user@example.com", "pw") is True

        assert statuses == [AuthStatus.LOADING, AuthStatus.SUCCESS]
        assert controller.is_logged_in is True
        assert backend.calls == [("user@example.com", "pw")]

    async def test_credentials_are_stripped(self, session_store: SessionStore) -> None:
        backend = FakeAuthBackend()
        controller = AuthController(backend, session_store)

        await controller.login("  user@example.com ", " pw ")

        assert backend.calls == [("user@example.com", "pw")]

    @pytest.mark.parametrize(
        "email, password",
        [("", "pw"), ("user@example.com", ""), ("   ", "   ")],
    )
    async def test_missing_credentials_skip_backend(
        self, session_store: SessionStore, email: str, password: str
    ) -> None:
        backend = FakeAuthBackend()
        controller = AuthController(backend, session_store)

        assert await controller.login(email, password) is False

        assert backend.calls == []
        assert controller.state.status == AuthStatus.ERROR
        assert controller.state.message == MISSING_CREDENTIALS_ERROR

    async def test_no_email_format_check(self, session_store: SessionStore) -> None:
        """Any non-empty email is handed to the backend."""
        backend = FakeAuthBackend()
        controller = AuthController(backend, session_store)

        assert await controller.login("not-an-email", "x") is True

    @pytest.mark.parametrize(
        "error",
        [AuthenticationError("Wrong password", 401), NetworkError("Connection failed: down")],
    )
    async def test_backend_error_message_is_verbatim(
        self, session_store: SessionStore, error: DocChatError
    ) -> None:
        controller = AuthController(FakeAuthBackend(error=error), session_store)

        assert await controller.login("user@example.com", "pw") is False

        assert controller.state.status == AuthStatus.ERROR
        assert controller.state.message == error.message
        assert controller.is_logged_in is False

    async def test_second_login_while_loading_is_ignored(
        self, session_store: SessionStore
    ) -> None:
        """Pressing Enter again during a pending sign-in sends nothing."""
        backend = GatedAuthBackend()
        controller = AuthController(backend, session_store)

        first = asyncio.create_task(controller.login("user@example.com", "pw"))
        await asyncio.sleep(0)
        assert controller.state.status == AuthStatus.LOADING

        assert await controller.login("user@example.com", "pw") is False
        assert controller.state.status == AuthStatus.LOADING

        backend.gate.set()
        assert await first is True

        assert backend.calls == [("user@example.com", "pw")]
        assert controller.state.status == AuthStatus.SUCCESS


class TestLogout:
    """Tests for logout."""

    async def test_logout_clears_session(self, session_store: SessionStore) -> None:
        controller = AuthController(FakeAuthBackend(), session_store)
        await controller.login("user@example.com", "pw")

        controller.logout()

        assert controller.is_logged_in is False
        assert controller.state.status == AuthStatus.IDLE
        assert not session_store.path.exists()

    def test_logout_makes_no_backend_call(self, session_store: SessionStore) -> None:
        backend = FakeAuthBackend()
        controller = AuthController(backend, session_store)

        controller.logout()

        assert backend.calls == []
