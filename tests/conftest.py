"""Pytest fixtures and shared test configuration.

Fixtures:
    - client_config: ClientConfig pointing at the stub backend
    - stub_backend: In-process FastAPI app standing in for the real backend
    - api_client: ApiClient wired to the stub backend through ASGITransport
    - auth_backend: HttpAuthBackend wired to the stub backend
    - session_store: SessionStore writing into a temporary directory
    - sample_documents: Two related documents for selection tests
"""

from pathlib import Path
from typing import Any

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from httpx import ASGITransport

from docchat.client.api_client import ApiClient
from docchat.client.auth_backend import HttpAuthBackend
from docchat.config import ClientConfig
from docchat.models import RelatedDocument
from docchat.session import SessionStore

STUB_BASE_URL = "http://test"
VALID_EMAIL = "reader@example.com"
VALID_PASSWORD = "correct-horse"


class StubBackend:
    """FastAPI app mimicking the chat, related-documents and login endpoints.

    Every request body is recorded. Status codes and payloads can be changed
    per test.
    """

    def __init__(self) -> None:
        self.app = FastAPI()
        self.requests: list[tuple[str, dict[str, Any]]] = []
        self.chat_status = 200
        self.chat_body: Any = {"response": "# Summary\nThe documents agree."}
        self.documents_status = 200
        self.documents_body: Any = {
            "related_documents": [
                {"judul": "Rice yields", "abstrak": "Irrigation raises yields."},
                {"judul": "Soil health", "abstrak": "Cover crops help soil.", "year": 2021},
            ]
        }
        self.login_status_override: int | None = None

        @self.app.post("/chat/")
        async def chat(request: Request) -> JSONResponse:
            self.requests.append(("chat", await request.json()))
            return JSONResponse(self.chat_body, status_code=self.chat_status)

        @self.app.post("/related_documents/")
        async def related_documents(request: Request) -> JSONResponse:
            self.requests.append(("related_documents", await request.json()))
            return JSONResponse(self.documents_body, status_code=self.documents_status)

        @self.app.post("/login/")
        async def login(request: Request) -> JSONResponse:
            body = await request.json()
            self.requests.append(("login", body))
            if self.login_status_override is not None:
                return JSONResponse(
                    {"detail": "Backend unavailable"}, status_code=self.login_status_override
                )
            if body.get("email") == VALID_EMAIL and body.get("password") == VALID_PASSWORD:
                return JSONResponse({"status": "ok"})
            return JSONResponse({"detail": "Invalid credentials"}, status_code=401)


@pytest.fixture
def client_config(tmp_path: Path) -> ClientConfig:
    """Return configuration targeting the stub backend."""
    return ClientConfig(
        api_base_url=STUB_BASE_URL,
        auth_url=f"{STUB_BASE_URL}/login/",
        session_file=tmp_path / "session.json",
    )


@pytest.fixture
def stub_backend() -> StubBackend:
    return StubBackend()


@pytest.fixture
def api_client(client_config: ClientConfig, stub_backend: StubBackend) -> ApiClient:
    """Create an ApiClient that talks to the stub backend in-process."""
    return ApiClient(client_config, transport=ASGITransport(app=stub_backend.app))


@pytest.fixture
def auth_backend(client_config: ClientConfig, stub_backend: StubBackend) -> HttpAuthBackend:
    return HttpAuthBackend(client_config, transport=ASGITransport(app=stub_backend.app))


@pytest.fixture
def session_store(tmp_path: Path) -> SessionStore:
    return SessionStore(tmp_path / "state" / "session.json")


@pytest.fixture
def sample_documents() -> tuple[RelatedDocument, RelatedDocument]:
    """Return two distinct documents, A and B."""
    return (
        RelatedDocument(title="A", abstract="Abstract of A."),
        RelatedDocument(title="B", abstract="Abstract of B."),
    )
