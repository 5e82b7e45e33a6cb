"""HTTP client for the chat and related-documents endpoints.

Thin async wrapper over httpx. Every call opens its own AsyncClient, posts
a JSON body, and parses the JSON answer into a pydantic schema. Transport
failures and non-success statuses are translated into the client's own
exception types so callers never see httpx errors.
"""

import logging
from collections.abc import Sequence
from typing import TypeVar

import httpx
from pydantic import BaseModel

from docchat.config import ClientConfig, get_client_config
from docchat.exceptions import NetworkError, ServerError
from docchat.models.schemas import (
    ChatRequest,
    ChatResponse,
    DocumentRequest,
    DocumentResponse,
)

logger = logging.getLogger(__name__)

CHAT_PATH = "chat/"
RELATED_DOCUMENTS_PATH = "related_documents/"

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class ApiClient:
    """Client for the chat/document backend.

    No caching, retry or backoff: each call is a single request and its
    failure is terminal for the caller.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            transport: Optional httpx transport (e.g. ASGITransport in tests).
        """
        self._config = config or get_client_config()
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._config.api_base_url

    async def send_chat(
        self,
        query: str,
        context: str,
        chat_history: Sequence[int] = (),
    ) -> ChatResponse:
        """Ask the backend a question grounded on the given context.

        Args:
            query: The user's message.
            context: Concatenated abstracts of the selected documents.
            chat_history: Opaque integer list forwarded unchanged.

        Returns:
            The backend's answer.

        Raises:
            NetworkError: If the backend cannot be reached.
            ServerError: On a non-success status or malformed body.
        """
        request = ChatRequest(query=query, context=context, chat_history=list(chat_history))
        return await self._post(CHAT_PATH, request, ChatResponse)

    async def search_documents(self, title: str, limit: int = 3) -> DocumentResponse:
        """Search for documents related to a title.

        Args:
            title: Search text.
            limit: Maximum number of documents to return.

        Returns:
            The related documents, in backend order.

        Raises:
            NetworkError: If the backend cannot be reached.
            ServerError: On a non-success status or malformed body.
        """
        request = DocumentRequest(title=title, number=limit)
        return await self._post(RELATED_DOCUMENTS_PATH, request, DocumentResponse)

    async def _post(
        self,
        path: str,
        payload: BaseModel,
        response_model: type[ResponseT],
    ) -> ResponseT:
        logger.debug(f"POST {self.base_url} {path}")
        async with httpx.AsyncClient(base_url=self.base_url, transport=self._transport) as client:
            try:
                response = await client.post(path, json=payload.model_dump())
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                logger.warning(f"POST {path} failed with HTTP {e.response.status_code}")
                raise ServerError(e.response.status_code) from e
            except httpx.RequestError as e:
                logger.warning(f"POST {path} failed: {e}")
                raise NetworkError(f"Connection failed: {e}") from e

        try:
            return response_model.model_validate(response.json())
        except ValueError as e:
            logger.warning(f"POST {path} returned a malformed body: {e}")
            raise ServerError(
                response.status_code, "Server returned an unexpected response"
            ) from e
