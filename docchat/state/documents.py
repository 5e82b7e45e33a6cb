"""Document search results and the user's selection."""

import logging
from typing import Protocol

from docchat.exceptions import DocChatError, ValidationError
from docchat.models import DocumentResponse, RelatedDocument
from docchat.state.observable import Observable

logger = logging.getLogger(__name__)

EMPTY_QUERY_ERROR = "Please enter a search query"
CONTEXT_SEPARATOR = "\n\n"


def _validate_query(query: str) -> str:
    query = query.strip()
    if not query:
        raise ValidationError(EMPTY_QUERY_ERROR)
    return query


class DocumentTransport(Protocol):
    async def search_documents(self, title: str, limit: int = 3) -> DocumentResponse: ...


class DocumentSelection(Observable):
    """Holds the latest search results and the selected subset.

    The selection is an insertion-ordered set keyed by document value.
    A new search replaces the results but never touches the selection.
    """

    def __init__(self, transport: DocumentTransport, limit: int = 3) -> None:
        super().__init__()
        self._transport = transport
        self._limit = limit
        self._results: list[RelatedDocument] = []
        # dict keys keep insertion order
        self._selected: dict[RelatedDocument, None] = {}
        self.is_loading = False
        self.error = ""

    @property
    def results(self) -> tuple[RelatedDocument, ...]:
        return tuple(self._results)

    @property
    def selected(self) -> tuple[RelatedDocument, ...]:
        return tuple(self._selected)

    @property
    def has_selection(self) -> bool:
        return bool(self._selected)

    def is_selected(self, document: RelatedDocument) -> bool:
        return document in self._selected

    async def search(self, query: str) -> bool:
        """Replace the results with documents related to the query.

        Args:
            query: Search text.

        Returns:
            True if the search succeeded.
        """
        try:
            query = _validate_query(query)
        except ValidationError as e:
            self.error = e.message
            self.notify()
            return False

        self.error = ""
        self.is_loading = True
        self.notify()

        succeeded = False
        try:
            result = await self._transport.search_documents(query, self._limit)
        except DocChatError as e:
            logger.warning(f"Document search failed: {e.message}")
            self.error = e.message
        else:
            self._results = list(result.documents)
            logger.debug(f"Documents: {self._results}")
            succeeded = True
        finally:
            self.is_loading = False
        self.notify()
        return succeeded

    def toggle_selection(self, document: RelatedDocument, selected: bool | None = None) -> bool:
        """Add or remove a document from the selection.

        Args:
            document: The document to toggle.
            selected: Desired membership. None flips the current one.

        Returns:
            Whether the document is selected afterwards.
        """
        if selected is None:
            selected = document not in self._selected

        if selected and document not in self._selected:
            self._selected[document] = None
            self.notify()
        elif not selected and document in self._selected:
            del self._selected[document]
            self.notify()
        return selected

    def deselect(self, document: RelatedDocument) -> None:
        self.toggle_selection(document, selected=False)

    def build_context(self) -> str:
        """Join the abstracts of the selected documents in selection order."""
        return CONTEXT_SEPARATOR.join(document.abstract for document in self._selected)
