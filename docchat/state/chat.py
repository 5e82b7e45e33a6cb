"""Chat state: transcript, loading flag and last error."""

import logging
from collections.abc import Sequence
from typing import Protocol

from docchat.exceptions import DocChatError, ValidationError
from docchat.formatting import format_response
from docchat.models import ChatMessage, ChatResponse
from docchat.state.observable import Observable

logger = logging.getLogger(__name__)

EMPTY_MESSAGE_ERROR = "Please enter a message"
EMPTY_CONTEXT_ERROR = "Please select at least one document"


def _validate_message(text: str, context: str) -> None:
    """Raise ValidationError unless both the message and its context are non-empty."""
    if not text:
        raise ValidationError(EMPTY_MESSAGE_ERROR)
    if not context:
        raise ValidationError(EMPTY_CONTEXT_ERROR)


class ChatTransport(Protocol):
    async def send_chat(
        self, query: str, context: str, chat_history: Sequence[int] = ()
    ) -> ChatResponse: ...


class ChatController(Observable):
    """Mediates between chat UI events and the chat endpoint.

    The user message is appended before the request is sent. The assistant
    reply is appended only when the request succeeds, so a failed request
    leaves a user turn with no answer and a non-empty error.

    Concurrent sends are not coordinated. Replies land in completion order
    and the first one to finish clears the loading flag.
    """

    def __init__(self, transport: ChatTransport, chat_history: Sequence[int] = ()) -> None:
        super().__init__()
        self._transport = transport
        self._messages: list[ChatMessage] = []
        # Bumped by clear(); replies from an earlier conversation are dropped
        self._conversation = 0
        self.chat_history: list[int] = list(chat_history)
        self.is_loading = False
        self.error = ""

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        return tuple(self._messages)

    async def send_message(self, text: str, context: str) -> bool:
        """Send a message grounded on the given context.

        A reply or error that arrives after clear() is discarded, so it
        never lands in the new conversation.

        Args:
            text: The user's message.
            context: Concatenated abstracts of the selected documents.

        Returns:
            True if the request was dispatched, False if validation failed.
        """
        try:
            _validate_message(text, context)
        except ValidationError as e:
            self.error = e.message
            self.notify()
            return False

        self.error = ""
        self._messages.append(ChatMessage.from_user(text))
        self.is_loading = True
        self.notify()

        conversation = self._conversation
        try:
            result = await self._transport.send_chat(text, context, self.chat_history)
        except DocChatError as e:
            logger.warning(f"Chat request failed: {e.message}")
            if conversation == self._conversation:
                self.error = e.message
        else:
            if conversation == self._conversation:
                self._messages.append(ChatMessage.from_assistant(format_response(result.response)))
            else:
                logger.debug("Dropping reply for a cleared conversation")
        finally:
            self.is_loading = False
        self.notify()
        return True

    def clear_error(self) -> None:
        self.error = ""
        self.notify()

    def clear(self) -> None:
        """Start a new conversation."""
        self._conversation += 1
        self._messages.clear()
        self.error = ""
        self.notify()
