"""Pydantic models for client state and backend payloads.

Provides type safety and validation for everything the controllers hold
and everything that crosses the wire.

Models:
    - FormattedLine: One rendered line of an assistant response
    - ChatMessage: Individual message in the transcript
    - AuthStatus / AuthState: Login attempt state
    - schemas: Request/response payloads for the backend endpoints
"""

import time
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from docchat.models.schemas import (
    ChatRequest,
    ChatResponse,
    DocumentRequest,
    DocumentResponse,
    RelatedDocument,
)


def now_millis() -> int:
    """Return the current time as epoch milliseconds."""
    return int(time.time() * 1000)


class FormattedLine(BaseModel):
    """A single line of a formatted response.

    Attributes:
        text: Line text with any leading emphasis marker removed.
        emphasized: Whether the line is rendered bold.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    emphasized: bool = False


class ChatMessage(BaseModel):
    """A single message in the transcript.

    Attributes:
        content: The message text. For assistant messages this is the
            formatted text, one line break after every line.
        is_from_user: True for user turns, False for assistant turns.
        timestamp: Creation time in epoch milliseconds.
        lines: Formatted lines of an assistant message (empty for user turns).
    """

    model_config = ConfigDict(frozen=True)

    content: str
    is_from_user: bool
    timestamp: int = Field(default_factory=now_millis)
    lines: tuple[FormattedLine, ...] = ()

    @classmethod
    def from_user(cls, text: str) -> "ChatMessage":
        return cls(content=text, is_from_user=True)

    @classmethod
    def from_assistant(cls, lines: list[FormattedLine]) -> "ChatMessage":
        content = "".join(f"{line.text}\n" for line in lines)
        return cls(content=content, is_from_user=False, lines=tuple(lines))


class AuthStatus(str, Enum):
    """Status values for a login attempt."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class AuthState(BaseModel):
    """Transient state of a login attempt.

    Attributes:
        status: Current step of the attempt.
        message: Error message, set only when status is ERROR.
    """

    model_config = ConfigDict(frozen=True)

    status: AuthStatus = AuthStatus.IDLE
    message: str | None = None

    @classmethod
    def idle(cls) -> "AuthState":
        return cls(status=AuthStatus.IDLE)

    @classmethod
    def loading(cls) -> "AuthState":
        return cls(status=AuthStatus.LOADING)

    @classmethod
    def success(cls) -> "AuthState":
        return cls(status=AuthStatus.SUCCESS)

    @classmethod
    def error(cls, message: str) -> "AuthState":
        return cls(status=AuthStatus.ERROR, message=message)


__all__ = [
    "AuthState",
    "AuthStatus",
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "DocumentRequest",
    "DocumentResponse",
    "FormattedLine",
    "RelatedDocument",
    "now_millis",
]
