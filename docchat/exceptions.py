"""Custom exceptions for the docchat client."""


class DocChatError(Exception):
    """Base exception for all errors surfaced to the user."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ValidationError(DocChatError):
    """Raised when a required field is empty before dispatch."""

    pass


class NetworkError(DocChatError):
    """Raised when the backend cannot be reached."""

    pass


class ServerError(DocChatError):
    """Raised when the backend answers with a non-success status or a malformed body."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        super().__init__(message or f"Server error: {status_code}", status_code)


class AuthenticationError(DocChatError):
    """Raised when the authentication backend rejects the credentials."""

    pass
