"""HTTP clients for the remote backends.

Responsibilities:
    - POST /chat/ and /related_documents/ with JSON bodies
    - Email/password sign-in against the auth endpoint
    - Translation of httpx failures into NetworkError/ServerError

Holds no state between calls. Controllers in docchat.state own the state.
"""

from docchat.client.api_client import ApiClient
from docchat.client.auth_backend import AuthBackend, HttpAuthBackend

__all__ = ["ApiClient", "AuthBackend", "HttpAuthBackend"]
