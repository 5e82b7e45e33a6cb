"""Test package for docchat.

Unit tests cover models, formatting, configuration, the session store and
the state controllers in isolation. Integration tests drive the httpx
clients against an in-process FastAPI stub of the backend.

Structure:
    - unit/: Individual function and class tests
    - integration/: HTTP client tests over ASGITransport

Leverages pytest with pytest-asyncio and pytest-check for soft assertions.
"""
