"""Integration tests for the HTTP clients.

No mocks for the clients themselves - real httpx requests go through
ASGITransport to a FastAPI app standing in for the backend.
"""
