"""docchat - chat with a remote backend grounded on selected documents.

Combines httpx for the backend calls, Pydantic for data validation and
NiceGUI for the web interface.

Components:
    - client: HTTP calls to the chat, document and auth endpoints
    - state: Observable controllers for chat, documents and login
    - session: Persisted logged-in flag
    - ui: Login and chat pages
    - models: Client state and request/response schemas
"""

__version__ = "0.1.0"
