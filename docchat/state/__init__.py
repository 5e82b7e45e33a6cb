"""Observable state controllers between the UI and the backend clients.

Responsibilities:
    - Chat transcript, loading flag and last error
    - Document search results and the selected subset
    - Login attempt state and the persisted session flag

Independent of any UI toolkit. Pages subscribe to a controller and
re-render from its state after every change.
"""

from docchat.state.auth import AuthController
from docchat.state.chat import ChatController
from docchat.state.documents import DocumentSelection
from docchat.state.observable import Observable

__all__ = ["AuthController", "ChatController", "DocumentSelection", "Observable"]
