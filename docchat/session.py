"""Persisted "is logged in" flag.

Stored as a small JSON file so the login survives restarts of the UI
process. Loaded once on start, written on login, removed on logout.
"""

import json
import logging
from pathlib import Path

from docchat.config import get_client_config

logger = logging.getLogger(__name__)


class SessionStore:
    """Single-writer store for the session flag."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._logged_in = False
        self.load()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_logged_in(self) -> bool:
        return self._logged_in

    def load(self) -> None:
        """Read the flag from disk. A missing or corrupt file means logged out."""
        self._logged_in = False
        if not self._path.exists():
            return
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning(f"Ignoring unreadable session file: {self._path}")
            return
        if isinstance(data, dict):
            self._logged_in = data.get("is_logged_in") is True

    def set_logged_in(self) -> None:
        self._logged_in = True
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps({"is_logged_in": True}), encoding="utf-8")

    def clear(self) -> None:
        self._logged_in = False
        self._path.unlink(missing_ok=True)


# Module-level singleton instance
_session_store: SessionStore | None = None


def get_session_store() -> SessionStore:
    """Get or create the process-wide session store.

    The flag file location comes from the client configuration.

    Returns:
        The SessionStore instance.
    """
    global _session_store
    if _session_store is None:
        _session_store = SessionStore(get_client_config().session_file)
    return _session_store
