"""Minimal change-notification base for state controllers."""

from collections.abc import Callable
from typing import Any

Listener = Callable[[Any], None]


class Observable:
    """Holds listeners and calls them after every state change.

    Listeners receive the controller itself and read whatever state they
    need from it. They are called in subscription order; their exceptions
    propagate to whoever changed the state.
    """

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener.

        Args:
            listener: Called with this controller after each change.

        Returns:
            A function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
