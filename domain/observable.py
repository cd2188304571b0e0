"""
Observable Base

Explicit change notification for the state machines. Hosts that need to
react to a change either subscribe a listener or poll ``version``.
"""

from typing import Any, Callable

Listener = Callable[[Any, Any], None]


class Observable:
    """Mixin holding a listener list and a change counter.

    Subclasses call ``_changed(old, new)`` after every effective state
    transition. Listeners run synchronously, in subscription order, and
    receive the previous and the new value.
    """

    def __init__(self) -> None:
        self._listeners: list[Listener] = []
        self._version = 0

    @property
    def version(self) -> int:
        """Number of effective state changes since construction."""
        return self._version

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener and return a callable that removes it.

        Args:
            listener: Called as ``listener(old, new)`` after each change

        Returns:
            Zero-argument function that unsubscribes the listener
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            self.unsubscribe(listener)

        return _unsubscribe

    def unsubscribe(self, listener: Listener) -> None:
        """Remove a listener. Unknown listeners are ignored."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def _changed(self, old: Any, new: Any) -> None:
        self._version += 1
        # copy so listeners may unsubscribe themselves while being notified
        for listener in list(self._listeners):
            listener(old, new)
