"""Push-style change subscriptions.

Storage backends keep one registry per feed (transactions, balances). A
subscriber registers a callback for an owner and receives the owner's full
current snapshot every time that owner's data changes.
"""

import logging
from collections import defaultdict
from typing import Any, Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Subscription:
    """Handle returned by ``subscribe_*``; call ``unsubscribe`` on teardown."""

    def __init__(self, cancel: Callable[[], None]):
        self._cancel = cancel
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        """Stop receiving updates. Safe to call more than once."""
        if self._active:
            self._active = False
            self._cancel()

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.unsubscribe()


class SubscriptionRegistry(Generic[T]):
    """Callbacks keyed by owner ID."""

    def __init__(self, name: str):
        self.name = name
        self._listeners: dict[str, list[Callable[[T], None]]] = defaultdict(list)

    def add(self, owner_id: str, callback: Callable[[T], None]) -> Subscription:
        """Register a callback for an owner's feed."""
        self._listeners[owner_id].append(callback)
        logger.debug("Subscribed to %s feed for owner %s", self.name, owner_id)

        def cancel() -> None:
            listeners = self._listeners.get(owner_id, [])
            if callback in listeners:
                listeners.remove(callback)
            if not listeners:
                self._listeners.pop(owner_id, None)
            logger.debug("Unsubscribed from %s feed for owner %s", self.name, owner_id)

        return Subscription(cancel)

    def has_listeners(self, owner_id: str) -> bool:
        return bool(self._listeners.get(owner_id))

    def notify(self, owner_id: str, snapshot: T) -> None:
        """Deliver a snapshot to every callback registered for the owner."""
        for callback in list(self._listeners.get(owner_id, [])):
            callback(snapshot)
