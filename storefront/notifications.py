"""User-visible notifications (toasts).

View-models never print or raise for recoverable failures; they push a
Notification here and whatever front end is attached decides how to show it.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from storefront.logging import get_logger

logger = get_logger(__name__)


class Variant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    variant: Variant = Variant.DEFAULT

    @property
    def is_error(self) -> bool:
        return self.variant == Variant.DESTRUCTIVE


Listener = Callable[[Notification], None]


class Notifier:
    """Collects notifications and forwards them to subscribers."""

    def __init__(self):
        self.history: list[Notification] = []
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def notify(self, notification: Notification) -> None:
        self.history.append(notification)
        for listener in list(self._listeners):
            try:
                listener(notification)
            except Exception as e:
                logger.warning(f"Notification listener failed: {e}", exc_info=True)

    def success(self, description: str) -> None:
        self.notify(Notification("Success", description))

    def error(self, description: str) -> None:
        self.notify(Notification("Error", description, Variant.DESTRUCTIVE))

    @property
    def last(self) -> Notification | None:
        return self.history[-1] if self.history else None
