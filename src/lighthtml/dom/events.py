# src/lighthtml/dom/events.py
import logging
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .core import Node, is_blank

logger = logging.getLogger(__name__)


class LightEvent(BaseModel):
    """
    Payload delivered to every handler of a dispatched event.
    """
    model_config = ConfigDict(frozen=True)

    event_type: str
    target: Optional[Node] = None
    data: Dict[str, Any] = Field(default_factory=dict)


EventHandler = Callable[[LightEvent], Any]


class EventRegistry:
    """
    Per-element mapping from event type to an ordered list of handlers.

    Types are stored lower-cased. Registration order is invocation order and
    the same handler may be registered more than once. A type whose last
    handler is removed disappears from the registry.
    """

    def __init__(self):
        self._listeners: Dict[str, List[EventHandler]] = {}

    @staticmethod
    def _normalize(event_type: Optional[str]) -> Optional[str]:
        if is_blank(event_type):
            return None
        return event_type.lower()

    def add_event_listener(self, event_type: Optional[str], handler: Optional[EventHandler]) -> None:
        key = self._normalize(event_type)
        if key is None or handler is None:
            return
        self._listeners.setdefault(key, []).append(handler)
        logger.debug("Listener added for '%s' (%d total).", key, len(self._listeners[key]))

    def remove_event_listener(self, event_type: Optional[str], handler: Optional[EventHandler]) -> None:
        """Removes the first registration of `handler`. Unknown handlers are ignored."""
        key = self._normalize(event_type)
        if key is None or handler is None:
            return
        handlers = self._listeners.get(key)
        if not handlers or handler not in handlers:
            return
        handlers.remove(handler)
        if not handlers:
            del self._listeners[key]

    def dispatch_event(
            self,
            event_type: Optional[str],
            data: Optional[Dict[str, Any]] = None,
            target: Optional[Node] = None
    ) -> int:
        """
        Invokes every handler registered for `event_type`, in registration order.

        Handlers run against a copy of the list taken before the first call, so
        listeners added or removed by a handler only take effect on the next
        dispatch. A handler that raises is logged and skipped; the remaining
        handlers still run.

        Returns:
            int: The number of handlers that were invoked.
        """
        key = self._normalize(event_type)
        if key is None or key not in self._listeners:
            return 0

        event = LightEvent(event_type=key, target=target, data=data or {})
        handlers = list(self._listeners[key])

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error("Event handler %r failed for '%s': %s", handler, key, e, exc_info=True)

        return len(handlers)

    def has_event_listener(self, event_type: Optional[str]) -> bool:
        key = self._normalize(event_type)
        return key is not None and bool(self._listeners.get(key))

    def get_event_listener_count(self, event_type: Optional[str]) -> int:
        key = self._normalize(event_type)
        if key is None:
            return 0
        return len(self._listeners.get(key, []))

    def get_event_types(self) -> List[str]:
        """Snapshot of the registered event types."""
        return list(self._listeners)
