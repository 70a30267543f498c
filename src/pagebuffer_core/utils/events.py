"""Typed event dispatch for PageBuffer.

Handlers subscribe to an event type and are called synchronously, in
subscription order, whenever an instance of that type is emitted.
"""

from collections import defaultdict
from typing import Any, Callable, Dict, List, Type, TypeVar
from loguru import logger

E = TypeVar('E')  # Event type

Handler = Callable[[Any], None]


class EventEmitter:
    """Observer registry keyed by event type."""

    def __init__(self, name: str = "EventEmitter"):
        self.name = name
        self._handlers: Dict[type, List[Handler]] = defaultdict(list)

    def subscribe(self, event_type: Type[E], handler: Callable[[E], None]) -> Callable[[], None]:
        """Register a handler for an event type.

        Args:
            event_type: Class of the events to receive
            handler: Callable receiving the event instance

        Returns:
            A callable that removes the subscription
        """
        self._handlers[event_type].append(handler)

        def unsubscribe() -> None:
            self.unsubscribe(event_type, handler)

        return unsubscribe

    def unsubscribe(self, event_type: type, handler: Handler) -> bool:
        """Remove a handler. Returns False if it was not registered."""
        handlers = self._handlers.get(event_type)
        if not handlers or handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    def emit(self, event: Any) -> None:
        """Dispatch an event to every handler registered for its type.

        A failing handler is logged and does not prevent the remaining
        handlers from running.
        """
        # Copy so handlers may (un)subscribe while dispatching
        for handler in list(self._handlers.get(type(event), ())):
            try:
                handler(event)
            except Exception as e:
                logger.error(
                    f"{self.name}: Handler for {type(event).__name__} failed: {e}",
                    exc_info=True)

    def handler_count(self, event_type: type) -> int:
        """Get the number of handlers subscribed to an event type."""
        return len(self._handlers.get(event_type, ()))
