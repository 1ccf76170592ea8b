"""
EventBus - Change notifications from the game engine to front ends.

Handlers run synchronously, in subscription order, with the event payload
as keyword arguments.
"""

import logging
from threading import RLock
from typing import Any, Callable

logger = logging.getLogger(__name__)

# Channels emitted by GameEngine
PLACEMENT = "placement"                 # outcome, word, at_slot
ROUND_RESET = "round_reset"             # cursor, words
LEVEL_CHANGED = "level_changed"         # transition, previous, cursor
LESSON_COMPLETED = "lesson_completed"   # lesson_name, cursor

EVENTS = (PLACEMENT, ROUND_RESET, LEVEL_CHANGED, LESSON_COMPLETED)


class EventBus:
    """Minimal publish/subscribe bus."""

    def __init__(self):
        self._handlers: dict[str, list[Callable[..., Any]]] = {}
        self._lock = RLock()

    def subscribe(self, event: str, handler: Callable[..., Any]):
        with self._lock:
            handlers = self._handlers.setdefault(event, [])
            if handler not in handlers:
                handlers.append(handler)
                logger.debug("Subscribed %s to '%s'", handler, event)

    def unsubscribe(self, event: str, handler: Callable[..., Any]):
        with self._lock:
            handlers = self._handlers.get(event)
            if not handlers or handler not in handlers:
                return
            handlers.remove(handler)
            if not handlers:
                del self._handlers[event]

    def clear(self):
        with self._lock:
            self._handlers.clear()

    def emit(self, event: str, **payload: Any) -> list[Any]:
        """
        Call every handler subscribed to the event.

        A failing handler is logged and skipped so one broken front-end hook
        cannot interrupt the game.

        Returns:
            Return values of the handlers that succeeded
        """
        with self._lock:
            handlers = list(self._handlers.get(event, []))
        results = []
        for handler in handlers:
            try:
                results.append(handler(**payload))
            except Exception:
                logger.exception("Handler %s failed for event '%s'", handler, event)
        return results
