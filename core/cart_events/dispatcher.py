from collections import defaultdict
from enum import Enum
from typing import Any, Callable, Protocol

from logger import logger

Handler = Callable[[Any], Any]


class EventDispatcherInterface(Protocol):
    def dispatch(
            self,
            event: str | Enum,
            payload: Any = None
    ):
        ...


class EventDispatcher:
    """Notifies listeners subscribed to an event name. Return values of
    listeners are ignored"""

    def __init__(self):
        self._listeners: dict[str, list[Handler]] = defaultdict(list)

    @staticmethod
    def _event_name(event: str | Enum) -> str:
        return event.value if isinstance(event, Enum) else event

    def listen(self, event: str | Enum, handler: Handler) -> None:
        self._listeners[self._event_name(event)].append(handler)

    def forget(self, event: str | Enum) -> None:
        self._listeners.pop(self._event_name(event), None)

    def has_listeners(self, event: str | Enum) -> bool:
        return bool(self._listeners.get(self._event_name(event)))

    def dispatch(self, event: str | Enum, payload: Any = None) -> None:
        name = self._event_name(event)
        handlers = list(self._listeners.get(name, ()))
        logger.debug("dispatching event", extra={"event": name, "listeners": len(handlers)})
        for handler in handlers:
            handler(payload)


event_dispatcher = EventDispatcher()
