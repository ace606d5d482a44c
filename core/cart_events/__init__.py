__all__ = (
    "CartEvents",
    "AuthEvents",
    "EventDispatcher",
    "EventDispatcherInterface",
    "event_dispatcher",
    "register_logout_listener",
)

from .cart_events import CartEvents, AuthEvents
from .dispatcher import EventDispatcher, EventDispatcherInterface, event_dispatcher
from .listeners import register_logout_listener
