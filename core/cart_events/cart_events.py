from enum import Enum


class CartEvents(Enum):
    ADDED = "cart.added"
    UPDATED = "cart.updated"
    REMOVED = "cart.removed"
    STORED = "cart.stored"
    RESTORED = "cart.restored"


class AuthEvents(Enum):
    LOGOUT = "auth.logout"
