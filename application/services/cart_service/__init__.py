__all__ = (
    "serialize_cart",
    "deserialize_cart",
    "create_cart_item",
    "CartService",
)

from .utils import (
    serialize_cart,
    deserialize_cart,
    create_cart_item
)

from .cart_service import CartService
