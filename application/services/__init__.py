__all__ = (
    "CartService",
)

from .cart_service import CartService
