__all__ = (
    "CartRepository",
    "CartRepositoryInterface",
    "ShoppingSessionRepository",
)

from .cart_repo import CartRepository, CartRepositoryInterface
from .shopping_session_repo import ShoppingSessionRepository
