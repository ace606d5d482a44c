__all__ = (
    "get_cart",
    "CartDep",
)

from .dependencies import get_cart, CartDep
