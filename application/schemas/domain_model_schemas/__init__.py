__all__ = (
    "Buyable",
    "CartItemS",
    "FeeS",
    "generate_row_id",
    "resolve_model",
)

from .buyable import Buyable
from .cart_item import CartItemS, generate_row_id, resolve_model
from .fee import FeeS
