__all__ = (
    "InvalidRowIDError",
    "UnknownModelError",
    "CartAlreadyStoredError",
    "InvalidFeeError",
    "InvalidQuantityError",
)

from .cart_exceptions import (
    InvalidRowIDError,
    UnknownModelError,
    CartAlreadyStoredError,
    InvalidFeeError,
    InvalidQuantityError
)
