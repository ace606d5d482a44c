__all__ = (
    "ItemAttributesS",
    "CartItemPatchS",
    "StoredCartS",
)

from .cart_schemas import ItemAttributesS, CartItemPatchS, StoredCartS
