__all__ = (
    "serialize_cart",
    "deserialize_cart",
    "dump_content",
    "load_content",
    "dump_fees",
    "load_fees",
    "create_cart_item",
    "ItemSpec",
)

from .cart_converter import (
    serialize_cart,
    deserialize_cart,
    dump_content,
    load_content,
    dump_fees,
    load_fees
)

from .item_factory import create_cart_item, ItemSpec
