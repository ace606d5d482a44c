from typing import Any, Union

from application.schemas import ItemAttributesS
from application.schemas.domain_model_schemas import Buyable, CartItemS

ItemSpec = Union[ItemAttributesS, CartItemS, Buyable, dict, list, tuple]


def _buyable_arguments(
        name: Any,
        quantity: Any,
        options: dict[str, Any] | None
) -> tuple[int | float, dict[str, Any]]:
    # add(product, 2, {"size": "L"}) puts the quantity where the name usually goes
    if isinstance(name, (int, float)) and not isinstance(name, bool):
        buyable_options = quantity if isinstance(quantity, dict) else options
        return name, buyable_options or {}

    buyable_quantity = quantity if isinstance(quantity, (int, float)) else 1
    return buyable_quantity, options or {}


def create_cart_item(
        id: Any,  # noqa
        name: Any = None,
        quantity: Any = None,
        price: float | None = None,
        options: dict[str, Any] | None = None,
        tax_rate: float | None = None,
        *,
        default_tax_rate: float = 0,
) -> CartItemS:
    """Builds a new cart line out of attributes, a mapping, an
    `ItemAttributesS` or a `Buyable`"""
    match id:
        case ItemAttributesS() as attributes:
            cart_item = CartItemS.from_attributes(
                attributes.id, attributes.name, attributes.price, attributes.options
            )
            cart_item.set_quantity(attributes.quantity)
            if tax_rate is None:
                tax_rate = attributes.tax_rate

        case dict():
            return create_cart_item(
                ItemAttributesS.model_validate(id),
                tax_rate=tax_rate,
                default_tax_rate=default_tax_rate
            )

        case Buyable():
            buyable_quantity, buyable_options = _buyable_arguments(name, quantity, options)
            cart_item = CartItemS.from_buyable(id, buyable_options)
            cart_item.set_quantity(buyable_quantity)
            cart_item.associate(id)

        case _:
            cart_item = CartItemS.from_attributes(id, name, price, options)
            cart_item.set_quantity(1 if quantity is None else quantity)

    cart_item.set_tax_rate(default_tax_rate if tax_rate is None else tax_rate)
    return cart_item
