from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter

from application.schemas.domain_model_schemas import CartItemS, FeeS

_cart_content_adapter = TypeAdapter(list[CartItemS])


def serialize_cart(content: Mapping[str, CartItemS]) -> str:
    """Snapshot of the cart lines for the stored carts table (JSON array)"""
    return _cart_content_adapter.dump_json(list(content.values())).decode()


def deserialize_cart(raw: str | bytes) -> list[CartItemS]:
    return _cart_content_adapter.validate_json(raw)


def dump_content(content: Mapping[str, CartItemS]) -> dict[str, dict[str, Any]]:
    return {row_id: cart_item.model_dump(mode="json") for row_id, cart_item in content.items()}


def load_content(raw: Mapping[str, Any] | None) -> dict[str, CartItemS]:
    content: dict[str, CartItemS] = {}
    for data in (raw or {}).values():
        cart_item = CartItemS.model_validate(data)
        content[cart_item.row_id] = cart_item
    return content


def dump_fees(fees: Mapping[str, FeeS]) -> dict[str, dict[str, Any]]:
    return {identifier: fee.model_dump() for identifier, fee in fees.items()}


def load_fees(raw: Mapping[str, Any] | None) -> dict[str, FeeS]:
    return {identifier: FeeS.model_validate(data) for identifier, data in (raw or {}).items()}
