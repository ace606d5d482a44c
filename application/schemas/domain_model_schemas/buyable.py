from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Buyable(Protocol):
    """Anything that can describe itself as a cart line"""

    def get_buyable_identifier(self, options: dict[str, Any] | None = None) -> int | str:
        ...

    def get_buyable_description(self, options: dict[str, Any] | None = None) -> str:
        ...

    def get_buyable_price(self, options: dict[str, Any] | None = None) -> float:
        ...
