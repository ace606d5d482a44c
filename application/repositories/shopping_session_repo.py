from collections.abc import MutableMapping
from typing import Any

from core.utils import data_forget, data_get, data_has, data_set


class ShoppingSessionRepository:
    """Key-value access to the user's session through dotted keys.

    `put("cart.default", ...)` is stored as `{"cart": {"default": ...}}`, so
    `remove("cart")` drops every entry of the namespace at once. Works with any
    mutable mapping, e.g. starlette's `request.session`.
    """

    def __init__(self, storage: MutableMapping | None = None):
        self._storage: MutableMapping = storage if storage is not None else {}

    def get(
            self,
            key: str,
            default: Any = None
    ) -> Any:
        return data_get(self._storage, key, default)

    def put(
            self,
            key: str,
            value: Any
    ) -> None:
        data_set(self._storage, key, value)

    def has(self, key: str) -> bool:
        return data_has(self._storage, key)

    def remove(self, key: str) -> None:
        data_forget(self._storage, key)

    def all(self) -> MutableMapping:
        return self._storage
