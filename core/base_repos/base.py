from typing import Any, Protocol

__all__ = (
    "SessionStoreInterface",
)


class SessionStoreInterface(Protocol):

    def get(
            self,
            key: str,
            default: Any = None,
    ) -> Any:
        ...

    def put(
            self,
            key: str,
            value: Any,
    ) -> None:
        ...

    def has(self, key: str) -> bool:
        ...

    def remove(self, key: str) -> None:
        ...
