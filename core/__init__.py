__all__ = (
    "settings",
)

from .config import settings
