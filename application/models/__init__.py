__all__ = (
    "metadata",
    "cart_table",
)

from .models import metadata, cart_table
