__all__ = (
    "logger",
    "CustomJsonFormatter",
)

from .logg import logger, CustomJsonFormatter
