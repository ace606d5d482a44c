__all__ = (
    "data_get",
    "data_has",
    "data_set",
    "data_forget",
)

from .dotted_path import data_get, data_has, data_set, data_forget
