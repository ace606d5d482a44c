__all__ = (
    "SessionStoreInterface",
    "AbstractUnitOfWork",
    "SqlAlchemyUnitOfWork"
)

from .base import SessionStoreInterface
from .unit_of_work import AbstractUnitOfWork, SqlAlchemyUnitOfWork
