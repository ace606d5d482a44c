from typing import Callable, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

__all__ = (
    "AbstractUnitOfWork",
    "SqlAlchemyUnitOfWork"
)

from logger import logger


class AbstractUnitOfWork(Protocol):
    session: Session

    def __enter__(self):
        ...

    def __exit__(self, exc_type, exc_val, exc_tb):
        ...

    def commit(self):
        ...

    def rollback(self):
        ...


class SqlAlchemyUnitOfWork:
    """Allows to perform operations transactionally.
    A new session is opened on every `with` block, so one instance can be reused"""

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory
        self.session: Session | None = None

    def __enter__(self):
        self.session = self._session_factory()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is not None:
                extra = {"exc_type": exc_type, "exc_val": exc_val}
                logger.error("An error occurred in UnitOfWork", extra=extra)
                self.session.rollback()
        finally:
            self.session.expire_all()
            self.session.close()
            self.session = None

    def commit(self):
        try:
            self.session.commit()
        except SQLAlchemyError:
            logger.error("Failed to commit the session", exc_info=True)
            raise

    def rollback(self):
        self.session.rollback()
