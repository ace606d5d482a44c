from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from application.models import metadata
from core.base_repos import SqlAlchemyUnitOfWork
from core.config import settings
from logger import logger


@dataclass
class DatabaseClient:
    url: str
    engine_kwargs: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.engine: Engine = create_engine(self.url, **self.engine_kwargs)
        self.session_factory: sessionmaker[Session] = sessionmaker(
            bind=self.engine,
            expire_on_commit=False,
        )

    def unit_of_work(self) -> SqlAlchemyUnitOfWork:
        return SqlAlchemyUnitOfWork(session_factory=self.session_factory)

    def create_tables(self) -> None:
        """Creates the cart tables declared so far (see `cart_table`)"""
        logger.debug("creating cart tables", extra={"tables": list(metadata.tables)})
        metadata.create_all(self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


# the engine connects lazily, nothing touches the database until the first query
db_client = DatabaseClient(url=settings.cart_database_url)
