from datetime import datetime
from typing import Protocol, Union

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from application.models import cart_table
from application.schemas import StoredCartS
from core.config import settings
from logger import logger


class CartRepositoryInterface(Protocol):
    def get_stored_cart(
            self,
            session: Session,
            identifier: str,
            instance: str,
    ) -> StoredCartS | None:
        ...

    def exists(
            self,
            session: Session,
            identifier: str,
            instance: str,
    ) -> bool:
        ...

    def create(
            self,
            session: Session,
            identifier: str,
            instance: str,
            content: str,
    ) -> StoredCartS:
        ...

    def delete_stored_cart(
            self,
            session: Session,
            identifier: str,
            instance: str,
    ) -> None:
        ...

    def delete_stored_carts(
            self,
            session: Session,
            identifier: str,
    ) -> int:
        ...


class CartRepository:
    """Stored cart snapshots, one row per (identifier, instance).
    Nothing is committed here, callers run the statements inside a unit of work"""

    def __init__(self, table_name: str | None = None):
        self.table = cart_table(table_name or settings.CART.database.table)

    def _match(self, identifier: str, instance: str):
        return and_(
            self.table.c.identifier == str(identifier),
            self.table.c.instance == instance
        )

    def get_stored_cart(
            self,
            session: Session,
            identifier: str,
            instance: str,
    ) -> StoredCartS | None:
        stmt = select(self.table).where(self._match(identifier, instance))

        try:
            row = session.execute(stmt).first()
        except SQLAlchemyError:
            logger.error("query error: failed to perform select query", exc_info=True)
            raise

        if row is None:
            return None

        return StoredCartS.model_validate(row, from_attributes=True)

    def exists(
            self,
            session: Session,
            identifier: str,
            instance: str,
    ) -> bool:
        stmt = select(self.table.c.identifier).where(self._match(identifier, instance)).limit(1)

        try:
            res: Union[str, None] = session.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError:
            logger.error("query error: failed to perform select query", exc_info=True)
            raise

        return res is not None

    def create(
            self,
            session: Session,
            identifier: str,
            instance: str,
            content: str,
    ) -> StoredCartS:
        stored_cart = StoredCartS(
            identifier=str(identifier),
            instance=instance,
            content=content,
            created_at=datetime.now(),
        )
        stmt = insert(self.table).values(**stored_cart.model_dump(exclude_none=True))

        try:
            session.execute(stmt)
        except SQLAlchemyError:
            extra = {"identifier": identifier, "instance": instance}
            logger.error("query error: failed to insert stored cart", extra=extra, exc_info=True)
            raise

        return stored_cart

    def delete_stored_cart(
            self,
            session: Session,
            identifier: str,
            instance: str,
    ) -> None:
        stmt = delete(self.table).where(self._match(identifier, instance))

        try:
            session.execute(stmt)
        except SQLAlchemyError:
            extra = {"identifier": identifier, "instance": instance}
            logger.error("query error: failed to delete stored cart", extra=extra, exc_info=True)
            raise

    def delete_stored_carts(
            self,
            session: Session,
            identifier: str,
    ) -> int:
        stmt = delete(self.table).where(self.table.c.identifier == str(identifier))

        try:
            res = session.execute(stmt)
        except SQLAlchemyError:
            logger.error(
                "query error: failed to delete stored carts",
                extra={"identifier": identifier},
                exc_info=True
            )
            raise

        return res.rowcount
