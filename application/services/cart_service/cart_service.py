import copy
from typing import Any, Callable, Iterable, Union

from application.repositories.cart_repo import CartRepositoryInterface, CartRepository
from application.schemas import CartItemPatchS, ItemAttributesS
from application.schemas.domain_model_schemas import Buyable, CartItemS, FeeS, resolve_model
from application.services.cart_service.utils import (
    create_cart_item,
    deserialize_cart,
    dump_content,
    dump_fees,
    load_content,
    load_fees,
    serialize_cart,
    ItemSpec,
)
from core.base_repos import AbstractUnitOfWork, SessionStoreInterface
from core.cart_events import CartEvents, EventDispatcherInterface
from core.config import CartSettings, settings
from core.exceptions import InvalidQuantityError, InvalidRowIDError
from core.utils import data_forget, data_get, data_has, data_set
from logger import logger

QuantityOrSpec = Union[int, float, CartItemPatchS, ItemAttributesS, Buyable, dict]


class CartService:
    """Shopping cart kept in the user's session.

    Lines, fees and metadata live under the `<identifier>.` namespace of the
    session store. Every read rebuilds the lines from the session and every
    mutation writes the whole collection back. Snapshots of an instance can be
    stored to and restored from the relational store.
    """

    current_instance_key = "_instance"
    metadata_key = "_metadata"
    fees_key = "_fees"
    default_instance = "default"

    def __init__(
            self,
            session_store: SessionStoreInterface,
            events: EventDispatcherInterface,
            uow: AbstractUnitOfWork | None = None,
            cart_repo: CartRepositoryInterface | None = None,
            config: CartSettings | None = None,
    ):
        self._config: CartSettings = config or settings.CART
        self._session: SessionStoreInterface = session_store
        self._events: EventDispatcherInterface = events
        self._cart_repo: CartRepositoryInterface = cart_repo or CartRepository(
            table_name=self._config.database.table
        )
        if uow is None:
            from infrastructure.database import db_client
            uow = db_client.unit_of_work()
        self._uow: AbstractUnitOfWork = uow

    # instances

    def set_instance(self, instance: str | None = None) -> "CartService":
        self._session.put(
            self._session_key(self.current_instance_key),
            instance or self.default_instance
        )
        return self

    def instance(self) -> str:
        """Current instance name without the cart identifier"""
        return self._current_instance().removeprefix(f"{self._config.identifier}.")

    # lines

    def add(
            self,
            id: ItemSpec | int | str,  # noqa
            name: Any = None,
            quantity: Any = None,
            price: float | None = None,
            options: dict[str, Any] | None = None,
            tax_rate: float | None = None,
    ) -> CartItemS | list[CartItemS]:
        """Adds a line, or increments the quantity of the line with the same row id.
        A list or tuple adds every element and returns the list of results"""
        match id:
            case list() | tuple():
                return [self.add(item) for item in id]
            case CartItemS():
                cart_item = id.model_copy(deep=True)
            case _:
                cart_item = create_cart_item(
                    id, name, quantity, price, options, tax_rate,
                    default_tax_rate=self._config.tax
                )

        if cart_item.quantity <= 0:
            raise InvalidQuantityError(quantity=cart_item.quantity)

        content = self._get_content()

        if cart_item.row_id in content:
            cart_item.quantity += content[cart_item.row_id].quantity

        content[cart_item.row_id] = cart_item

        self._events.dispatch(CartEvents.ADDED, cart_item)
        self._put_content(content)

        extra = {"row_id": cart_item.row_id, "quantity": cart_item.quantity, "instance": self.instance()}
        logger.debug("cart item added", extra=extra)
        return cart_item

    def update(
            self,
            row_id: str,
            quantity: QuantityOrSpec,
            options: dict[str, Any] | None = None,
    ) -> CartItemS | None:
        """Changes the quantity or the attributes of a line. A line whose row id
        changes is merged into the line that already has the new row id.
        A quantity <= 0 removes the line and returns None"""
        cart_item = self.get(row_id)

        match quantity:
            case bool():
                raise TypeError("Quantity must be a number, not a bool")
            case int() | float():
                cart_item.set_quantity(quantity)
            case CartItemPatchS():
                cart_item.update_from_patch(quantity)
            case ItemAttributesS():
                cart_item.update_from_patch(
                    CartItemPatchS.model_validate(quantity.model_dump(exclude_none=True))
                )
            case dict():
                cart_item.update_from_patch(CartItemPatchS.model_validate(quantity))
            case Buyable():
                cart_item.update_from_buyable(quantity, options)
            case _:
                raise TypeError(f"Unsupported cart item update: {type(quantity).__name__}")

        content = self._get_content()

        if row_id != cart_item.row_id:
            content.pop(row_id, None)

            if cart_item.row_id in content:
                existing_cart_item = content[cart_item.row_id]
                cart_item.set_quantity(existing_cart_item.quantity + cart_item.quantity)

        if cart_item.quantity <= 0:
            content.pop(cart_item.row_id, None)
            self._events.dispatch(CartEvents.REMOVED, cart_item)
            self._put_content(content)
            logger.debug("cart item removed on update", extra={"row_id": cart_item.row_id})
            return None

        content[cart_item.row_id] = cart_item

        self._events.dispatch(CartEvents.UPDATED, cart_item)
        self._put_content(content)

        logger.debug("cart item updated", extra={"row_id": cart_item.row_id, "old_row_id": row_id})
        return cart_item

    def remove(self, row_id: str) -> None:
        cart_item = self.get(row_id)

        content = self._get_content()
        content.pop(cart_item.row_id)

        self._events.dispatch(CartEvents.REMOVED, cart_item)
        self._put_content(content)
        logger.debug("cart item removed", extra={"row_id": row_id})

    def get(self, row_id: str) -> CartItemS:
        content = self._get_content()

        if row_id not in content:
            raise InvalidRowIDError(row_id=row_id)

        return content[row_id]

    def exists(self, row_id: str) -> bool:
        return row_id in self._get_content()

    def content(self) -> dict[str, CartItemS]:
        return self._get_content()

    def search(self, predicate: Callable[[CartItemS], bool]) -> dict[str, CartItemS]:
        return {
            row_id: cart_item
            for row_id, cart_item in self._get_content().items()
            if predicate(cart_item)
        }

    def associate(self, row_id: str, model: type | object | str) -> None:
        if isinstance(model, str):
            resolve_model(model)  # raises UnknownModelError

        cart_item = self.get(row_id)
        cart_item.associate(model)

        content = self._get_content()
        content[cart_item.row_id] = cart_item

        self._put_content(content)

    def set_tax(self, row_id: str, tax_rate: float) -> None:
        cart_item = self.get(row_id)
        cart_item.set_tax_rate(tax_rate)

        content = self._get_content()
        content[cart_item.row_id] = cart_item

        self._put_content(content)

    # totals

    def count(self) -> int | float:
        return sum((cart_item.quantity for cart_item in self._get_content().values()), 0)

    def is_empty(self) -> bool:
        return self.count() == 0

    def subtotal(self) -> float:
        return sum((cart_item.subtotal for cart_item in self._get_content().values()), 0)

    def tax(self) -> float:
        return sum((cart_item.tax_total for cart_item in self._get_content().values()), 0)

    def total(self) -> float:
        total = sum((cart_item.total for cart_item in self._get_content().values()), 0)
        return total + self.total_fee()

    def total_fee(self) -> float:
        # every fee is applied to the same subtotal, fees never compound
        subtotal = self.subtotal()
        return sum((fee.apply_to(subtotal) for fee in self.get_fees().values()), 0)

    # stored carts

    def store(self, identifier: Any) -> None:
        """Saves the current instance, replacing a snapshot stored earlier
        for the same identifier and instance"""
        content = self._get_content()
        instance = self.instance()

        with self._uow as uow:
            self._cart_repo.delete_stored_cart(
                session=uow.session,
                identifier=identifier,
                instance=instance
            )
            self._cart_repo.create(
                session=uow.session,
                identifier=identifier,
                instance=instance,
                content=serialize_cart(content)
            )
            uow.commit()

        logger.info("cart stored", extra={"identifier": identifier, "instance": instance})
        self._events.dispatch(CartEvents.STORED)

    def restore(self, identifier: Any) -> None:
        """Merges the stored snapshot of the current instance into the session
        cart. Does nothing when no snapshot exists"""
        with self._uow as uow:
            stored_cart = self._cart_repo.get_stored_cart(
                session=uow.session,
                identifier=identifier,
                instance=self.instance()
            )

        if stored_cart is None:
            logger.debug("no stored cart to restore", extra={"identifier": identifier})
            return

        stored_content = deserialize_cart(stored_cart.content)

        current_instance = self.instance()
        self.set_instance(stored_cart.instance)

        content = self._get_content()

        for cart_item in stored_content:
            if cart_item.row_id in content:
                cart_item.quantity += content[cart_item.row_id].quantity
            content[cart_item.row_id] = cart_item

        self._events.dispatch(CartEvents.RESTORED)
        self._put_content(content)

        self.set_instance(current_instance)
        logger.info("cart restored", extra={"identifier": identifier, "instance": stored_cart.instance})

    def has_stored_cart(self, identifier: Any) -> bool:
        with self._uow as uow:
            return self._cart_repo.exists(
                session=uow.session,
                identifier=identifier,
                instance=self.instance()
            )

    def erase(self, identifier: Any) -> int:
        """Deletes the stored snapshots of every instance for the identifier"""
        with self._uow as uow:
            deleted = self._cart_repo.delete_stored_carts(
                session=uow.session,
                identifier=identifier
            )
            uow.commit()

        logger.info("stored carts erased", extra={"identifier": identifier, "deleted": deleted})
        return deleted

    def destroy(self, preserve: Iterable[str] = ()) -> None:
        """Removes lines of every instance, fees and metadata.
        Metadata keys listed in `preserve` survive"""
        metadata = self.metadata()

        self._session.remove(self._config.identifier)

        for key in preserve:
            if data_has(metadata, key):
                self.set_metadata(key, data_get(metadata, key))

    # fees

    def get_fees(self) -> dict[str, FeeS]:
        return load_fees(self._session.get(self._session_key(self.fees_key)))

    def add_fee(self, identifier: str, title: str, value: int | float | str) -> FeeS:
        fee = FeeS(identifier=str(identifier), title=title, value=value)

        fees = self.get_fees()
        fees[fee.identifier] = fee

        self._session.put(self._session_key(self.fees_key), dump_fees(fees))
        return fee

    def remove_fee(self, identifier: str | None = None) -> None:
        key = self._session_key(self.fees_key)

        if identifier is None:
            self._session.remove(key)
            return

        fees = self.get_fees()
        fees.pop(str(identifier), None)

        self._session.put(key, dump_fees(fees))

    # metadata

    def metadata(self) -> dict[str, Any]:
        return copy.deepcopy(self._session.get(self._session_key(self.metadata_key)) or {})

    def metadata_for(self, key: str) -> Any:
        return data_get(self.metadata(), key)

    def set_metadata(self, key: str, value: Any) -> None:
        metadata = self.metadata()
        data_set(metadata, key, value)
        self._session.put(self._session_key(self.metadata_key), metadata)

    def remove_metadata(self, key: str | None = None) -> None:
        session_key = self._session_key(self.metadata_key)

        if key is None:
            self._session.remove(session_key)
            return

        metadata = self.metadata()
        data_forget(metadata, key)
        self._session.put(session_key, metadata)

    # session helpers

    def _session_key(self, key: str) -> str:
        return f"{self._config.identifier}.{key}"

    def _current_instance(self) -> str:
        instance = self._session.get(self._session_key(self.current_instance_key))
        return self._session_key(instance or self.default_instance)

    def _get_content(self) -> dict[str, CartItemS]:
        return load_content(self._session.get(self._current_instance()))

    def _put_content(self, content: dict[str, CartItemS]) -> None:
        self._session.put(self._current_instance(), dump_content(content))
