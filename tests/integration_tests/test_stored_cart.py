import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from application.repositories import CartRepository, ShoppingSessionRepository
from application.services import CartService
from application.services.cart_service import deserialize_cart
from core.cart_events import EventDispatcher
from infrastructure.database import DatabaseClient


def stored_rows(db_client: DatabaseClient, cart_repo: CartRepository) -> int:
    with db_client.session_factory() as session:
        return session.execute(select(func.count()).select_from(cart_repo.table)).scalar_one()


def test_store_destroy_restore(cart_service: CartService, dispatched):
    apple = cart_service.add("A", "Apple", 3, 2.0, {"variety": "gala"}, tax_rate=10)
    bread = cart_service.add("B", "Bread", 1, 4.5)
    before = {row_id: cart_item.quantity for row_id, cart_item in cart_service.content().items()}

    cart_service.store(42)
    cart_service.destroy()

    assert cart_service.is_empty()
    assert cart_service.has_stored_cart(42)

    cart_service.restore(42)

    content = cart_service.content()
    assert {row_id: cart_item.quantity for row_id, cart_item in content.items()} == before
    assert content[apple.row_id].options == {"variety": "gala"}
    assert content[apple.row_id].tax_rate == 10
    assert content[bread.row_id].price == 4.5
    assert [name for name, _ in dispatched[-2:]] == ["cart.stored", "cart.restored"]


def test_restore_unknown_identifier_changes_nothing(cart_service: CartService, dispatched):
    cart_item = cart_service.add("A", "Apple", 2, 1)

    cart_service.restore("nobody")

    assert cart_service.content() == {cart_item.row_id: cart_service.get(cart_item.row_id)}
    assert cart_service.count() == 2
    assert "cart.restored" not in [name for name, _ in dispatched]


def test_restore_sums_quantities_of_matching_lines(cart_service: CartService):
    row_id = cart_service.add("A", "Apple", 2, 1).row_id
    cart_service.store("user-1")
    cart_service.add("B", "Bread", 1, 3)

    cart_service.restore("user-1")

    assert cart_service.get(row_id).quantity == 4
    assert cart_service.count() == 5


def test_store_overwrites_previous_snapshot(
        cart_service: CartService,
        db_client: DatabaseClient,
        cart_repo: CartRepository,
):
    row_id = cart_service.add("A", "Apple", 2, 1).row_id
    cart_service.store(7)
    cart_service.update(row_id, 5)
    cart_service.store(7)

    assert stored_rows(db_client, cart_repo) == 1

    with db_client.session_factory() as session:
        stored_cart = cart_repo.get_stored_cart(session=session, identifier="7", instance="default")

    assert [cart_item.quantity for cart_item in deserialize_cart(stored_cart.content)] == [5]

    cart_service.destroy()
    cart_service.restore(7)

    assert cart_service.get(row_id).quantity == 5


def test_snapshots_are_kept_per_instance(cart_service: CartService):
    cart_service.set_instance("wishlist")
    wish = cart_service.add("W", "Watch", 1, 150)
    cart_service.store(1)
    cart_service.destroy()

    cart_service.restore(1)

    assert cart_service.instance() == "default"
    assert cart_service.content() == {}

    cart_service.set_instance("wishlist")
    cart_service.restore(1)

    assert cart_service.instance() == "wishlist"
    assert list(cart_service.content()) == [wish.row_id]


def test_erase_deletes_every_instance(
        cart_service: CartService,
        db_client: DatabaseClient,
        cart_repo: CartRepository,
):
    cart_service.add("A", "Apple", 1, 1)
    cart_service.store(3)
    cart_service.set_instance("wishlist").add("W", "Watch", 1, 150)
    cart_service.store(3)
    cart_service.store(4)

    deleted = cart_service.erase(3)

    assert deleted == 2
    assert not cart_service.has_stored_cart(3)
    assert cart_service.has_stored_cart(4)
    assert stored_rows(db_client, cart_repo) == 1


def test_failed_insert_keeps_previous_snapshot(
        cart_service: CartService,
        cart_repo: CartRepository,
        monkeypatch,
):
    row_id = cart_service.add("A", "Apple", 2, 1).row_id
    cart_service.store(9)
    cart_service.update(row_id, 8)

    def broken_create(**kwargs):
        raise OperationalError("INSERT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(cart_repo, "create", broken_create)

    with pytest.raises(SQLAlchemyError):
        cart_service.store(9)

    monkeypatch.undo()
    cart_service.destroy()
    cart_service.restore(9)

    assert cart_service.get(row_id).quantity == 2


def test_database_errors_reach_the_caller(
        session_store: ShoppingSessionRepository,
        events: EventDispatcher,
        db_client: DatabaseClient,
):
    cart_service = CartService(
        session_store=session_store,
        events=events,
        uow=db_client.unit_of_work(),
        cart_repo=CartRepository(table_name="table_that_was_never_created"),
    )
    cart_service.add("A", "Apple", 1, 1)

    with pytest.raises(OperationalError):
        cart_service.store(1)

    with pytest.raises(OperationalError):
        cart_service.restore(1)

    assert cart_service.count() == 1
