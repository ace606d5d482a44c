from typing import Any

import pytest

from application.repositories import CartRepository, ShoppingSessionRepository
from application.services import CartService
from core.cart_events import CartEvents, EventDispatcher
from core.config import CartSettings
from infrastructure.database import DatabaseClient


@pytest.fixture
def session_storage() -> dict:
    return {}


@pytest.fixture
def session_store(session_storage: dict) -> ShoppingSessionRepository:
    return ShoppingSessionRepository(session_storage)


@pytest.fixture
def events() -> EventDispatcher:
    return EventDispatcher()


@pytest.fixture
def dispatched(events: EventDispatcher) -> list[tuple[str, Any]]:
    """(event name, payload) of every cart event, in dispatch order"""
    recorded: list[tuple[str, Any]] = []
    for event in CartEvents:
        events.listen(
            event,
            lambda payload, name=event.value: recorded.append((name, payload))
        )
    return recorded


@pytest.fixture
def cart_config() -> CartSettings:
    return CartSettings()


@pytest.fixture
def cart_repo(cart_config: CartSettings) -> CartRepository:
    return CartRepository(table_name=cart_config.database.table)


@pytest.fixture
def db_client(tmp_path, cart_repo: CartRepository) -> DatabaseClient:
    client = DatabaseClient(url=f"sqlite:///{tmp_path / 'cart.db'}")
    client.create_tables()
    yield client
    client.dispose()


@pytest.fixture
def cart_service(
        session_store: ShoppingSessionRepository,
        events: EventDispatcher,
        db_client: DatabaseClient,
        cart_repo: CartRepository,
        cart_config: CartSettings,
) -> CartService:
    return CartService(
        session_store=session_store,
        events=events,
        uow=db_client.unit_of_work(),
        cart_repo=cart_repo,
        config=cart_config,
    )
