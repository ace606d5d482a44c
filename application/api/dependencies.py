from typing import Annotated

from fastapi import Depends, Request

from application.repositories import ShoppingSessionRepository
from application.services import CartService
from core.cart_events import event_dispatcher
from core.config import settings
from infrastructure.database import db_client


def get_cart(request: Request) -> CartService:
    """Cart of the current request. Needs starlette's SessionMiddleware
    (or anything else that fills `request.session`)"""
    return CartService(
        session_store=ShoppingSessionRepository(request.session),
        events=event_dispatcher,
        uow=db_client.unit_of_work(),
        config=settings.CART,
    )


CartDep = Annotated[CartService, Depends(get_cart)]
