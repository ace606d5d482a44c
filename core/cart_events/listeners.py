from core.base_repos import SessionStoreInterface
from core.cart_events.cart_events import AuthEvents
from core.cart_events.dispatcher import EventDispatcher
from core.config import CartSettings
from logger import logger


def register_logout_listener(
        dispatcher: EventDispatcher,
        config: CartSettings,
) -> bool:
    """Wipes every cart instance of the user on logout when
    `destroy_on_logout` is enabled. The logout event must carry the
    session store of the user who logs out"""
    if not config.destroy_on_logout:
        return False

    def destroy_cart(session_store: SessionStoreInterface) -> None:
        logger.debug("destroying cart on logout", extra={"identifier": config.identifier})
        session_store.remove(config.identifier)

    dispatcher.listen(AuthEvents.LOGOUT, destroy_cart)
    return True
