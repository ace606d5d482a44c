from application.repositories import ShoppingSessionRepository


def test_dotted_keys_are_nested():
    storage = {}
    session_store = ShoppingSessionRepository(storage)

    session_store.put("cart.default", {"row": 1})
    session_store.put("cart._instance", "wishlist")

    assert storage == {"cart": {"default": {"row": 1}, "_instance": "wishlist"}}
    assert session_store.get("cart.default") == {"row": 1}
    assert session_store.has("cart._instance")


def test_remove_namespace_drops_all_entries():
    session_store = ShoppingSessionRepository({"other": 1})
    session_store.put("cart.default", {})
    session_store.put("cart._fees", {})

    session_store.remove("cart")

    assert not session_store.has("cart.default")
    assert session_store.get("cart._fees", "gone") == "gone"
    assert session_store.all() == {"other": 1}


def test_none_values_are_stored():
    session_store = ShoppingSessionRepository()
    session_store.put("cart._instance", None)

    assert session_store.has("cart._instance")
    assert session_store.get("cart._instance", "default") is None
    assert not session_store.has("cart._fees")
