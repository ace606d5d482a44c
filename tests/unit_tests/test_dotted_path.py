from core.utils import data_forget, data_get, data_has, data_set


def test_get_nested_and_literal_keys():
    data = {"shipping": {"method": "express"}, "a.b": 1}

    assert data_get(data, "shipping.method") == "express"
    assert data_get(data, "a.b") == 1
    assert data_get(data, "shipping.missing", "fallback") == "fallback"
    assert data_get(data, None) is data


def test_set_creates_intermediate_levels():
    data = {"shipping": "pickup"}

    data_set(data, "shipping.address.city", "Berlin")
    data_set(data, "note", "ring twice")

    assert data == {"shipping": {"address": {"city": "Berlin"}}, "note": "ring twice"}


def test_has_accepts_falsy_values():
    data = {"flags": {"gift": False}}

    assert data_has(data, "flags.gift")
    assert not data_has(data, "flags.express")


def test_forget_nested_key_only():
    data = {"shipping": {"method": "express", "city": "Berlin"}}

    data_forget(data, "shipping.method")
    data_forget(data, "unknown.key")

    assert data == {"shipping": {"city": "Berlin"}}
