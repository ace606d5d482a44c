import pytest
from pydantic import ValidationError

from application.schemas.domain_model_schemas import FeeS


def test_absolute_fee():
    fee = FeeS(identifier="shipping", title="Shipping", value=5)

    assert fee.value() == 5
    assert fee.raw_value() == "5"
    assert not fee.is_percentage()
    assert not fee.is_discount()


def test_percentage_fee_strips_percent_sign():
    fee = FeeS(identifier="service", title="Service", value="7.5%")

    assert fee.is_percentage()
    assert fee.value() == 7.5
    assert fee.raw_value() == "7.5%"


@pytest.mark.parametrize(
    "raw, percentage, amount",
    [
        ("-10", False, -10),
        ("-15%", True, -15),
    ]
)
def test_discount_flag_keeps_the_sign(raw, percentage, amount):
    fee = FeeS(identifier="promo", title="Promo", value=raw)

    assert fee.is_discount()
    assert fee.is_percentage() is percentage
    assert fee.value() == amount


def test_fee_is_applied_against_subtotal():
    assert FeeS(identifier="a", title="A", value="10%").apply_to(200) == pytest.approx(20)
    assert FeeS(identifier="b", title="B", value=3.5).apply_to(200) == pytest.approx(3.5)
    assert FeeS(identifier="c", title="C", value="-10").apply_to(200) == pytest.approx(-10)


def test_non_numeric_fee_is_rejected():
    with pytest.raises(ValidationError) as excinfo:
        FeeS(identifier="x", title="X", value="free%")

    assert "Invalid fee value: free%" in str(excinfo.value)


def test_fee_is_immutable():
    fee = FeeS(identifier="shipping", title="Shipping", value=5)

    with pytest.raises(ValidationError):
        fee.title = "Express"


def test_fee_reloads_from_its_dump():
    fee = FeeS(identifier="service", title="Service", value="-2.5%")

    reloaded = FeeS.model_validate(fee.model_dump())

    assert reloaded == fee
    assert reloaded.is_discount() and reloaded.is_percentage()
