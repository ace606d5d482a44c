from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from core.exceptions import InvalidFeeError


class FeeS(BaseModel):
    """Surcharge or discount applied once against the cart subtotal.

    Built from a raw value such as `5`, `"-10"`, `"7.5%"` or `"-15%"`.
    A leading "-" flags a discount, a trailing "%" makes the fee a percentage
    of the subtotal. The discount flag is informational only, the sign of the
    value already makes a discount subtract from the total.
    """
    model_config = ConfigDict(frozen=True)

    identifier: str
    title: str
    raw: str
    amount: float
    percentage: bool = False
    discount: bool = False

    @model_validator(mode="before")
    @classmethod
    def classify(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        data = dict(data)
        raw = str(data.pop("value")) if "value" in data else str(data.get("raw", ""))

        is_percentage = raw.endswith("%")
        numeric = raw.replace("%", "") if is_percentage else raw
        try:
            amount = float(numeric)
        except ValueError:
            raise InvalidFeeError(info=raw)

        data.update(
            raw=raw,
            amount=amount,
            percentage=is_percentage,
            discount=raw.startswith("-"),
        )
        return data

    def is_percentage(self) -> bool:
        return self.percentage

    def is_discount(self) -> bool:
        return self.discount

    def raw_value(self) -> str:
        return self.raw

    def value(self) -> float:
        return self.amount

    def apply_to(self, subtotal: float) -> float:
        if self.percentage:
            return (subtotal * self.amount) / 100
        return self.amount
