import hashlib
import importlib
import json
import sys
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, computed_field, field_validator

from application.schemas.cart_schemas import CartItemPatchS
from application.schemas.domain_model_schemas.buyable import Buyable
from core.exceptions import UnknownModelError

_options_adapter = TypeAdapter(dict[str, Any])


def normalize_options(options: dict[str, Any]) -> dict[str, Any]:
    """Options in the form they take once dumped to the session (JSON types only)"""
    return _options_adapter.dump_python(options, mode="json")


def generate_row_id(id: int | str, options: dict[str, Any]) -> str:  # noqa
    serialized_options = json.dumps(normalize_options(options), sort_keys=True)
    return hashlib.md5(f"{id}{serialized_options}".encode()).hexdigest()


def qualified_name(model: type) -> str:
    return f"{model.__module__}.{model.__qualname__}"


def resolve_model(path: str) -> type:
    """Imports a class by its dotted path, e.g. "shop.models.Product"."""
    parts = path.split(".")
    if not all(parts):
        raise UnknownModelError(model=path)

    for split_at in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split_at])
        module = sys.modules.get(module_name)
        if module is None:
            try:
                module = importlib.import_module(module_name)
            except ImportError:
                continue

        target: Any = module
        try:
            for attr in parts[split_at:]:
                target = getattr(target, attr)
        except AttributeError:
            continue

        if isinstance(target, type):
            return target

    raise UnknownModelError(model=path)


class CartItemS(BaseModel):
    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    id: int | str
    name: str | None = None
    quantity: int | float = 1
    price: float = 0.0
    tax_rate: float = 0.0
    options: dict[str, Any] = Field(default_factory=dict)
    associated_model: str | None = None

    @field_validator("id")
    @classmethod
    def id_is_not_empty(cls, value: int | str) -> int | str:
        if isinstance(value, str) and not value.strip():
            raise ValueError("Please supply a valid identifier")
        return value

    @field_validator("options")
    @classmethod
    def options_are_json(cls, value: dict[str, Any]) -> dict[str, Any]:
        return normalize_options(value)

    @computed_field
    @property
    def row_id(self) -> str:
        return generate_row_id(self.id, self.options)

    @property
    def tax(self) -> float:
        return self.price * (self.tax_rate / 100)

    @property
    def price_tax(self) -> float:
        return self.price + self.tax

    @property
    def subtotal(self) -> float:
        return self.quantity * self.price

    @property
    def tax_total(self) -> float:
        return self.quantity * self.tax

    @property
    def total(self) -> float:
        return self.quantity * self.price_tax

    @classmethod
    def from_attributes(
            cls,
            id: int | str,  # noqa
            name: str | None,
            price: float,
            options: dict[str, Any] | None = None,
    ) -> "CartItemS":
        return cls(id=id, name=name, price=price, options=options or {})

    @classmethod
    def from_buyable(
            cls,
            buyable: Buyable,
            options: dict[str, Any] | None = None
    ) -> "CartItemS":
        options = options or {}
        return cls(
            id=buyable.get_buyable_identifier(options),
            name=buyable.get_buyable_description(options),
            price=buyable.get_buyable_price(options),
            options=options,
        )

    def set_quantity(self, quantity: int | float) -> None:
        self.quantity = quantity

    def set_tax_rate(self, tax_rate: float) -> None:
        self.tax_rate = tax_rate

    def update_from_buyable(
            self,
            buyable: Buyable,
            options: dict[str, Any] | None = None
    ) -> None:
        options = options or self.options
        self.id = buyable.get_buyable_identifier(options)
        self.name = buyable.get_buyable_description(options)
        self.price = buyable.get_buyable_price(options)
        self.options = options

    def update_from_patch(self, patch: CartItemPatchS) -> None:
        for field, value in patch.model_dump(exclude_unset=True).items():
            if value is None:
                continue
            setattr(self, field, value)

    def associate(self, model: type | object | str) -> None:
        """Keeps only the dotted path of the model's class, never the object"""
        if isinstance(model, str):
            resolve_model(model)
            self.associated_model = model
        elif isinstance(model, type):
            self.associated_model = qualified_name(model)
        else:
            self.associated_model = qualified_name(type(model))

    def associated_class(self) -> type | None:
        if self.associated_model is None:
            return None
        return resolve_model(self.associated_model)

    def lookup_model(self) -> Any:
        """Loads the associated entity through the class' `find(id)`, if it has one"""
        model_class = self.associated_class()
        finder = getattr(model_class, "find", None)
        if finder is None:
            return None
        return finder(self.id)
