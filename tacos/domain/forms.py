"""Binding of posted form fields onto domain objects.

Errors are collected per field and handed back to the caller, the views
render them next to the offending input. Nothing in here raises for bad
user input.
"""
from collections.abc import Iterable, Mapping
import re

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from tacos.domain.ingredients import IngredientByIdConverter
from tacos.domain.models import Ingredient, Taco, TacoOrder


FieldErrors = dict[str, list[str]]


ZIP_RE = re.compile(r"^\d{5}$")

DELIVERY_FIELDS = (
    "delivery_name",
    "delivery_street",
    "delivery_city",
    "delivery_state",
    "delivery_zip",
)


def _required(value: str, msg: str) -> str:
    if not value:
        raise PydanticCustomError("required", msg)
    return value


def collect_errors(exc: ValidationError) -> FieldErrors:
    errors: FieldErrors = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err["loc"] else "__all__"
        errors.setdefault(field, []).append(err["msg"])
    return errors


class TacoForm(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str
    ingredients: list[str]

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        return _required(v, "Name is required")

    @field_validator("ingredients")
    @classmethod
    def at_least_one(cls, v: list[str]) -> list[str]:
        if not v:
            raise PydanticCustomError(
                "too_short", "You must choose at least 1 ingredient"
            )
        return v


class OrderForm(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    delivery_name: str
    delivery_street: str
    delivery_city: str
    delivery_state: str
    delivery_zip: str

    @field_validator("delivery_name")
    @classmethod
    def name_required(cls, v: str) -> str:
        return _required(v, "Delivery name is required")

    @field_validator("delivery_street")
    @classmethod
    def street_required(cls, v: str) -> str:
        return _required(v, "Street is required")

    @field_validator("delivery_city")
    @classmethod
    def city_required(cls, v: str) -> str:
        return _required(v, "City is required")

    @field_validator("delivery_state")
    @classmethod
    def state_code(cls, v: str) -> str:
        v = _required(v, "State is required")
        if len(v) != 2:
            raise PydanticCustomError("state", "State must be a 2 letter code")
        return v.upper()

    @field_validator("delivery_zip")
    @classmethod
    def zip_code(cls, v: str) -> str:
        v = _required(v, "Zip is required")
        if not ZIP_RE.match(v):
            raise PydanticCustomError("zip", "Zip must be 5 digits")
        return v


def bind_taco(
    name: str,
    codes: Iterable[str],
    *,
    converter: IngredientByIdConverter,
) -> tuple[Taco, FieldErrors]:
    """Build a `Taco` from the design form.

    Codes the converter does not know are reported against `ingredients`
    and left off the returned taco.
    """
    codes = [c.strip() for c in codes if c.strip()]
    errors: FieldErrors = {}
    try:
        TacoForm(name=name, ingredients=codes)
    except ValidationError as e:
        errors = collect_errors(e)

    ingredients: list[Ingredient] = []
    for code in codes:
        ingredient = converter.convert(code)
        if ingredient is None:
            errors.setdefault("ingredients", []).append(
                f"Unknown ingredient: {code}"
            )
            continue
        ingredients.append(ingredient)

    return Taco(name=name.strip(), ingredients=ingredients), errors


def bind_order(data: Mapping[str, str], order: TacoOrder) -> FieldErrors:
    """Copy delivery details onto `order`. Only touches it when valid."""
    errors: FieldErrors = {}
    if order.is_empty:
        errors["tacos"] = ["Design at least one taco before ordering"]

    try:
        form = OrderForm(**{f: data.get(f, "") for f in DELIVERY_FIELDS})
    except ValidationError as e:
        errors.update(collect_errors(e))
        return errors

    if errors:
        return errors

    for f in DELIVERY_FIELDS:
        setattr(order, f, getattr(form, f))
    return errors
