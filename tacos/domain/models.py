from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class IngredientType(Enum):
    WRAP = "wrap"
    PROTEIN = "protein"
    VEGGIES = "veggies"
    CHEESE = "cheese"
    SAUCE = "sauce"

    @property
    def key(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class Ingredient:
    id: str
    name: str
    type: IngredientType


@dataclass
class Taco:
    name: str = ""
    ingredients: list[Ingredient] = field(default_factory=list)

    def __str__(self) -> str:
        ids = ", ".join(i.id for i in self.ingredients)
        return f"Taco(name={self.name!r}, ingredients=[{ids}])"


@dataclass
class TacoOrder:
    delivery_name: str = ""
    delivery_street: str = ""
    delivery_city: str = ""
    delivery_state: str = ""
    delivery_zip: str = ""
    tacos: list[Taco] = field(default_factory=list)
    placed_at: datetime | None = None

    def add_taco(self, taco: Taco) -> None:
        self.tacos.append(taco)

    @property
    def is_empty(self) -> bool:
        return not self.tacos

    def __str__(self) -> str:
        return (
            f"TacoOrder(delivery_name={self.delivery_name!r}, "
            f"tacos={len(self.tacos)}, placed_at={self.placed_at})"
        )
