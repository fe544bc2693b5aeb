from collections.abc import Iterable

from tacos.domain.models import Ingredient, IngredientType


INGREDIENTS: tuple[Ingredient, ...] = (
    Ingredient("FLTO", "Flour Tortilla", IngredientType.WRAP),
    Ingredient("COTO", "Corn Tortilla", IngredientType.WRAP),
    Ingredient("GRBF", "Ground Beef", IngredientType.PROTEIN),
    Ingredient("CARN", "Carnitas", IngredientType.PROTEIN),
    Ingredient("TMTO", "Diced Tomatoes", IngredientType.VEGGIES),
    Ingredient("LETC", "Lettuce", IngredientType.VEGGIES),
    Ingredient("CHED", "Cheddar", IngredientType.CHEESE),
    Ingredient("JACK", "Monterrey Jack", IngredientType.CHEESE),
    Ingredient("SLSA", "Salsa", IngredientType.SAUCE),
    Ingredient("SRCR", "Sour Cream", IngredientType.SAUCE),
)


def filter_by_type(
    ingredients: Iterable[Ingredient],
    type: IngredientType,
) -> list[Ingredient]:
    return [i for i in ingredients if i.type == type]


def ingredients_by_type(
    ingredients: Iterable[Ingredient] = INGREDIENTS,
) -> dict[str, list[Ingredient]]:
    """Group keys are the lower case type names, in enum order."""
    ingredients = tuple(ingredients)
    return {t.key: filter_by_type(ingredients, t) for t in IngredientType}


class IngredientByIdConverter:
    """Resolves the ingredient codes a form posts back to `Ingredient`s."""

    def __init__(self, ingredients: Iterable[Ingredient] = INGREDIENTS) -> None:
        self._ingredients = {i.id: i for i in ingredients}

    def convert(self, id: str) -> Ingredient | None:
        return self._ingredients.get(id)
