from typing import Any

from jinja2 import Environment

from tacos.domain.forms import FieldErrors
from tacos.domain.ingredients import INGREDIENTS, ingredients_by_type
from tacos.domain.models import Ingredient, Taco


def add_ingredients_to_context(
    context: dict[str, Any],
    ingredients: tuple[Ingredient, ...] = INGREDIENTS,
) -> dict[str, Any]:
    """Runs ahead of every design view, GET or POST.

    Each group lands under its own key (`wrap`, `protein`, ...) and all of
    them together under `groups`.
    """
    groups = ingredients_by_type(ingredients)
    context.update(groups)
    context["groups"] = groups
    context.setdefault("taco", Taco())
    return context


class DesignPage:
    def __init__(
        self,
        *,
        environment: Environment,
        taco: Taco | None = None,
        errors: FieldErrors | None = None,
        template_name: str = "design.html",
    ) -> None:
        self.env = environment
        self.taco = Taco() if taco is None else taco
        self.errors = {} if errors is None else errors
        self.name = template_name

    @property
    def selected(self) -> set[str]:
        return {i.id for i in self.taco.ingredients}

    @property
    def context(self) -> dict[str, Any]:
        context: dict[str, Any] = {
            "taco": self.taco,
            "selected": self.selected,
            "errors": self.errors,
        }
        return add_ingredients_to_context(context)

    def render(self) -> str:
        return self.env.get_template(self.name).render(**self.context)
