from collections.abc import Mapping

from jinja2 import Environment

from tacos.domain.forms import DELIVERY_FIELDS, FieldErrors
from tacos.domain.models import TacoOrder


class OrderPage:
    def __init__(
        self,
        order: TacoOrder,
        *,
        environment: Environment,
        form: Mapping[str, str] | None = None,
        errors: FieldErrors | None = None,
        template_name: str = "order-form.html",
    ) -> None:
        self.order = order
        self.env = environment
        self.form = {f: getattr(order, f) for f in DELIVERY_FIELDS}
        if form is not None:
            self.form.update({f: form.get(f, "") for f in DELIVERY_FIELDS})
        self.errors = {} if errors is None else errors
        self.name = template_name

    def render(self) -> str:
        return self.env.get_template(self.name).render(
            order=self.order,
            form=self.form,
            errors=self.errors,
        )
