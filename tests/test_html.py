from tacos.app import TEMPLATES
from tacos.domain.ingredients import ingredients_by_type
from tacos.domain.models import Taco, TacoOrder
from tacos.html.design import DesignPage, add_ingredients_to_context
from tacos.html.order import OrderPage


def test_add_ingredients_to_context() -> None:
    context = add_ingredients_to_context({})
    groups = ingredients_by_type()
    for key, group in groups.items():
        assert context[key] == group
    assert context["groups"] == groups
    assert context["taco"] == Taco()


def test_add_ingredients_to_context_keeps_taco() -> None:
    taco = Taco(name="Kept")
    assert add_ingredients_to_context({"taco": taco})["taco"] is taco


def test_design_page_errors() -> None:
    html = DesignPage(
        environment=TEMPLATES,
        taco=Taco(name="<b>bold</b>"),
        errors={"name": ["Name is required"]},
    ).render()
    assert "Name is required" in html
    assert "&lt;b&gt;bold&lt;/b&gt;" in html


def test_order_page_prefers_posted_form() -> None:
    order = TacoOrder(delivery_name="Saved", tacos=[Taco(name="One")])
    page = OrderPage(
        order, environment=TEMPLATES, form={"delivery_name": "Posted"}
    )
    assert page.form["delivery_name"] == "Posted"
    assert page.form["delivery_city"] == ""
    assert 'value="Posted"' in page.render()
