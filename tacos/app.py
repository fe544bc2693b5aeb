import functools
import logging
from typing import Any, Awaitable, Callable
import uuid

from jinja2 import Environment, FileSystemLoader, select_autoescape
from rich.logging import RichHandler
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.sessions import SessionMiddleware
from starlette.requests import Request
from starlette.responses import HTMLResponse, RedirectResponse
from starlette.routing import Mount, Route
from starlette.staticfiles import StaticFiles

from tacos import config
from tacos.domain.forms import bind_order, bind_taco
from tacos.domain.ingredients import IngredientByIdConverter
from tacos.domain.models import TacoOrder
from tacos.domain.services import add_taco, place_order
from tacos.domain.sessions import InMemoryOrderStore
from tacos.html.design import DesignPage
from tacos.html.order import OrderPage


CONFIG = config.Config()


logging.basicConfig(
    level=CONFIG.log_level,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True)],
)
logger = logging.getLogger(__name__)


TEMPLATES = Environment(
    loader=FileSystemLoader(CONFIG.html_dir),
    autoescape=select_autoescape(),
)


SESSION_KEY = "order_session"


def aHTMLResponse(route: Callable[..., Awaitable[str | tuple[str, int]]]):
    @functools.wraps(route)
    async def wrapper(*args: Any, **kwargs: Any) -> HTMLResponse:
        resp = await route(*args, **kwargs)
        if not isinstance(resp, tuple):
            html, code = resp, 200
        else:
            html, code = resp
        return HTMLResponse(html, status_code=code)

    return wrapper


def session_id(request: Request) -> str:
    if SESSION_KEY not in request.session:
        request.session[SESSION_KEY] = uuid.uuid4().hex
    return request.session[SESSION_KEY]


def current_order(request: Request) -> TacoOrder:
    """The session's order, or a throwaway empty one. Never stores anything."""
    sid = request.session.get(SESSION_KEY)
    store: InMemoryOrderStore = request.app.state.orders
    order = None if sid is None else store.get(sid)
    return TacoOrder() if order is None else order


@aHTMLResponse
async def homepage(request: Request) -> str:
    return TEMPLATES.get_template("home.html").render()


async def design(request: Request) -> HTMLResponse | RedirectResponse:
    match request.method.lower():
        case "get":
            return HTMLResponse(DesignPage(environment=TEMPLATES).render())
        case "post":
            async with request.form() as form:
                name = str(form.get("name", ""))
                codes = [str(c) for c in form.getlist("ingredients")]

            converter: IngredientByIdConverter = request.app.state.converter
            taco, errors = bind_taco(name, codes, converter=converter)
            if errors:
                logger.debug("Taco rejected: %s", errors)
                return HTMLResponse(
                    DesignPage(environment=TEMPLATES, taco=taco, errors=errors).render()
                )

            store: InMemoryOrderStore = request.app.state.orders
            add_taco(taco, order=store.get_or_create(session_id(request)))
            return RedirectResponse("/orders/current", status_code=303)
        case _:
            raise ValueError("Unsupported method.")


@aHTMLResponse
async def order_form(request: Request) -> str:
    order = current_order(request)
    return OrderPage(order, environment=TEMPLATES).render()


async def process_order(request: Request) -> HTMLResponse | RedirectResponse:
    async with request.form() as form:
        data = {k: str(v) for k, v in form.items()}

    order = current_order(request)
    errors = bind_order(data, order)
    if errors:
        logger.debug("Order rejected: %s", errors)
        return HTMLResponse(
            OrderPage(order, environment=TEMPLATES, form=data, errors=errors).render()
        )

    store: InMemoryOrderStore = request.app.state.orders
    place_order(session_id(request), store=store)
    return RedirectResponse("/", status_code=303)


app = Starlette(
    debug=True if CONFIG.env == config.Env.local else False,
    routes=[
        Route("/", homepage),
        Route("/design", design, methods=["GET", "POST"]),
        Route("/orders/current", order_form, methods=["GET"]),
        Route("/orders", process_order, methods=["POST"]),
        Mount("/assets", StaticFiles(directory=CONFIG.assets_dir), name="assets"),
    ],
    middleware=[
        Middleware(
            SessionMiddleware,
            secret_key=CONFIG.session_secret,
            max_age=CONFIG.session_max_age,
            same_site="lax",
            https_only=CONFIG.env == config.Env.prod,
        ),
    ],
)

app.state.converter = IngredientByIdConverter()
app.state.orders = InMemoryOrderStore(ttl_seconds=CONFIG.order_ttl_seconds)
