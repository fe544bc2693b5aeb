from datetime import datetime, timezone
import logging

from tacos.domain.models import Taco, TacoOrder
from tacos.domain.sessions import InMemoryOrderStore


logger = logging.getLogger(__name__)


def add_taco(taco: Taco, *, order: TacoOrder) -> None:
    order.add_taco(taco)
    logger.info("Processing taco: %s", taco)


def place_order(session_id: str, *, store: InMemoryOrderStore) -> TacoOrder:
    """Stamp the session's order and hand it back, the session starts over."""
    order = store.get_or_create(session_id)
    order.placed_at = datetime.now(timezone.utc)
    logger.info("Order submitted: %s", order)
    store.complete(session_id)
    return order
