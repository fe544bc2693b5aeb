import logging
import time

from tacos.domain.models import TacoOrder


logger = logging.getLogger(__name__)


class InMemoryOrderStore:
    """Session id -> the `TacoOrder` being built in that session."""

    def __init__(self, ttl_seconds: int = 1800) -> None:
        self.ttl_seconds = ttl_seconds
        self._orders: dict[str, TacoOrder] = {}
        # Least recently touched first.
        self._touched: dict[str, float] = {}

    def __len__(self) -> int:
        return len(self._orders)

    def get(self, session_id: str) -> TacoOrder | None:
        self._gc()
        order = self._orders.get(session_id)
        if order is not None:
            self._touch(session_id)
        return order

    def get_or_create(self, session_id: str) -> TacoOrder:
        order = self.get(session_id)
        if order is None:
            order = TacoOrder()
            self._orders[session_id] = order
            self._touch(session_id)
            logger.debug("New order for session %s", session_id)
        return order

    def complete(self, session_id: str) -> TacoOrder | None:
        self._touched.pop(session_id, None)
        return self._orders.pop(session_id, None)

    def _touch(self, session_id: str) -> None:
        self._touched.pop(session_id, None)
        self._touched[session_id] = time.monotonic()

    def _gc(self) -> None:
        now = time.monotonic()
        expired: list[str] = []
        for k, t in self._touched.items():
            if now - t <= self.ttl_seconds:
                break
            expired.append(k)
        for k in expired:
            self.complete(k)
        if expired:
            logger.debug("Dropped %d idle orders", len(expired))
