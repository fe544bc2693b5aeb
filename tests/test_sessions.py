import logging

import pytest

from tacos.domain.models import Taco
from tacos.domain.services import add_taco, place_order
from tacos.domain.sessions import InMemoryOrderStore


def test_get_or_create_same_order() -> None:
    store = InMemoryOrderStore()
    assert store.get_or_create("a") is store.get_or_create("a")
    assert store.get_or_create("a") is not store.get_or_create("b")
    assert len(store) == 2


def test_complete_starts_over() -> None:
    store = InMemoryOrderStore()
    order = store.get_or_create("a")
    order.add_taco(Taco(name="One"))
    assert store.complete("a") is order
    assert store.get_or_create("a").tacos == []


def test_idle_orders_expire() -> None:
    store = InMemoryOrderStore(ttl_seconds=-1)
    store.get_or_create("a").add_taco(Taco(name="One"))
    store.get_or_create("b")
    assert len(store) == 1


def test_add_taco_logs(caplog: pytest.LogCaptureFixture) -> None:
    store = InMemoryOrderStore()
    order = store.get_or_create("a")
    with caplog.at_level(logging.INFO, logger="tacos.domain.services"):
        add_taco(Taco(name="Logged"), order=order)
    assert [t.name for t in order.tacos] == ["Logged"]
    assert "Processing taco: Taco(name='Logged'" in caplog.text


def test_place_order() -> None:
    store = InMemoryOrderStore()
    store.get_or_create("a").add_taco(Taco(name="One"))
    order = place_order("a", store=store)
    assert order.placed_at is not None
    assert [t.name for t in order.tacos] == ["One"]
    assert len(store) == 0


def test_get_does_not_create() -> None:
    store = InMemoryOrderStore()
    assert store.get("a") is None
    assert len(store) == 0
    order = store.get_or_create("a")
    assert store.get("a") is order


def test_recently_touched_orders_survive(monkeypatch: pytest.MonkeyPatch) -> None:
    now = [0.0]
    monkeypatch.setattr("tacos.domain.sessions.time.monotonic", lambda: now[0])
    store = InMemoryOrderStore(ttl_seconds=10)
    store.get_or_create("a")
    store.get_or_create("b")
    now[0] = 5.0
    store.get("a")
    now[0] = 12.0
    assert store.get("b") is None
    assert store.get("a") is not None
    assert len(store) == 1
