from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio

from tacos.app import app
from tacos.domain.sessions import InMemoryOrderStore


@pytest.fixture
def orders() -> InMemoryOrderStore:
    store = InMemoryOrderStore()
    app.state.orders = store
    return store


@pytest_asyncio.fixture
async def client(orders: InMemoryOrderStore) -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://testserver",
    ) as c:
        yield c
