import httpx
import pytest
import pytest_asyncio

from inventory.db.database import InventoryDatabase
from inventory.db.models.items import Item
from inventory.db.repositories.items import OfflineItemsRepository
from inventory.main import app
from inventory.ui.provider import get_items_repository


@pytest_asyncio.fixture
async def database(tmp_path):
    db = InventoryDatabase(f"sqlite+aiosqlite:///{tmp_path / 'items.db'}")
    await db.create_all()
    try:
        yield db
    finally:
        await db.dispose()


@pytest.fixture
def dao(database):
    return database.item_dao()


@pytest.fixture
def repository(dao):
    return OfflineItemsRepository(dao)


@pytest_asyncio.fixture
async def client(repository):
    app.dependency_overrides[get_items_repository] = lambda: repository
    transport = httpx.ASGITransport(app=app)
    try:
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
            yield c
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_item():
    def _make(name="Widget", price=1.5, quantity=3, id=0):
        return Item(id=id, name=name, price=price, quantity=quantity)
    return _make
