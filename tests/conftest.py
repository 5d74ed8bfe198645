import pytest
from fastapi.testclient import TestClient

from foodfest.config import Settings, get_settings
from foodfest.main import app
from foodfest.services.menu_store import MenuStore
from foodfest.services.order_store import OrderStore


@pytest.fixture
def settings(tmp_path):
    return Settings(
        orders_file=str(tmp_path / "orders-log.xlsx"),
        menu_file=str(tmp_path / "menu.xlsx"),
        static_dir=str(tmp_path / "public"),
    )


@pytest.fixture
def order_store(settings):
    return OrderStore(settings.orders_file)


@pytest.fixture
def menu_store(settings):
    return MenuStore(settings.menu_file)


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
