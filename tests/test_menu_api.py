import pytest

from foodfest.schemas.menu import MenuDocument, MenuItem, MenuMeta


@pytest.fixture
def seeded(menu_store):
    menu_store.write(MenuDocument(
        meta=MenuMeta(stall_name="Chai Corner", fest_name="FoodFest"),
        items=[
            MenuItem(key="tea", emoji="☕", name="Tea", description="Hot", max_price=20),
        ],
    ))
    return menu_store


def test_get_menu(client, seeded):
    res = client.get("/api/menu")
    assert res.status_code == 200
    assert res.json() == {
        "meta": {"stallName": "Chai Corner", "festName": "FoodFest"},
        "items": [
            {"key": "tea", "emoji": "☕", "name": "Tea", "description": "Hot", "maxPrice": 20},
        ],
    }


def test_get_menu_missing_file(client):
    res = client.get("/api/menu")
    assert res.status_code == 500
    assert res.json() == {"error": "Failed to load menu"}


def test_create_item(client, seeded):
    res = client.post("/api/menu", json={"key": "lassi", "emoji": "🥛", "name": "Lassi", "maxPrice": "40"})
    assert res.status_code == 201
    assert res.json() == {
        "ok": True,
        "item": {"key": "lassi", "emoji": "🥛", "name": "Lassi", "description": "", "maxPrice": 40},
    }
    keys = [item["key"] for item in client.get("/api/menu").json()["items"]]
    assert keys == ["tea", "lassi"]


def test_create_item_missing_key(client, seeded):
    res = client.post("/api/menu", json={"name": "Nameless"})
    assert res.status_code == 400
    assert res.json() == {"error": "Menu item key is required"}


def test_create_item_duplicate(client, seeded):
    res = client.post("/api/menu", json={"key": "tea", "name": "Green Tea", "maxPrice": 99})
    assert res.status_code == 409
    assert res.json() == {"error": "Menu item already exists"}

    items = client.get("/api/menu").json()["items"]
    assert items == [{"key": "tea", "emoji": "☕", "name": "Tea", "description": "Hot", "maxPrice": 20}]


def test_update_item_partial(client, seeded):
    res = client.put("/api/menu/tea", json={"maxPrice": 50})
    assert res.status_code == 200
    assert res.json()["item"] == {
        "key": "tea", "emoji": "☕", "name": "Tea", "description": "Hot", "maxPrice": 50,
    }


def test_update_item_not_found(client, seeded):
    res = client.put("/api/menu/coffee", json={"name": "Coffee"})
    assert res.status_code == 404
    assert res.json() == {"error": "Menu item not found"}


def test_delete_item(client, seeded):
    res = client.delete("/api/menu/tea")
    assert res.status_code == 200
    assert res.json() == {"ok": True, "deleted": "tea"}
    assert client.get("/api/menu").json()["items"] == []


def test_delete_unknown_item(client, seeded):
    res = client.delete("/api/menu/unknown")
    assert res.status_code == 404
    assert res.json() == {"error": "Menu item not found"}


def test_delete_blank_key(client, seeded):
    res = client.delete("/api/menu/%20")
    assert res.status_code == 400


def test_update_meta(client, seeded):
    res = client.put("/api/menu", json={"stallName": "Dosa Den"})
    assert res.status_code == 200
    assert res.json() == {"ok": True, "meta": {"stallName": "Dosa Den", "festName": "FoodFest"}}
    assert client.get("/api/menu").json()["meta"]["stallName"] == "Dosa Den"


def test_update_blank_key(client, seeded):
    res = client.put("/api/menu/%20", json={"name": "x"})
    assert res.status_code == 400
    assert res.json() == {"error": "Menu item key is required"}


def test_create_item_with_control_characters(client, seeded):
    res = client.post("/api/menu", json={"key": "chai\x01", "name": "Chai"})
    assert res.status_code == 201
    assert res.json()["item"]["key"] == "chai"

    keys = [item["key"] for item in client.get("/api/menu").json()["items"]]
    assert keys == ["tea", "chai"]


def test_storage_failure_returns_500(client, menu_store):
    with open(menu_store.path, "w") as f:
        f.write("garbage")

    res = client.post("/api/menu", json={"key": "tea"})
    assert res.status_code == 500
    assert res.json() == {"error": "Failed to save menu item"}

    res = client.put("/api/menu/tea", json={"maxPrice": 10})
    assert res.status_code == 500
    assert res.json() == {"error": "Failed to update menu item"}

    res = client.delete("/api/menu/tea")
    assert res.status_code == 500
    assert res.json() == {"error": "Failed to delete menu item"}

    res = client.put("/api/menu", json={"stallName": "x"})
    assert res.status_code == 500

    assert client.get("/api/menu").status_code == 500
