import pytest
from fastapi.testclient import TestClient
from sqlalchemy import func, select

from friterie.core.errors import ConflictError, ValidationError
from friterie.db import session as db_session
from friterie.models import Category, MenuItem
from friterie.services import menu_service

MENU_URL = "/api/v1/menu"


def _create_category(client: TestClient, label: str) -> dict:
    response = client.post(f"{MENU_URL}/categories", json={"label": label})
    assert response.status_code == 201, response.text
    return response.json()


def _create_item(client: TestClient, category_id: str, name: str, price: str = "5,50 €", **extra) -> dict:
    payload = {"name": name, "description": f"{name} maison", "price": price, **extra}
    response = client.post(f"{MENU_URL}/categories/{category_id}/items", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("Frites", "frites"),
        ("Frites & Snacks", "frites-snacks"),
        ("  Crème brûlée ", "creme-brulee"),
        ("Menu du jour!!", "menu-du-jour"),
    ],
)
def test_slugify_label(label: str, expected: str) -> None:
    assert menu_service.slugify_label(label) == expected


def test_slugify_truncates_long_labels() -> None:
    assert len(menu_service.slugify_label("x" * 80)) == 50


def test_slugify_rejects_symbol_only_labels() -> None:
    with pytest.raises(ValidationError):
        menu_service.slugify_label("€€€")


def test_create_category_appends_in_order(admin_client: TestClient) -> None:
    first = _create_category(admin_client, "Frites")
    second = _create_category(admin_client, "Snacks")

    assert first == {"id": "frites", "label": "Frites", "order": 0}
    assert second["order"] == 1
    assert [row["id"] for row in admin_client.get(f"{MENU_URL}/categories").json()] == ["frites", "snacks"]


def test_duplicate_category_is_a_conflict(admin_client: TestClient) -> None:
    _create_category(admin_client, "Frites")

    response = admin_client.post(f"{MENU_URL}/categories", json={"label": "frites"})

    assert response.status_code == 409
    assert response.json() == {"error": "Category with this name already exists"}


def test_duplicate_category_in_service(db) -> None:
    menu_service.create_category(db, "Sauces")
    with pytest.raises(ConflictError):
        menu_service.create_category(db, "SAUCES")


def test_blank_category_label_is_rejected(admin_client: TestClient) -> None:
    response = admin_client.post(f"{MENU_URL}/categories", json={"label": "   "})
    assert response.status_code == 400


def test_rename_category_keeps_id(admin_client: TestClient) -> None:
    _create_category(admin_client, "Frites")

    response = admin_client.put(f"{MENU_URL}/categories/frites", json={"label": "Nos frites"})

    assert response.status_code == 200
    assert response.json()["id"] == "frites"
    assert response.json()["label"] == "Nos frites"


def test_public_menu_lists_items_in_order(admin_client: TestClient) -> None:
    _create_category(admin_client, "Frites")
    _create_item(admin_client, "frites", "Petite")
    _create_item(admin_client, "frites", "Grande", price="4,00 € - 5,00 €", highlight=True)

    admin_client.post("/api/v1/auth/logout")
    menu = admin_client.get(MENU_URL).json()

    assert [category["id"] for category in menu] == ["frites"]
    assert [item["name"] for item in menu[0]["items"]] == ["Petite", "Grande"]
    assert menu[0]["items"][1]["highlight"] is True
    assert menu[0]["items"][1]["order"] == 1


def test_item_in_missing_category_is_not_found(admin_client: TestClient) -> None:
    response = admin_client.post(
        f"{MENU_URL}/categories/nope/items",
        json={"name": "Frite", "description": "d", "price": "1 €"},
    )
    assert response.status_code == 404
    assert response.json() == {"error": "Category not found"}


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "", "description": "d", "price": "1 €"},
        {"name": "x" * 201, "description": "d", "price": "1 €"},
        {"name": "Frite", "description": "", "price": "1 €"},
        {"name": "Frite", "description": "d", "price": "x" * 51},
        {"name": "Frite", "description": "d", "price": "1 €", "image": "https://cdn.example.com/a.jpg"},
        {"name": "Frite", "description": "d", "price": "1 €", "image": "/images/../secret.txt"},
    ],
)
def test_item_payload_validation(admin_client: TestClient, payload: dict) -> None:
    _create_category(admin_client, "Frites")

    response = admin_client.post(f"{MENU_URL}/categories/frites/items", json=payload)

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request body"


def test_update_item_can_clear_image(admin_client: TestClient) -> None:
    _create_category(admin_client, "Frites")
    item = _create_item(admin_client, "frites", "Grande", image="/images/menu-items/grande.jpg")
    url = f"{MENU_URL}/categories/frites/items/{item['id']}"

    renamed = admin_client.put(url, json={"name": "Très grande"})
    cleared = admin_client.put(url, json={"image": None})

    assert renamed.json()["image"] == "/images/menu-items/grande.jpg"
    assert renamed.json()["name"] == "Très grande"
    assert cleared.json()["image"] is None
    assert cleared.json()["name"] == "Très grande"


def test_item_lookup_is_scoped_to_category(admin_client: TestClient) -> None:
    _create_category(admin_client, "Frites")
    _create_category(admin_client, "Snacks")
    item = _create_item(admin_client, "frites", "Grande")

    response = admin_client.get(f"{MENU_URL}/categories/snacks/items/{item['id']}")

    assert response.status_code == 404
    assert response.json() == {"error": "Item not found"}


def test_deleting_category_cascades_only_its_items(admin_client: TestClient, db) -> None:
    _create_category(admin_client, "Frites")
    _create_category(admin_client, "Snacks")
    _create_item(admin_client, "frites", "Petite")
    _create_item(admin_client, "frites", "Grande")
    _create_item(admin_client, "snacks", "Fricadelle")

    response = admin_client.delete(f"{MENU_URL}/categories/frites")

    assert response.status_code == 200
    remaining = db.scalars(select(MenuItem)).all()
    assert [(item.category_id, item.name) for item in remaining] == [("snacks", "Fricadelle")]
    assert admin_client.delete(f"{MENU_URL}/categories/frites").status_code == 404


def test_delete_item(admin_client: TestClient) -> None:
    _create_category(admin_client, "Frites")
    item = _create_item(admin_client, "frites", "Petite")
    url = f"{MENU_URL}/categories/frites/items/{item['id']}"

    assert admin_client.delete(url).status_code == 200
    assert admin_client.delete(url).status_code == 404


def test_reorder_categories(admin_client: TestClient) -> None:
    for label in ("A", "B", "C"):
        _create_category(admin_client, label)

    response = admin_client.post(f"{MENU_URL}/reorder", json={"type": "categories", "ids": ["c", "a", "b"]})

    assert response.status_code == 200
    assert [row["id"] for row in admin_client.get(f"{MENU_URL}/categories").json()] == ["c", "a", "b"]


def test_partial_reorder_leaves_missing_ids_untouched(admin_client: TestClient) -> None:
    for label in ("A", "B", "C"):
        _create_category(admin_client, label)

    admin_client.post(f"{MENU_URL}/reorder", json={"type": "categories", "ids": ["c", "b"]})
    rows = {row["id"]: row["order"] for row in admin_client.get(f"{MENU_URL}/categories").json()}

    assert rows == {"c": 0, "b": 1, "a": 0}


def test_reorder_items_within_category(admin_client: TestClient, db) -> None:
    _create_category(admin_client, "Frites")
    _create_category(admin_client, "Snacks")
    first = _create_item(admin_client, "frites", "Petite")
    second = _create_item(admin_client, "frites", "Grande")
    foreign = _create_item(admin_client, "snacks", "Fricadelle")

    response = admin_client.post(
        f"{MENU_URL}/reorder",
        json={"type": "items", "categoryId": "frites", "ids": [str(second["id"]), first["id"], foreign["id"]]},
    )

    assert response.status_code == 200
    names = [item["name"] for item in admin_client.get(f"{MENU_URL}/categories/frites/items").json()]
    assert names == ["Grande", "Petite"]
    assert db.scalar(select(MenuItem.order).where(MenuItem.id == foreign["id"])) == 0


@pytest.mark.parametrize(
    "payload",
    [
        {"type": "categories", "ids": []},
        {"type": "items", "ids": [1]},
        {"type": "items", "categoryId": "frites", "ids": ["abc"]},
        {"type": "footer", "ids": [1]},
    ],
)
def test_reorder_rejects_bad_payloads(admin_client: TestClient, payload: dict) -> None:
    response = admin_client.post(f"{MENU_URL}/reorder", json=payload)
    assert response.status_code == 400


def test_menu_item_exists_ignores_case(db) -> None:
    category = menu_service.create_category(db, "Frites")
    menu_service.create_item(db, category.id, name="Grande Frite", description="d", price="4 €")

    assert menu_service.menu_item_exists(db, "frites", "grande frite") is True
    assert menu_service.menu_item_exists(db, "frites", "petite frite") is False
    assert db.scalar(select(func.count(MenuItem.id))) == 1


def test_embedded_items_break_order_ties_by_id(admin_client: TestClient) -> None:
    _create_category(admin_client, "Frites")
    petite = _create_item(admin_client, "frites", "Petite")
    moyenne = _create_item(admin_client, "frites", "Moyenne")
    grande = _create_item(admin_client, "frites", "Grande")

    admin_client.post(
        f"{MENU_URL}/reorder",
        json={"type": "items", "categoryId": "frites", "ids": [grande["id"], moyenne["id"]]},
    )

    expected = ["Petite", "Grande", "Moyenne"]
    assert petite["order"] == 0
    assert [item["name"] for item in admin_client.get(MENU_URL).json()[0]["items"]] == expected
    assert [item["name"] for item in admin_client.get(f"{MENU_URL}/categories/frites").json()["items"]] == expected
    assert [item["name"] for item in admin_client.get(f"{MENU_URL}/categories/frites/items").json()] == expected


def test_category_insert_race_is_a_conflict(db, monkeypatch) -> None:
    with db_session.SessionLocal() as other:
        menu_service.create_category(other, "Sauces")
    # the existence check ran before the other insert committed
    monkeypatch.setattr(menu_service, "get_category", lambda _db, _category_id: None)

    with pytest.raises(ConflictError):
        menu_service.create_category(db, "Sauces")

    assert db.scalar(select(func.count(Category.id))) == 1
