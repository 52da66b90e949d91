"""
Route tests with the service layer monkeypatched.

Authentication is replaced through FastAPI dependency overrides, so these
tests only check routing, serialization and access rules.
"""

from decimal import Decimal

from domain.enums import UserType, OrderStatus
from services.user_service import UserService
from services.meal_service import MealService
from services.order_service import OrderService
from services.newsletter_service import NewsletterService
from test_fixtures import client, API, make_user, make_meal, make_order, login_as


def test_root_and_health_check():
    assert "REST API" in client.get("/").text

    r = client.get("/health-check")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.json()["service"] == "Mealbox"
    assert "X-Request-ID" in r.headers


# =============================================================================
# USERS
# =============================================================================


def test_register_user_returns_camel_case(monkeypatch):
    created = make_user(user_id=12)
    monkeypatch.setattr(UserService, "create_user", lambda db, data: created)

    r = client.post(
        f"{API}/users",
        json={"email": "aino@example.com", "password": "s3cret-pass", "firstName": "Aino"},
    )
    assert r.status_code == 201
    body = r.json()
    assert body["id"] == 12
    assert body["firstName"] == "Aino"
    assert body["postalCode"] == "00100"
    assert "passwordHash" not in body and "password_hash" not in body


def test_list_users_requires_admin(monkeypatch):
    monkeypatch.setattr(UserService, "get_all_users", lambda db: [make_user()])

    login_as(make_user())
    assert client.get(f"{API}/users").status_code == 403

    login_as(make_user(user_id=2, user_type=UserType.ADMIN))
    r = client.get(f"{API}/users")
    assert r.status_code == 200
    assert len(r.json()) == 1


def test_user_can_read_self_but_not_others(monkeypatch):
    me = make_user(user_id=5)
    monkeypatch.setattr(UserService, "get_user", lambda db, uid: me)
    login_as(me)

    assert client.get(f"{API}/users/5").status_code == 200
    assert client.get(f"{API}/users/6").status_code == 403


def test_update_and_delete_user(monkeypatch):
    me = make_user(user_id=5)
    login_as(me)

    def fake_update(db, uid, data):
        assert data.model_dump(exclude_unset=True) == {"city": "Tampere"}
        return make_user(user_id=uid, city="Tampere")

    monkeypatch.setattr(UserService, "update_user", fake_update)
    r = client.put(f"{API}/users/5", json={"city": "Tampere"})
    assert r.status_code == 200
    assert r.json()["city"] == "Tampere"

    monkeypatch.setattr(UserService, "delete_user", lambda db, uid: True)
    r = client.delete(f"{API}/users/5")
    assert r.json() == {"status": "ok", "deleted": 5}


# =============================================================================
# MEALS
# =============================================================================


def test_list_and_get_meals_are_public(monkeypatch):
    meal = make_meal()
    monkeypatch.setattr(MealService, "list_meals", lambda db: [meal])
    monkeypatch.setattr(MealService, "get_meal", lambda db, mid: meal if mid == 1 else None)

    r = client.get(f"{API}/meals")
    assert r.status_code == 200
    assert r.json()[0]["price"] == 89.9
    assert r.json()[0]["image"] == "family-box.jpg"

    assert client.get(f"{API}/meals/1").status_code == 200
    r = client.get(f"{API}/meals/2")
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "NOT_FOUND"


def test_meal_write_requires_admin(monkeypatch):
    monkeypatch.setattr(MealService, "create_meal", lambda db, data: make_meal(meal_id=3, name=data.name))
    payload = {"name": "Lunch box", "price": "39.90"}

    assert client.post(f"{API}/meals", json=payload).status_code == 401

    login_as(make_user())
    assert client.post(f"{API}/meals", json=payload).status_code == 403

    login_as(make_user(user_type=UserType.ADMIN))
    r = client.post(f"{API}/meals", json=payload)
    assert r.status_code == 201
    assert r.json()["name"] == "Lunch box"


def test_delete_meal(monkeypatch):
    login_as(make_user(user_type=UserType.ADMIN))
    monkeypatch.setattr(MealService, "delete_meal", lambda db, mid: mid == 1)

    assert client.delete(f"{API}/meals/1").json()["deleted"] == 1
    assert client.delete(f"{API}/meals/9").status_code == 404


# =============================================================================
# ORDERS
# =============================================================================


def test_create_order_from_cart_items(monkeypatch):
    me = make_user(user_id=4)
    login_as(me)
    captured = {}

    def fake_create(db, user, items):
        captured["user"] = user
        captured["items"] = items
        return make_order(user_id=user.id, lines=[(1, "Family week box", Decimal("89.90"), 2)])

    monkeypatch.setattr(OrderService, "create_order", fake_create)

    r = client.post(
        f"{API}/orders",
        json={"meals": [{"id": 1, "name": "Family week box", "image": "a.jpg", "price": 1.0, "quantity": 2}]},
    )
    assert r.status_code == 201
    assert r.json()["total"] == 179.8
    assert r.json()["status"] == "pending"
    assert captured["user"] is me
    assert captured["items"][0].quantity == 2


def test_create_order_requires_token():
    r = client.post(f"{API}/orders", json={"meals": [{"id": 1, "quantity": 1}]})
    assert r.status_code == 401
    assert r.json()["error"]["code"] == "MISSING_TOKEN"


def test_create_order_rejects_empty_cart():
    login_as(make_user())
    r = client.post(f"{API}/orders", json={"meals": []})
    assert r.status_code == 422


def test_order_tracking_routes(monkeypatch):
    admin = make_user(user_id=1, user_type=UserType.ADMIN)
    login_as(admin)
    monkeypatch.setattr(OrderService, "list_orders", lambda db: [make_order(1), make_order(2)])
    monkeypatch.setattr(
        OrderService,
        "update_status",
        lambda db, oid, status: make_order(order_id=oid, status=status),
    )

    assert len(client.get(f"{API}/orders").json()) == 2

    r = client.put(f"{API}/orders/2/status", json={"status": "processing"})
    assert r.status_code == 200
    assert r.json()["status"] == OrderStatus.PROCESSING.value

    r = client.put(f"{API}/orders/2/status", json={"status": "lost"})
    assert r.status_code == 422


def test_my_orders(monkeypatch):
    login_as(make_user(user_id=8))
    monkeypatch.setattr(OrderService, "list_user_orders", lambda db, uid: [make_order(user_id=uid)])

    r = client.get(f"{API}/orders/mine")
    assert r.status_code == 200
    assert r.json()[0]["user_id"] == 8


# =============================================================================
# NEWSLETTER
# =============================================================================


def test_newsletter_admin_only(monkeypatch):
    from types import SimpleNamespace

    item = SimpleNamespace(id=1, title="Summer menu", content="Fresh berries", created_at=None)
    monkeypatch.setattr(NewsletterService, "list_newsletters", lambda db: [item])
    monkeypatch.setattr(NewsletterService, "create_newsletter", lambda db, data: item)

    login_as(make_user())
    assert client.get(f"{API}/newsletter").status_code == 403

    login_as(make_user(user_type=UserType.ADMIN))
    assert client.get(f"{API}/newsletter").json()[0]["title"] == "Summer menu"
    r = client.post(f"{API}/newsletter", json={"title": "Summer menu", "content": "Fresh berries"})
    assert r.status_code == 201
