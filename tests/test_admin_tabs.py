"""
Tests for the profile page controller and its admin tabs.
"""

import pytest

from storefront.admin import AdminTab, ProfileView, USER_PROFILE_PANEL
from storefront.api_client import MealboxApiClient
from storefront.session import UserSession, protected_route
from test_fixtures import RecordingTransport

BASE = "http://api.test/api/v1"
MEALS = [{"id": 1, "name": "Family week box"}, {"id": 2, "name": "Vegetarian box"}]
NEWSLETTERS = [{"id": 5, "title": "Summer menu", "content": "..."}]


def build_view(routes, user_type="admin"):
    transport = RecordingTransport(routes)
    api = MealboxApiClient(base_url=BASE, transport=transport)
    session = UserSession(token="admin-token", user={"id": 1, "type": user_type})
    return ProfileView(api, session), transport


def default_routes(**overrides):
    routes = {
        "GET /api/v1/meals": (200, MEALS),
        "GET /api/v1/newsletter": (200, NEWSLETTERS),
        "GET /api/v1/orders": (200, [{"id": 3, "status": "pending"}]),
    }
    routes.update(overrides)
    return routes


def test_admin_load_fetches_meals_and_newsletters():
    view, transport = build_view(default_routes())
    view.load()

    assert view.meals == MEALS
    assert view.newsletters == NEWSLETTERS
    assert view.is_loading is False
    paths = [r.url.path for r in transport.requests]
    assert paths == ["/api/v1/meals", "/api/v1/newsletter"]
    assert transport.requests[1].headers["authorization"] == "Bearer admin-token"


def test_customer_sees_only_profile_panel():
    view, transport = build_view(default_routes(), user_type="customer")
    view.load()

    assert [r.url.path for r in transport.requests] == ["/api/v1/meals"]
    panel = view.render()
    assert panel.name == USER_PROFILE_PANEL
    view.select_tab("newsletter")
    assert view.render().name == USER_PROFILE_PANEL


def test_default_tab_is_meal_packages():
    view, _ = build_view(default_routes())
    view.load()
    panel = view.render()
    assert panel.name == "mealPackages"
    assert panel.data["meals"] == MEALS


@pytest.mark.parametrize("tab", ["mealPackages", "orderTracking", "newsletter"])
def test_only_selected_tab_is_rendered(tab):
    view, _ = build_view(default_routes())
    view.load()
    view.select_tab(tab)

    panel = view.render()
    assert panel.name == tab
    assert view.active_tab == AdminTab(tab)


def test_order_tracking_fetches_orders_on_select():
    view, transport = build_view(default_routes())
    view.select_tab("orderTracking")
    assert view.render().data["orders"] == [{"id": 3, "status": "pending"}]
    assert transport.requests[-1].url.path == "/api/v1/orders"


def test_unknown_tab_is_rejected():
    view, _ = build_view(default_routes())
    with pytest.raises(ValueError):
        view.select_tab("billing")
    assert view.active_tab == AdminTab.MEAL_PACKAGES


def test_meal_fetch_failure_sets_error_flag():
    view, _ = build_view(
        default_routes(**{"GET /api/v1/meals": (500, {"error": {"message": "boom"}})})
    )
    view.load()
    assert view.error == "boom"
    assert view.is_loading is False
    assert view.render().data["error"] == "boom"


def test_meal_fetch_non_json_body_sets_error_flag():
    view, _ = build_view(default_routes(**{"GET /api/v1/meals": (200, "oops")}))
    view.load()
    assert view.error == "Invalid response from server"
    assert view.meals == []
    assert view.is_loading is False


def test_newsletter_fetch_failure_keeps_list():
    view, _ = build_view(
        default_routes(**{"GET /api/v1/newsletter": (403, {"error": {"message": "nope"}})})
    )
    view.newsletters = NEWSLETTERS
    view.fetch_newsletters()
    assert view.newsletters == NEWSLETTERS


def test_meal_deleted_is_removed_locally_without_refetch():
    view, transport = build_view(
        default_routes(**{"DELETE /api/v1/meals/1": (200, {"status": "ok", "deleted": 1})})
    )
    view.load()
    before = len(transport.requests)

    assert view.delete_meal(1) is True
    assert view.meals == [MEALS[1]]
    assert len(transport.requests) == before + 1


def test_meal_added_triggers_refetch():
    view, transport = build_view(
        default_routes(**{"POST /api/v1/meals": (201, {"id": 3, "name": "Lunch box"})})
    )
    assert view.add_meal({"name": "Lunch box", "price": "39.90"}) is True
    assert [r.url.path for r in transport.requests] == ["/api/v1/meals", "/api/v1/meals"]
    assert [r.method for r in transport.requests] == ["POST", "GET"]


def test_newsletter_added_triggers_refetch():
    view, transport = build_view(
        default_routes(**{"POST /api/v1/newsletter": (201, {"id": 6})})
    )
    assert view.add_newsletter("Autumn", "New boxes") is True
    assert transport.requests[-1].method == "GET"
    assert view.newsletters == NEWSLETTERS


def test_failed_admin_action_sets_action_error():
    view, _ = build_view(
        default_routes(**{"PUT /api/v1/orders/3/status": (400, {"error": {"message": "Cannot move order"}})})
    )
    view.orders = [{"id": 3, "status": "delivered"}]
    assert view.update_order_status(3, "pending") is False
    assert view.action_error == "Cannot move order"


def test_protected_route_sends_guests_to_login():
    assert protected_route(UserSession(), "/profile") == "/login"
    assert protected_route(UserSession(token="t", user={"id": 1}), "/profile") == "/profile"
