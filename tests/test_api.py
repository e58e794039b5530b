"""
End-to-end route tests against in-memory adapters.
"""

from __future__ import annotations

import inspect
import logging
from datetime import date, timedelta
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from hotelbook.api.v1.booking import router as booking_router
from hotelbook.infrastructure.auth.memory_auth import MemoryAuth
from hotelbook.infrastructure.store.demo_data import (
    DEMO_ADMIN_EMAIL,
    DEMO_ADMIN_ID,
    DEMO_ADMIN_PASSWORD,
    DEMO_TABLES,
)
from hotelbook.infrastructure.store.flow_registry import MemoryFlowRegistry
from hotelbook.infrastructure.store.memory_store import MemoryDataStore
from hotelbook.main import ContextFormatter, app
from hotelbook.wiring.dependencies import get_auth, get_data_store, get_flow_registry


@pytest.fixture
def store():
    return MemoryDataStore(DEMO_TABLES)


@pytest.fixture
def client(store):
    auth = MemoryAuth({DEMO_ADMIN_EMAIL: (DEMO_ADMIN_ID, DEMO_ADMIN_PASSWORD)})
    registry = MemoryFlowRegistry()
    app.dependency_overrides[get_data_store] = lambda: store
    app.dependency_overrides[get_auth] = lambda: auth
    app.dependency_overrides[get_flow_registry] = lambda: registry
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _login(client: TestClient) -> dict[str, str]:
    response = client.post("/auth/login", json={"email": DEMO_ADMIN_EMAIL, "password": DEMO_ADMIN_PASSWORD})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


def _open_at_payment(client: TestClient, room_id: str = "101") -> str:
    response = client.post(f"/booking/{room_id}")
    assert response.status_code == 201
    flow_id = response.json()["flow_id"]

    check_in = date.today() + timedelta(days=10)
    response = client.patch(
        f"/booking/flows/{flow_id}/draft",
        json={
            "check_in": check_in.isoformat(),
            "check_out": (check_in + timedelta(days=3)).isoformat(),
            "guests": 2,
            "special_requests": "Airport pickup",
            "payment_method": "upi",
        },
    )
    assert response.status_code == 200
    assert client.post(f"/booking/flows/{flow_id}/advance").json()["step"] == 2
    assert client.post(f"/booking/flows/{flow_id}/advance").json()["step"] == 3
    return flow_id


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_booking_flow_end_to_end(client, store):
    headers = _login(client)
    flow_id = _open_at_payment(client)

    view = client.get(f"/booking/flows/{flow_id}").json()
    assert view["step_label"] == "Payment"
    assert view["quote"]["nights"] == 3
    assert Decimal(view["quote"]["total_price"]) == Decimal("105000")

    response = client.post(f"/booking/flows/{flow_id}/submit", headers=headers)
    assert response.status_code == 200
    data = response.json()
    assert data["redirect_to"] == "/booking-confirmation"
    assert data["booking"]["status"] == "pending"
    assert data["booking"]["payment_status"] == "pending"
    assert Decimal(data["booking"]["total_price"]) == Decimal("105000")
    assert len(store.rows("bookings")) == 1

    # Completed flows are dropped.
    assert client.get(f"/booking/flows/{flow_id}").status_code == 404


def test_submit_without_session_is_explicit(client, store):
    flow_id = _open_at_payment(client)

    response = client.post(f"/booking/flows/{flow_id}/submit")
    assert response.status_code == 401
    assert store.rows("bookings") == []

    view = client.get(f"/booking/flows/{flow_id}").json()
    assert view["step"] == 3
    assert view["status"] == "ready"
    assert view["error"]


def test_unknown_room_renders_not_found(client):
    response = client.post("/booking/no-such-room")
    assert response.status_code == 404
    assert response.json()["detail"] == "Room not found"


def test_invalid_guest_count_rejected(client):
    flow_id = client.post("/booking/101").json()["flow_id"]
    response = client.patch(f"/booking/flows/{flow_id}/draft", json={"guests": 0})
    assert response.status_code == 422
    assert client.get(f"/booking/flows/{flow_id}").json()["draft"]["guests"] == 2


def test_reversed_dates_reported_in_quote(client):
    flow_id = client.post("/booking/101").json()["flow_id"]
    check_in = date.today() + timedelta(days=5)
    client.patch(
        f"/booking/flows/{flow_id}/draft",
        json={"check_in": check_in.isoformat(), "check_out": (check_in - timedelta(days=1)).isoformat()},
    )
    view = client.get(f"/booking/flows/{flow_id}").json()
    assert view["quote"] is None
    assert view["quote_error"]


def test_step_bounds(client):
    flow_id = client.post("/booking/101").json()["flow_id"]
    assert client.post(f"/booking/flows/{flow_id}/retreat").json()["step"] == 1
    for _ in range(4):
        client.post(f"/booking/flows/{flow_id}/advance")
    assert client.get(f"/booking/flows/{flow_id}").json()["step"] == 3
    assert client.post(f"/booking/flows/{flow_id}/submit").status_code == 401


def test_submit_on_first_step_conflicts(client):
    headers = _login(client)
    flow_id = client.post("/booking/101").json()["flow_id"]
    assert client.post(f"/booking/flows/{flow_id}/submit", headers=headers).status_code == 409


def test_discarded_flow_is_gone(client):
    flow_id = client.post("/booking/101").json()["flow_id"]
    assert client.delete(f"/booking/flows/{flow_id}").status_code == 204
    assert client.get(f"/booking/flows/{flow_id}").status_code == 404


def test_hotels_routes(client):
    assert len(client.get("/hotels").json()) == 3
    featured = client.get("/hotels/featured", params={"q": "udaipur"}).json()
    assert [h["name"] for h in featured] == ["Taj Lake Palace"]
    details = client.get("/hotels/2").json()
    assert details["hotel"]["name"] == "The Oberoi Amarvilas"
    assert [r["id"] for r in details["rooms"]] == ["201"]
    assert client.get("/hotels/999").status_code == 404


def test_quick_reservation_route(client, store):
    headers = _login(client)
    check_in = date.today() + timedelta(days=3)
    payload = {
        "room_id": "201",
        "check_in": check_in.isoformat(),
        "check_out": (check_in + timedelta(days=2)).isoformat(),
        "guests": 2,
    }
    assert client.post("/hotels/2/reservations", json=payload).status_code == 401

    response = client.post("/hotels/2/reservations", json=payload, headers=headers)
    assert response.status_code == 201
    assert Decimal(response.json()["total_price"]) == Decimal("90000")
    assert len(store.rows("bookings")) == 1


def test_contact_route(client, store):
    response = client.post(
        "/contact",
        json={"name": "Ravi", "email": "ravi@royalstays.in", "subject": "Wedding", "message": "Venue availability?"},
    )
    assert response.status_code == 201
    assert response.json()["success"] is True
    assert len(store.rows("contact_messages")) == 1

    bad = client.post("/contact", json={"name": "Ravi", "email": "not-an-email", "subject": "x", "message": "y"})
    assert bad.status_code == 422


def test_admin_dashboard_requires_login_and_aggregates(client):
    assert client.get("/admin/dashboard").status_code == 401

    response = client.get("/admin/dashboard", headers=_login(client))
    assert response.status_code == 200
    data = response.json()
    assert data["stats"] == {"total_hotels": 2, "total_rooms": 3, "active_bookings": 0}


def test_auth_me_and_logout(client):
    headers = _login(client)
    assert client.get("/auth/me", headers=headers).json()["user_id"] == DEMO_ADMIN_ID
    assert client.post("/auth/logout", headers=headers).status_code == 204
    assert client.get("/auth/me", headers=headers).status_code == 401


def test_bad_login(client):
    response = client.post("/auth/login", json={"email": DEMO_ADMIN_EMAIL, "password": "nope"})
    assert response.status_code == 401


def test_booking_routes_run_on_the_event_loop():
    """Flow state is only touched from coroutines, never from the threadpool."""
    for route in booking_router.routes:
        assert inspect.iscoroutinefunction(route.endpoint), route.path


def test_quick_reservation_in_the_past_rejected(client, store):
    check_in = date.today() - timedelta(days=400)
    payload = {
        "room_id": "101",
        "check_in": check_in.isoformat(),
        "check_out": (check_in + timedelta(days=2)).isoformat(),
        "guests": 2,
    }
    response = client.post("/hotels/1/reservations", json=payload, headers=_login(client))
    assert response.status_code == 422
    assert store.rows("bookings") == []


def test_log_context_includes_error_code():
    record = logging.LogRecord("hotelbook", logging.ERROR, __file__, 1, "Supabase request failed", None, None)
    record.table = "bookings"
    record.error_code = "23505"
    line = ContextFormatter("%(message)s").format(record)
    assert "table=bookings" in line
    assert "error_code=23505" in line
