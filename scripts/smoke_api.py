#!/usr/bin/env python3
"""Smoke test for a running hotelbook server: sign in, walk the booking wizard, submit."""

import sys
from datetime import date, timedelta

import httpx


BASE_URL = "http://127.0.0.1:8000"
ADMIN_EMAIL = "admin@demo.com"
ADMIN_PASSWORD = "admin123"


def sign_in() -> dict[str, str] | None:
    print("=" * 60)
    print("Testing POST /auth/login")
    print("=" * 60)

    try:
        response = httpx.post(
            f"{BASE_URL}/auth/login",
            json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
            timeout=10.0,
        )
        response.raise_for_status()
        token = response.json()["access_token"]
        print(f"✅ Signed in as {ADMIN_EMAIL}")
        return {"Authorization": f"Bearer {token}"}
    except httpx.HTTPStatusError as e:
        print(f"❌ HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return None


def walk_booking(headers: dict[str, str] | None, room_id: str = "101") -> bool:
    print("\n" + "=" * 60)
    print(f"Testing booking wizard for room {room_id}")
    print("=" * 60)

    try:
        flow = httpx.post(f"{BASE_URL}/booking/{room_id}", timeout=10.0)
        flow.raise_for_status()
        flow_id = flow.json()["flow_id"]
        print(f"✅ Flow opened: {flow_id}")

        check_in = date.today() + timedelta(days=7)
        draft = {
            "check_in": check_in.isoformat(),
            "check_out": (check_in + timedelta(days=3)).isoformat(),
            "guests": 2,
            "special_requests": "Late check-in",
        }
        httpx.patch(f"{BASE_URL}/booking/flows/{flow_id}/draft", json=draft, timeout=10.0).raise_for_status()

        for _ in range(2):
            view = httpx.post(f"{BASE_URL}/booking/flows/{flow_id}/advance", timeout=10.0)
            view.raise_for_status()
            print(f"  Step {view.json()['step']}: {view.json()['step_label']}")

        quote = view.json()["quote"]
        print(f"  {quote['nights']} nights x {quote['currency_symbol']}{quote['price_per_night']} = {quote['total_price']}")

        result = httpx.post(f"{BASE_URL}/booking/flows/{flow_id}/submit", headers=headers or {}, timeout=10.0)
        result.raise_for_status()
        booking = result.json()["booking"]
        print(f"✅ Booking {booking['id']} created, status={booking['status']}")
        print(f"   Redirect to: {result.json()['redirect_to']}")
        return True
    except httpx.HTTPStatusError as e:
        print(f"❌ HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return False


def show_dashboard(headers: dict[str, str] | None) -> None:
    print("\n" + "=" * 60)
    print("Testing GET /admin/dashboard")
    print("=" * 60)

    response = httpx.get(f"{BASE_URL}/admin/dashboard", headers=headers or {}, timeout=10.0)
    if response.status_code != 200:
        print(f"❌ HTTP Error: {response.status_code} {response.text}")
        return
    stats = response.json()["stats"]
    print(f"✅ Hotels: {stats['total_hotels']}  Rooms: {stats['total_rooms']}  Active bookings: {stats['active_bookings']}")


def main():
    print("\n🚀 Testing Hotel Booking API\n")

    try:
        httpx.get(f"{BASE_URL}/health", timeout=5.0)
        print("✅ Server is running\n")
    except httpx.HTTPError:
        print("❌ Server is not running!")
        print("   Please start it with: uvicorn hotelbook.main:app --reload")
        sys.exit(1)

    headers = sign_in()
    walk_booking(headers)
    show_dashboard(headers)

    print("\n" + "=" * 60)
    print("✅ Smoke test complete!")
    print("=" * 60 + "\n")


if __name__ == "__main__":
    main()
