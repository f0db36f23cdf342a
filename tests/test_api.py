"""Tests for the guest API endpoints."""

import asyncio
from datetime import timedelta

from fastapi.testclient import TestClient

from event_access.api.app import create_app
from event_access.api.guests import extract_token
from event_access.containers import AppContainer
from tests.conftest import FakeClock, make_session


def _verify(client: TestClient, code: str) -> str:
    response = client.post("/api/verify", json={"code": code})
    assert response.status_code == 200
    return response.json()["token"]


def test_verify_valid_code(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/verify", json={"code": " psdvin "})

    assert response.status_code == 200
    data = response.json()
    assert data["valid"] is True
    assert data["guestName"] == "Vinay Polisetty"
    assert len(data["token"]) == 64
    assert "message" not in data
    assert container.session_service.active_sessions() == 1


def test_verify_invalid_code_returns_ok_with_valid_false(
    container: AppContainer,
) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/verify", json={"code": "nope"})

    assert response.status_code == 200
    assert response.json() == {"valid": False, "message": "Invalid access code"}
    assert container.session_service.active_sessions() == 0


def test_verify_missing_code(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    for response in (
        client.post("/api/verify", json={}),
        client.post("/api/verify", json={"code": ""}),
        client.post("/api/verify"),
    ):
        assert response.status_code == 400
        assert response.json() == {
            "valid": False,
            "message": "Access code is required",
        }


def test_verify_unexpected_error_returns_500(container: AppContainer) -> None:
    def broken_token() -> str:
        raise RuntimeError("entropy source unavailable")

    container.authenticator.token_factory = broken_token
    client = TestClient(create_app(container))

    response = client.post("/api/verify", json={"code": "011387"})

    assert response.status_code == 500
    assert response.json() == {
        "valid": False,
        "message": "Server error during verification",
    }


def test_details_for_vip_and_friend(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    vip_token = _verify(client, "011387")
    friend_token = _verify(client, "122092")

    vip = client.get("/api/details", headers={"Authorization": vip_token})
    friend = client.get(
        "/api/details", headers={"Authorization": f"Bearer {friend_token}"}
    )

    assert vip.status_code == 200
    assert "Puja Begins" in vip.json()["html"]
    assert friend.status_code == 200
    assert "Puja Begins" not in friend.json()["html"]
    assert "Lunch &amp; Celebration" in friend.json()["html"]


def test_details_without_token(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/api/details")

    assert response.status_code == 401
    assert response.json() == {
        "error": "Unauthorized",
        "message": "No authentication token provided",
    }


def test_details_with_unknown_token(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/api/details", headers={"Authorization": "bogus"})

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid or expired token"


def test_details_with_expired_token(container: AppContainer, clock: FakeClock) -> None:
    client = TestClient(create_app(container))
    token = _verify(client, "011387")
    clock.advance(days=1, minutes=1)

    first = client.get("/api/details", headers={"Authorization": token})
    second = client.get("/api/details", headers={"Authorization": token})

    assert first.status_code == 401
    assert first.json()["message"] == "Session expired. Please login again."
    assert second.status_code == 401
    assert second.json()["message"] == "Invalid or expired token"
    assert token not in container.session_store


def test_logout_twice(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    token = _verify(client, "011387")

    first = client.post("/api/logout", headers={"Authorization": token})
    second = client.post("/api/logout", headers={"Authorization": token})
    anonymous = client.post("/api/logout")

    expected = {"success": True, "message": "Logged out successfully"}
    assert first.json() == expected
    assert second.json() == expected
    assert anonymous.status_code == 200
    assert anonymous.json() == expected
    details = client.get("/api/details", headers={"Authorization": token})
    assert details.status_code == 401


def test_health_reports_active_sessions(
    container: AppContainer, clock: FakeClock
) -> None:
    client = TestClient(create_app(container))
    _verify(client, "011387")
    _verify(client, "HOMIES")

    response = client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "Server is running"
    assert data["activeSessions"] == 2
    assert data["timestamp"].startswith("2025-12-14T09:00:00")


def test_cors_headers(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.options(
        "/api/verify",
        headers={
            "Origin": "https://party.example",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_lifespan_runs_reaper_until_shutdown(
    container: AppContainer, clock: FakeClock
) -> None:
    intervals: list[float] = []

    async def first_pass_only(seconds: float) -> None:
        intervals.append(seconds)
        if len(intervals) > 1:
            await asyncio.Event().wait()

    container.reaper.sleep = first_pass_only
    container.session_store.insert(
        make_session("stale", clock.now - timedelta(days=2))
    )
    app = create_app(container)

    with TestClient(app) as client:
        assert container.reaper.running
        response = client.get("/api/health")
        assert response.json()["activeSessions"] == 0
    assert not container.reaper.running
    assert "stale" not in container.session_store
    assert intervals[0] == container.settings.sweep_interval_seconds


def test_extract_token() -> None:
    assert extract_token(None) is None
    assert extract_token("") is None
    assert extract_token("Bearer ") is None
    assert extract_token("abc") == "abc"
    assert extract_token("Bearer abc") == "abc"
    assert extract_token("bearer  abc ") == "abc"


def test_extract_token_bearer_without_credentials() -> None:
    assert extract_token("Bearer") is None
    assert extract_token("  bearer   ") is None
    assert extract_token("Bearer\tabc") == "Bearer\tabc"
    assert extract_token("Bearerabc") == "Bearerabc"


def test_details_with_empty_bearer_reports_missing_token(
    container: AppContainer,
) -> None:
    client = TestClient(create_app(container))

    for header in ("Bearer ", "Bearer", "bearer   "):
        response = client.get("/api/details", headers={"Authorization": header})

        assert response.status_code == 401
        assert response.json() == {
            "error": "Unauthorized",
            "message": "No authentication token provided",
        }


def test_verify_malformed_body_returns_bad_request(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    expected = {"valid": False, "message": "Access code is required"}

    responses = [
        client.post("/api/verify", json={"code": 11387}),
        client.post("/api/verify", json="011387"),
        client.post("/api/verify", json=["011387"]),
        client.post(
            "/api/verify",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        ),
    ]

    for response in responses:
        assert response.status_code == 400
        assert response.json() == expected
    assert container.session_service.active_sessions() == 0


def test_validation_errors_elsewhere_keep_default_shape(
    container: AppContainer,
) -> None:
    app = create_app(container)

    @app.get("/api/echo")
    async def echo(limit: int) -> dict[str, int]:
        return {"limit": limit}

    response = TestClient(app).get("/api/echo", params={"limit": "many"})

    assert response.status_code == 422
    assert "detail" in response.json()
