"""
HTTP tests: status codes, error bodies and headers as a client sees them.
"""

from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.health import get_database_probe
from app.modules.user_management.presentation.dependencies import get_user_service
from app.shared.config.settings import Settings
from tests.conftest import build_app


async def _create_user(client, api_prefix, username="alice") -> dict:
    response = await client.post(f"{api_prefix}/users", json={"username": username})
    assert response.status_code == 200
    return response.json()


async def _subscribe(client, api_prefix, user_id, name) -> dict:
    response = await client.post(f"{api_prefix}/users/{user_id}/subscriptions", json={"name": name})
    assert response.status_code == 200
    return response.json()


# ---------------------------------------------------------------------------
# users
# ---------------------------------------------------------------------------

async def test_create_and_get_user(client, api_prefix) -> None:
    created = await _create_user(client, api_prefix)

    assert created["username"] == "alice"
    assert created["version"] == 0

    response = await client.get(f"{api_prefix}/users/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created


async def test_get_missing_user_returns_404_body(client, api_prefix) -> None:
    response = await client.get(f"{api_prefix}/users/99")

    assert response.status_code == 404
    assert response.json() == {"message": "User not found with id: 99", "status": 404}


async def test_create_user_blank_username_is_400(client, api_prefix) -> None:
    for payload in ({"username": "   "}, {"username": ""}, {}):
        response = await client.post(f"{api_prefix}/users", json=payload)

        assert response.status_code == 400
        assert response.json() == {"message": ["Field User.username cannot be blank"], "status": 400}


async def test_create_duplicate_user_is_409(client, api_prefix) -> None:
    await _create_user(client, api_prefix)

    response = await client.post(f"{api_prefix}/users", json={"username": "alice"})

    assert response.status_code == 409
    assert response.json() == {"message": "User with this username already exists", "status": 409}


async def test_non_integer_path_id_is_400(client, api_prefix) -> None:
    response = await client.get(f"{api_prefix}/users/abc")

    assert response.status_code == 400
    body = response.json()
    assert body["status"] == 400
    assert body["message"][0].startswith("Field user_id:")


async def test_update_user(client, api_prefix) -> None:
    created = await _create_user(client, api_prefix)

    response = await client.put(f"{api_prefix}/users/{created['id']}", json={"username": "alicia"})

    assert response.status_code == 200
    assert response.json() == {"id": created["id"], "username": "alicia", "version": 1}


async def test_update_user_with_stale_version_is_409(client, api_prefix) -> None:
    created = await _create_user(client, api_prefix)
    first = await client.put(
        f"{api_prefix}/users/{created['id']}", json={"username": "alicia", "version": 0}
    )
    assert first.status_code == 200

    second = await client.put(
        f"{api_prefix}/users/{created['id']}", json={"username": "ally", "version": 0}
    )

    assert second.status_code == 409
    assert second.json()["message"] == "Failed to update user due to concurrent modification"


async def test_update_user_to_taken_name_is_409(client, api_prefix) -> None:
    await _create_user(client, api_prefix, "alice")
    bob = await _create_user(client, api_prefix, "bob")

    response = await client.put(f"{api_prefix}/users/{bob['id']}", json={"username": "alice"})

    assert response.status_code == 409


async def test_update_missing_user_is_404(client, api_prefix) -> None:
    response = await client.put(f"{api_prefix}/users/99", json={"username": "ghost"})

    assert response.status_code == 404


async def test_delete_user_is_200_then_404(client, api_prefix) -> None:
    created = await _create_user(client, api_prefix)

    response = await client.delete(f"{api_prefix}/users/{created['id']}")
    assert response.status_code == 200
    assert response.content == b""

    assert (await client.get(f"{api_prefix}/users/{created['id']}")).status_code == 404
    assert (await client.delete(f"{api_prefix}/users/{created['id']}")).status_code == 404


# ---------------------------------------------------------------------------
# subscriptions
# ---------------------------------------------------------------------------

async def test_subscription_flow(client, api_prefix) -> None:
    """alice subscribes to news, a repeat is refused, deleting alice clears her subscriptions."""
    alice = await _create_user(client, api_prefix)

    news = await _subscribe(client, api_prefix, alice["id"], "news")
    assert news["name"] == "news"
    assert news["user"] == alice["id"]
    assert news["version"] == 0

    duplicate = await client.post(f"{api_prefix}/users/{alice['id']}/subscriptions", json={"name": "news"})
    assert duplicate.status_code == 409

    listing = await client.get(f"{api_prefix}/users/{alice['id']}/subscriptions")
    assert listing.status_code == 200
    assert listing.json() == [news]

    assert (await client.delete(f"{api_prefix}/users/{alice['id']}")).status_code == 200

    listing = await client.get(f"{api_prefix}/users/{alice['id']}/subscriptions")
    assert listing.json() == []


async def test_subscribe_unknown_user_is_404(client, api_prefix) -> None:
    response = await client.post(f"{api_prefix}/users/99/subscriptions", json={"name": "news"})

    assert response.status_code == 404
    assert response.json()["message"] == "User not found with id: 99"


async def test_subscribe_blank_name_is_400(client, api_prefix) -> None:
    alice = await _create_user(client, api_prefix)

    response = await client.post(f"{api_prefix}/users/{alice['id']}/subscriptions", json={"name": " "})

    assert response.status_code == 400
    assert response.json() == {"message": ["Field Subscription.name cannot be blank"], "status": 400}


async def test_delete_subscription(client, api_prefix) -> None:
    alice = await _create_user(client, api_prefix, "alice")
    bob = await _create_user(client, api_prefix, "bob")
    news = await _subscribe(client, api_prefix, alice["id"], "news")

    wrong_owner = await client.delete(f"{api_prefix}/users/{bob['id']}/subscriptions/{news['id']}")
    assert wrong_owner.status_code == 204
    listing = await client.get(f"{api_prefix}/users/{alice['id']}/subscriptions")
    assert [s["id"] for s in listing.json()] == [news["id"]]

    response = await client.delete(f"{api_prefix}/users/{alice['id']}/subscriptions/{news['id']}")
    assert response.status_code == 204
    listing = await client.get(f"{api_prefix}/users/{alice['id']}/subscriptions")
    assert listing.json() == []

    missing = await client.delete(f"{api_prefix}/users/{alice['id']}/subscriptions/{news['id']}")
    assert missing.status_code == 404
    assert missing.json()["message"] == f"Subscription with id {news['id']} not found."


async def test_top_subscriptions(client, api_prefix) -> None:
    subscriptions = {
        "u1": ["A", "B", "C", "D", "E"],
        "u2": ["B", "C", "D", "E"],
        "u3": ["B", "C", "D"],
    }
    for username, names in subscriptions.items():
        user = await _create_user(client, api_prefix, username)
        for name in names:
            await _subscribe(client, api_prefix, user["id"], name)

    response = await client.get(f"{api_prefix}/subscriptions/top")

    assert response.status_code == 200
    assert response.json() == ["B", "C", "D"]


# ---------------------------------------------------------------------------
# cross-cutting
# ---------------------------------------------------------------------------

async def test_request_id_header_generated_and_echoed(client, api_prefix) -> None:
    generated = await client.get(f"{api_prefix}/users/1")
    assert generated.headers.get("X-Request-ID")

    echoed = await client.get(f"{api_prefix}/users/1", headers={"X-Request-ID": "req-123"})
    assert echoed.headers["X-Request-ID"] == "req-123"


async def test_unknown_route_uses_error_body(client) -> None:
    response = await client.get("/nope")

    assert response.status_code == 404
    assert response.json() == {"message": "Not Found", "status": 404}


async def test_unexpected_error_is_generic_500(app, client, api_prefix) -> None:
    def broken_service():
        raise RuntimeError("connection pool exploded")

    app.dependency_overrides[get_user_service] = broken_service

    response = await client.get(f"{api_prefix}/users/1")

    assert response.status_code == 500
    assert response.json() == {"message": "An unexpected error occurred.", "status": 500}
    assert "exploded" not in response.text


async def test_failed_commit_is_reported_and_nothing_persists(client, api_prefix, unit_of_work, monkeypatch) -> None:
    """A commit failure reaches the caller as a 500 instead of a success status."""

    async def failing_commit(self):
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    with monkeypatch.context() as patch:
        patch.setattr(AsyncSession, "commit", failing_commit)
        response = await client.post(f"{api_prefix}/users", json={"username": "alice"})

    assert response.status_code == 500
    assert response.json() == {"message": "An unexpected error occurred.", "status": 500}

    async with unit_of_work() as uow:
        assert await uow.users.get_user_by_username("alice") is None

    retry = await client.post(f"{api_prefix}/users", json={"username": "alice"})
    assert retry.status_code == 200


async def test_unexpected_error_detail_only_in_debug(session_manager, api_prefix) -> None:
    app = build_app(session_manager, Settings(ENVIRONMENT="development", DEBUG=True))

    def broken_service():
        raise RuntimeError("connection pool exploded")

    app.dependency_overrides[get_user_service] = broken_service

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get(f"{api_prefix}/users/1")

    assert response.status_code == 500
    assert response.json()["message"] == "An unexpected error occurred."
    assert "exploded" in response.json()["error"]


async def test_health_reports_database_status(app, client) -> None:
    async def healthy():
        return {"status": "healthy", "timestamp": "2024-01-01T00:00:00+00:00"}

    async def unhealthy():
        return {"status": "unhealthy", "timestamp": "2024-01-01T00:00:00+00:00", "error": "down"}

    app.dependency_overrides[get_database_probe] = lambda: healthy
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["components"]["database"]["status"] == "healthy"

    app.dependency_overrides[get_database_probe] = lambda: unhealthy
    response = await client.get("/health")
    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"


async def test_liveness_probe(client) -> None:
    response = await client.get("/health/live")

    assert response.status_code == 200
    assert response.json() == {"status": "alive"}
