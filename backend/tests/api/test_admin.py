"""Admin Routes — healthz, metrics and the dev-only reset.

Tests cover:
    - /admin/healthz returns plain "OK"
    - /admin/metrics renders the static hit count
    - /admin/reset outside dev → 403, store and counter untouched
    - /admin/reset in dev → users (and their chirps) deleted, counter zeroed
    - /admin/reset store failure → 500, counter untouched
"""

import pytest

from chirpy.api.dependencies import get_user_repository
from chirpy.core.errors import DatabaseError


async def test_healthz(client):
    res = await client.get("/admin/healthz")
    assert res.status_code == 200
    assert res.text == "OK"
    assert res.headers["content-type"].startswith("text/plain")


async def test_metrics_starts_at_zero(client):
    res = await client.get("/admin/metrics")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/html")
    assert "Welcome, Chirpy Admin" in res.text
    assert "Chirpy has been visited 0 times!" in res.text


async def test_metrics_after_three_static_requests(client):
    for _ in range(3):
        await client.get("/app/")
    res = await client.get("/admin/metrics")
    assert "Chirpy has been visited 3 times!" in res.text


async def test_admin_requests_are_not_counted(client):
    await client.get("/admin/healthz")
    await client.get("/admin/metrics")
    res = await client.get("/admin/metrics")
    assert "visited 0 times" in res.text


async def test_reset_in_dev_clears_counter_and_users(client, app, user):
    await client.post(
        "/api/chirps", json={"body": "hello", "user_id": user["id"]},
    )
    await client.get("/app/")
    await client.get("/app/")

    res = await client.post("/admin/reset")

    assert res.status_code == 200
    assert res.text == "OK"
    assert app.state.hit_counter.value() == 0
    assert (await client.get("/api/chirps")).json() == []
    # email is free again once the user is gone
    again = await client.post("/api/users", json={"email": user["email"]})
    assert again.status_code == 201


@pytest.mark.parametrize("platform", ["production", "staging"])
async def test_reset_outside_dev_is_forbidden(client, app, user, platform):
    await client.get("/app/")

    res = await client.post("/admin/reset")

    assert res.status_code == 403
    assert res.json() == {"error": "Reset is only allowed in dev environment"}
    assert app.state.hit_counter.value() == 1
    dup = await client.post("/api/users", json={"email": user["email"]})
    assert dup.status_code == 500


async def test_reset_store_failure_propagates(client, app):
    class _FailingUsers:
        async def delete_all_users(self):
            raise DatabaseError("Connection or operational error", "delete_all_users")

    app.dependency_overrides[get_user_repository] = lambda: _FailingUsers()
    await client.get("/app/")

    res = await client.post("/admin/reset")

    assert res.status_code == 500
    assert res.json() == {"error": "Something went wrong"}
    assert app.state.hit_counter.value() == 1


async def test_reset_requires_post(client):
    res = await client.get("/admin/reset")
    assert res.status_code == 405
