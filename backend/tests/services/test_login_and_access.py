"""Login & access control — credentials, 401 vs 403, admin gate, revocation."""

import aurapass.infrastructure.database as db_module
from tests.services.conftest import ADMIN_GID, STUDENT_GID, STUDENT_PASSWORD


async def test_login_returns_token_and_public_profile(client):
    res = await client.post("/api/login", json={"gid": STUDENT_GID, "password": STUDENT_PASSWORD})
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["token"]
    assert body["gid"] == STUDENT_GID
    assert body["role"] == "student"
    assert body["email"] == "aarav@student.com"
    assert "password" not in body
    assert "token_version" not in body
    assert "created_at" not in body


async def test_login_wrong_password_is_invalid_credentials(client):
    res = await client.post("/api/login", json={"gid": STUDENT_GID, "password": "nope"})
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "INVALID_CREDENTIALS"


async def test_login_unknown_gid_is_invalid_credentials(client):
    res = await client.post("/api/login", json={"gid": "ghost", "password": "456"})
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "INVALID_CREDENTIALS"


async def test_login_missing_fields_is_validation_error(client):
    res = await client.post("/api/login", json={"gid": STUDENT_GID})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_missing_credential_is_unauthenticated(client):
    res = await client.get("/api/events")
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "UNAUTHENTICATED"


async def test_invalid_credential_is_forbidden(client):
    res = await client.get("/api/events", headers={"Authorization": "Bearer garbage"})
    assert res.status_code == 403
    assert res.json()["error"]["code"] == "FORBIDDEN"


async def test_student_rejected_from_admin_routes(client, student_headers):
    for method, path in [
        ("GET", "/api/users"),
        ("POST", "/api/users"),
        ("DELETE", f"/api/users/{ADMIN_GID}"),
        ("GET", "/api/credentials"),
        ("GET", "/api/events/101/registrations"),
        ("DELETE", "/api/events/101"),
        ("DELETE", "/api/announcements/1"),
    ]:
        res = await client.request(method, path, headers=student_headers)
        assert res.status_code == 403, (method, path)


async def test_admin_passes_admin_gate(client, admin_headers):
    res = await client.get("/api/users", headers=admin_headers)
    assert res.status_code == 200


async def test_password_change_revokes_old_credential(client, student_headers):
    res = await client.put(
        "/api/profile",
        json={"currentPassword": STUDENT_PASSWORD, "newPassword": "7777"},
        headers=student_headers,
    )
    assert res.status_code == 200
    new_headers = {"Authorization": f"Bearer {res.json()['token']}"}

    old = await client.get("/api/events", headers=student_headers)
    assert old.status_code == 403

    fresh = await client.get("/api/events", headers=new_headers)
    assert fresh.status_code == 200


async def test_health_probes(client):
    live = await client.get("/api/health/")
    assert live.status_code == 200
    ready = await client.get("/api/health/ready")
    assert ready.status_code == 200
    assert ready.json()["checks"]["database"] == "healthy"


async def test_login_profile_includes_registrations(client, student_headers, create_event):
    event = await create_event()
    reg = await client.post("/api/register", json={"eventId": event["id"]}, headers=student_headers)

    res = await client.post("/api/login", json={"gid": STUDENT_GID, "password": STUDENT_PASSWORD})
    registrations = res.json()["registrations"]
    assert len(registrations) == 1
    assert registrations[0]["id"] == reg.json()["registrationId"]
    assert registrations[0]["eventId"] == event["id"]
    assert registrations[0]["regDate"].endswith("+00:00")


async def test_login_profile_without_registrations(client):
    res = await client.post("/api/login", json={"gid": ADMIN_GID, "password": "Admin"})
    assert res.json()["registrations"] == []


async def test_non_bearer_authorization_is_forbidden(client):
    res = await client.get("/api/events", headers={"Authorization": "Basic Zm9vOmJhcg=="})
    assert res.status_code == 403
    assert res.json()["error"]["code"] == "FORBIDDEN"


async def test_readiness_reports_missing_database(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/api/health/ready")
    assert res.status_code == 503
    assert res.json()["checks"]["database"] == "unavailable"
