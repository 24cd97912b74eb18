"""Student administration — list, create with generated gids, delete, credentials."""

import pytest
from sqlalchemy import select

from aurapass.config import Settings, get_settings
from aurapass.core.errors import ConflictError
from aurapass.models.user import User
from aurapass.services.user_directory import UserDirectory
from tests.services.conftest import ADMIN_GID, STUDENT_GID


async def test_list_students_excludes_admin_and_passwords(client, admin_headers):
    res = await client.get("/api/users", headers=admin_headers)
    users = res.json()["users"]
    assert [u["gid"] for u in users] == [STUDENT_GID]
    assert "password" not in users[0]


async def test_create_student_returns_generated_gid_and_password(client, admin_headers):
    res = await client.post("/api/users", json={"name": "Riya"}, headers=admin_headers)
    assert res.status_code == 201
    user = res.json()["user"]
    # one seeded student -> count + 2 = 3
    assert user["gid"] == "Aurapass-YCP-0003"
    assert len(user["password"]) == 4 and user["password"].isdigit()


async def test_created_student_can_log_in(client, create_student):
    gid, password, _ = await create_student()
    res = await client.post("/api/login", json={"gid": gid, "password": password})
    assert res.status_code == 200
    assert res.json()["role"] == "student"


async def test_create_student_without_body(client, admin_headers):
    res = await client.post("/api/users", headers=admin_headers)
    assert res.status_code == 201


async def test_sequential_creations_yield_distinct_sequential_gids(client, admin_headers):
    gids = []
    for _ in range(4):
        res = await client.post("/api/users", json={}, headers=admin_headers)
        gids.append(res.json()["user"]["gid"])
    assert gids == [
        "Aurapass-YCP-0003", "Aurapass-YCP-0004",
        "Aurapass-YCP-0005", "Aurapass-YCP-0006",
    ]


async def test_deletion_does_not_cause_duplicate_gid(client, admin_headers):
    first = (await client.post("/api/users", json={}, headers=admin_headers)).json()["user"]
    second = (await client.post("/api/users", json={}, headers=admin_headers)).json()["user"]
    await client.delete(f"/api/users/{first['gid']}", headers=admin_headers)

    third = (await client.post("/api/users", json={}, headers=admin_headers)).json()["user"]
    assert third["gid"] not in {second["gid"]}
    assert third["gid"] == "Aurapass-YCP-0005"


async def test_gid_taken_by_concurrent_creation_is_skipped(
    client, admin_headers, test_db, monkeypatch,
):
    # A concurrent request already committed 0003 between our count and our insert
    test_db.add(User(gid="Aurapass-YCP-0003", password="1111", role="student"))
    await test_db.commit()
    monkeypatch.setattr(
        "aurapass.services.user_directory.next_student_number", lambda *a, **k: 3,
    )

    res = await client.post("/api/users", json={}, headers=admin_headers)
    assert res.status_code == 201
    assert res.json()["user"]["gid"] == "Aurapass-YCP-0004"


async def test_gid_allocation_gives_up_with_conflict(seeded, test_db, monkeypatch):
    test_db.add(User(gid="Aurapass-YCP-0003", password="1111", role="student"))
    await test_db.commit()
    monkeypatch.setattr(
        "aurapass.services.user_directory.next_student_number", lambda *a, **k: 3,
    )
    settings = Settings(**{**get_settings().model_dump(), "identifier_max_attempts": 1})

    with pytest.raises(ConflictError):
        await UserDirectory(test_db, settings).create_student("Late")


async def test_delete_student_removes_record(client, admin_headers, create_student, test_db):
    gid, _, _ = await create_student()
    res = await client.delete(f"/api/users/{gid}", headers=admin_headers)
    assert res.status_code == 200
    assert res.json()["success"] is True
    remaining = await test_db.scalar(select(User.id).where(User.gid == gid))
    assert remaining is None


async def test_delete_unknown_student_is_noop(client, admin_headers):
    res = await client.delete("/api/users/Aurapass-YCP-9999", headers=admin_headers)
    assert res.status_code == 200
    assert res.json()["success"] is True


async def test_delete_never_removes_admin(client, admin_headers, test_db):
    res = await client.delete(f"/api/users/{ADMIN_GID}", headers=admin_headers)
    assert res.status_code == 200
    assert await test_db.scalar(select(User.id).where(User.gid == ADMIN_GID)) is not None


async def test_credentials_list_student_passwords(client, admin_headers, create_student):
    gid, password, _ = await create_student("Riya")
    res = await client.get("/api/credentials", headers=admin_headers)
    assert res.status_code == 200
    creds = {c["gid"]: c for c in res.json()["credentials"]}
    assert creds[gid]["password"] == password
    assert creds[gid]["name"] == "Riya"
    assert ADMIN_GID not in creds


async def test_deleted_newest_gid_is_not_reissued(client, admin_headers, create_student):
    await create_student("First")
    deleted_gid, _, deleted_headers = await create_student("Second")
    await client.delete(f"/api/users/{deleted_gid}", headers=admin_headers)

    res = await client.post("/api/users", json={"name": "Third"}, headers=admin_headers)
    new_gid = res.json()["user"]["gid"]
    assert new_gid != deleted_gid
    assert new_gid == "Aurapass-YCP-0005"

    stale = await client.put(
        "/api/profile", json={"newName": "Hijack"}, headers=deleted_headers,
    )
    assert stale.status_code == 404


async def test_credential_bound_to_user_row(
    client, admin_headers, create_student, test_db,
):
    # A same-gid account created out of band must not accept the old credential
    gid, _, old_headers = await create_student("Original")
    await client.delete(f"/api/users/{gid}", headers=admin_headers)
    test_db.add(User(gid=gid, password="1234", role="student"))
    await test_db.commit()

    res = await client.put("/api/profile", json={"phone": "000"}, headers=old_headers)
    assert res.status_code == 403
    assert res.json()["error"]["code"] == "FORBIDDEN"
    assert await test_db.scalar(select(User.phone).where(User.gid == gid)) is None
