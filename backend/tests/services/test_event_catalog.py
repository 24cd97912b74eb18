"""Event catalog — ids, image urls, registration counts, delete cleanup, registrants."""

from sqlalchemy import func, select

from aurapass.models.registration import Registration


async def _counts(client, headers) -> dict[int, int]:
    res = await client.get("/api/events", headers=headers)
    return {e["id"]: e["registrationCount"] for e in res.json()["events"]}


async def test_first_event_gets_id_101_and_placeholder_image(create_event):
    event = await create_event()
    assert event["id"] == 101
    assert event["customId"] == 101
    assert event["imageUrl"] == "https://picsum.photos/seed/101/400/200"
    assert event["status"] == "Open"
    assert event["registrationCount"] == 0


async def test_event_ids_increase_from_max(create_event):
    first = await create_event(name="A")
    second = await create_event(name="B")
    assert second["id"] == first["id"] + 1


async def test_create_event_requires_name(client, admin_headers):
    res = await client.post("/api/events", json={"name": "  "}, headers=admin_headers)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_students_can_list_events(client, student_headers, create_event):
    await create_event(name="Robotics")
    res = await client.get("/api/events", headers=student_headers)
    assert res.status_code == 200
    assert [e["name"] for e in res.json()["events"]] == ["Robotics"]


async def test_student_cannot_create_event(client, student_headers):
    res = await client.post("/api/events", json={"name": "X"}, headers=student_headers)
    assert res.status_code == 403


async def test_count_matches_distinct_registrants(
    client, admin_headers, student_headers, create_event, create_student,
):
    event = await create_event()
    other = await create_event(name="Quiz")
    _, _, riya = await create_student("Riya")

    for headers in (student_headers, riya):
        res = await client.post("/api/register", json={"eventId": event["id"]}, headers=headers)
        assert res.status_code == 200

    counts = await _counts(client, admin_headers)
    assert counts[event["id"]] == 2
    assert counts[other["id"]] == 0


async def test_delete_event_removes_its_registrations_only(
    client, admin_headers, student_headers, create_event, test_db,
):
    doomed = await create_event(name="Doomed")
    kept = await create_event(name="Kept")
    for e in (doomed, kept):
        await client.post("/api/register", json={"eventId": e["id"]}, headers=student_headers)

    res = await client.delete(f"/api/events/{doomed['id']}", headers=admin_headers)
    assert res.status_code == 200
    assert res.json()["registrationsRemoved"] == 1

    assert await _counts(client, admin_headers) == {kept["id"]: 1}
    assert await test_db.scalar(select(func.count(Registration.id))) == 1

    mine = await client.get("/api/myregistrations", headers=student_headers)
    assert [r["eventId"] for r in mine.json()["registrations"]] == [kept["id"]]


async def test_delete_unknown_event_is_noop(client, admin_headers, create_event):
    await create_event()
    res = await client.delete("/api/events/999", headers=admin_headers)
    assert res.status_code == 200
    assert res.json()["registrationsRemoved"] == 0
    assert len((await client.get("/api/events", headers=admin_headers)).json()["events"]) == 1


async def test_event_registrants_lists_contact_details(
    client, admin_headers, student_headers, create_event,
):
    event = await create_event()
    reg = await client.post("/api/register", json={"eventId": event["id"]}, headers=student_headers)

    res = await client.get(f"/api/events/{event['id']}/registrations", headers=admin_headers)
    body = res.json()
    assert body["eventName"] == "Hackathon"
    assert body["registrations"] == [{
        "registrationId": reg.json()["registrationId"],
        "gid": "DKTE-STU-0001",
        "name": "Aarav Kulkarni",
        "email": "aarav@student.com",
        "phone": "9876543210",
    }]


async def test_registrants_of_unknown_event(client, admin_headers):
    res = await client.get("/api/events/404/registrations", headers=admin_headers)
    assert res.status_code == 200
    assert res.json()["eventName"] == "Unknown"
    assert res.json()["registrations"] == []
