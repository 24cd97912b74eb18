"""Announcement board — sequential ids, newest first, delete by id."""


async def _post(client, headers, title, content="Details"):
    res = await client.post(
        "/api/announcements", json={"title": title, "content": content}, headers=headers,
    )
    assert res.status_code == 201, res.text
    return res.json()["announcement"]


async def test_post_assigns_sequential_ids(client, admin_headers):
    first = await _post(client, admin_headers, "Welcome")
    second = await _post(client, admin_headers, "Schedule")
    assert (first["id"], second["id"]) == (1, 2)
    assert first["date"]


async def test_list_is_newest_first(client, admin_headers, student_headers):
    await _post(client, admin_headers, "Old")
    await _post(client, admin_headers, "New")
    res = await client.get("/api/announcements", headers=student_headers)
    assert [a["title"] for a in res.json()["announcements"]] == ["New", "Old"]


async def test_delete_by_listed_id(client, admin_headers):
    keep = await _post(client, admin_headers, "Keep")
    drop = await _post(client, admin_headers, "Drop")

    res = await client.delete(f"/api/announcements/{drop['id']}", headers=admin_headers)
    assert res.status_code == 200

    listed = (await client.get("/api/announcements", headers=admin_headers)).json()
    assert [a["id"] for a in listed["announcements"]] == [keep["id"]]


async def test_delete_unknown_is_noop(client, admin_headers):
    await _post(client, admin_headers, "Only")
    res = await client.delete("/api/announcements/42", headers=admin_headers)
    assert res.status_code == 200
    listed = (await client.get("/api/announcements", headers=admin_headers)).json()
    assert len(listed["announcements"]) == 1


async def test_title_required(client, admin_headers):
    res = await client.post("/api/announcements", json={"title": ""}, headers=admin_headers)
    assert res.status_code == 400
