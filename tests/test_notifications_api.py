def send(client, user_id=1, title="Info", message="Message"):
    return client.post("/v1/notifications/", json={"user_id": user_id, "title": title, "message": message}).json()


def test_list_and_unread_count(client, seeded):
    first = send(client, title="First")["data"]
    send(client, title="Second")
    send(client, user_id=2, title="Other user")

    listing = client.get("/v1/notifications/user/1").json()
    assert [n["title"] for n in listing["data"]] == ["Second", "First"]
    assert listing["meta"]["total"] == 2

    client.put(f"/v1/notifications/{first['id']}/read")
    count = client.get("/v1/notifications/user/1/unread-count").json()["data"]
    assert count["unread"] == 1

    unread = client.get("/v1/notifications/user/1", params={"unread_only": True}).json()["data"]
    assert [n["title"] for n in unread] == ["Second"]


def test_pagination(client, seeded):
    for i in range(5):
        send(client, title=f"N{i}")
    page = client.get("/v1/notifications/user/1", params={"page": 2, "size": 2}).json()
    assert len(page["data"]) == 2
    assert page["meta"] == {"total": 5, "page": 2, "size": 2, "pages": 3}


def test_mark_all_read_and_delete_read(client, seeded):
    send(client)
    send(client)
    marked = client.put("/v1/notifications/user/1/read-all").json()["data"]
    assert marked["updated"] == 2

    deleted = client.delete("/v1/notifications/user/1/read").json()["data"]
    assert deleted["deleted"] == 2
    assert client.get("/v1/notifications/user/1").json()["data"] == []


def test_delete_one(client, seeded):
    notification = send(client)["data"]
    assert client.delete(f"/v1/notifications/{notification['id']}").json()["success"] is True
    assert client.delete(f"/v1/notifications/{notification['id']}").json()["error"]["code"] == 404
    assert client.put("/v1/notifications/999/read").json()["success"] is False
