from __future__ import annotations


def test_health_and_version(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json().get("status") == "ok"

    v = client.get("/version")
    assert v.status_code == 200
    assert v.json().get("app") == "roommates-api"


def test_chore_crud_flow(client):
    assert client.get("/api/chores").json() == {"items": []}

    res = client.post("/api/chores", json={"name": "Dishes"})
    assert res.status_code == 201
    created = res.json()
    assert created == {"id": 1, "name": "Dishes"}

    got = client.get(f"/api/chores/{created['id']}")
    assert got.status_code == 200
    assert got.json()["name"] == "Dishes"

    upd = client.put(f"/api/chores/{created['id']}", json={"name": "Wash dishes"})
    assert upd.status_code == 200
    assert client.get(f"/api/chores/{created['id']}").json()["name"] == "Wash dishes"

    # renaming a missing chore is not an error
    assert client.put("/api/chores/999", json={"name": "x"}).status_code == 200

    d = client.delete(f"/api/chores/{created['id']}")
    assert d.status_code == 200
    assert client.get(f"/api/chores/{created['id']}").status_code == 404


def test_get_missing_chore_404(client):
    r = client.get("/api/chores/4242")
    assert r.status_code == 404
    assert r.json()["detail"] == "chore_not_found"


def test_assign_and_unassigned(client, add_roommate):
    rid = add_roommate("Ada", "Lovelace")
    c1 = client.post("/api/chores", json={"name": "Dishes"}).json()
    c2 = client.post("/api/chores", json={"name": "Trash"}).json()

    items = client.get("/api/chores/unassigned").json()["items"]
    assert [it["id"] for it in items] == [c1["id"], c2["id"]]

    r = client.post(f"/api/chores/{c1['id']}/assign", json={"roommate_id": rid})
    assert r.status_code == 200
    items = client.get("/api/chores/unassigned").json()["items"]
    assert items == [c2]

    board = client.get("/api/chores/board").json()["items"]
    by_chore = {b["chore_id"]: b for b in board}
    assert by_chore[c1["id"]]["roommate_name"] == "Ada Lovelace"
    assert by_chore[c2["id"]]["roommate_id"] is None


def test_assign_unknown_roommate_400(client):
    c = client.post("/api/chores", json={"name": "Dishes"}).json()
    r = client.post(f"/api/chores/{c['id']}/assign", json={"roommate_id": 99})
    assert r.status_code == 400


def test_delete_assigned_chore_409(client, add_roommate):
    rid = add_roommate("Ada")
    c = client.post("/api/chores", json={"name": "Laundry"}).json()
    client.post(f"/api/chores/{c['id']}/assign", json={"roommate_id": rid})

    r = client.delete(f"/api/chores/{c['id']}")
    assert r.status_code == 409
    assert "chore_assigned" in r.json()["detail"]
    assert c in client.get("/api/chores").json()["items"]


def test_chore_history(client, add_roommate):
    rid = add_roommate("Ada")
    c = client.post("/api/chores", json={"name": "Windows"}).json()
    other = client.post("/api/chores", json={"name": "Floors"}).json()
    client.put(f"/api/chores/{c['id']}", json={"name": "Clean windows"})
    client.post(f"/api/chores/{c['id']}/assign", json={"roommate_id": rid})

    res = client.get(f"/api/chores/{c['id']}/logs").json()
    assert res["total"] == 3
    # newest first
    assert [it["action"] for it in res["items"]] == ["ASSIGN_CHORE", "UPDATE_CHORE", "CREATE_CHORE"]
    assert res["items"][0]["roommate_id"] == rid
    assert res["items"][1]["chore_name"] == "Clean windows"
    assert all(it["chore_id"] == c["id"] for it in res["items"])

    creates = client.get("/api/chores/logs", params={"action": "CREATE_CHORE"}).json()
    assert creates["total"] == 2
    assert {it["chore_id"] for it in creates["items"]} == {c["id"], other["id"]}


def test_chore_history_survives_delete(client):
    c = client.post("/api/chores", json={"name": "Windows"}).json()
    assert client.delete(f"/api/chores/{c['id']}").status_code == 200
    res = client.get(f"/api/chores/{c['id']}/logs").json()
    assert [it["action"] for it in res["items"]] == ["DELETE_CHORE", "CREATE_CHORE"]


def test_delete_conflict_shows_in_history(client, add_roommate):
    rid = add_roommate("Ada")
    c = client.post("/api/chores", json={"name": "Laundry"}).json()
    client.post(f"/api/chores/{c['id']}/assign", json={"roommate_id": rid})
    client.delete(f"/api/chores/{c['id']}")
    latest = client.get(f"/api/chores/{c['id']}/logs", params={"size": 1}).json()
    assert latest["total"] == 3
    assert latest["items"][0]["result"] == "CONFLICT"
