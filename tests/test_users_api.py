from __future__ import annotations


def test_create_user_lowercases(client):
    resp = client.post("/api/users", json={"username": "Alice_01"})
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["username"] == "alice_01"
    assert payload["total_games_played"] == 0


def test_create_user_rejects_invalid_names(client):
    for name in ["ab", "with space", "x" * 21, "alice\n", "", None]:
        resp = client.post("/api/users", json={"username": name})
        assert resp.status_code == 400


def test_duplicate_username_conflicts(client):
    assert client.post("/api/users", json={"username": "alice"}).status_code == 200
    resp = client.post("/api/users", json={"username": "ALICE"})
    assert resp.status_code == 409
    assert resp.json()["detail"] == "Username already taken"


def test_check_username(client, add_user):
    add_user("alice")
    assert client.get("/api/users/check/Alice").json() == {"available": False}
    assert client.get("/api/users/check/bob").json() == {"available": True}


def test_get_user(client, add_user):
    user = add_user("alice")
    resp = client.get("/api/users/ALICE")
    assert resp.status_code == 200
    assert resp.json()["id"] == user.id
    assert client.get("/api/users/nobody").status_code == 404
