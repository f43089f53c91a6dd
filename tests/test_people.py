from tests.conftest import API


def test_list_people_returns_seed(client):
    resp = client.get(f"{API}/people")
    assert resp.status_code == 200
    people = resp.json()
    assert [p["name"] for p in people] == ["James", "Maria"]
    assert people[0] == {"id": 1, "name": "James", "email": "j@correo.com", "role": "Dev"}


def test_get_person(client):
    resp = client.get(f"{API}/people/2")
    assert resp.status_code == 200
    assert resp.json()["email"] == "maria@correo.com"


def test_get_person_not_found(client):
    resp = client.get(f"{API}/people/99")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Person not found"}


def test_create_person_appends_with_next_id(client):
    resp = client.post(f"{API}/people", json={"name": "Ann", "email": "a@x.com", "role": "Dev"})
    assert resp.status_code == 201
    assert resp.json() == {"message": "Person created", "id": 3}

    people = client.get(f"{API}/people").json()
    assert len(people) == 3
    assert people[-1] == {"id": 3, "name": "Ann", "email": "a@x.com", "role": "Dev"}


def test_create_person_missing_field(client):
    resp = client.post(f"{API}/people", json={"name": "Ann", "email": "a@x.com"})
    assert resp.status_code == 400
    assert "role" in resp.json()["message"]
    assert len(client.get(f"{API}/people").json()) == 2


def test_create_person_empty_field(client):
    resp = client.post(f"{API}/people", json={"name": "", "email": "a@x.com", "role": "Dev"})
    assert resp.status_code == 400
    assert "name" in resp.json()["message"]


def test_update_person_role_only(client):
    resp = client.put(
        f"{API}/people/1",
        json={"role": "Lead", "name": "Changed", "email": "other@x.com", "id": 7},
    )
    assert resp.status_code == 200
    assert resp.json() == {"message": "Person updated"}
    assert client.get(f"{API}/people/1").json() == {
        "id": 1,
        "name": "James",
        "email": "j@correo.com",
        "role": "Lead",
    }


def test_update_person_without_role_keeps_record(client):
    resp = client.put(f"{API}/people/2", json={})
    assert resp.status_code == 200
    assert client.get(f"{API}/people/2").json()["role"] == "QA"


def test_update_person_empty_role_is_ignored(client):
    client.put(f"{API}/people/2", json={"role": ""})
    assert client.get(f"{API}/people/2").json()["role"] == "QA"


def test_update_person_not_found(client):
    resp = client.put(f"{API}/people/42", json={"role": "Dev"})
    assert resp.status_code == 404
    assert resp.json()["message"] == "Person not found"


def test_delete_person(client):
    resp = client.delete(f"{API}/people/1")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Person deleted"}
    assert [p["id"] for p in client.get(f"{API}/people").json()] == [2]
    assert client.get(f"{API}/people/1").status_code == 404


def test_delete_person_not_found(client):
    resp = client.delete(f"{API}/people/3")
    assert resp.status_code == 404
    assert "message" in resp.json()


def test_deleting_newest_person_reuses_its_id(client):
    # Ids come from the highest id currently stored, so a freed top id is reused.
    client.delete(f"{API}/people/2")
    resp = client.post(f"{API}/people", json={"name": "Ann", "email": "a@x.com", "role": "Dev"})
    assert resp.json()["id"] == 2
