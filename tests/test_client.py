import requests

from team_tracker_client import TeamTrackerClient


def _client(session):
    return TeamTrackerClient(base_url="http://testserver/", session=session)


def test_people_round_trip(http_session):
    client = _client(http_session)
    people, error = client.list_people()
    assert error is None
    assert len(people) == 2

    created, error = client.create_person({"name": "Ann", "email": "a@x.com", "role": "Dev"})
    assert error is None
    assert created == {"message": "Person created", "id": 3}

    result, error = client.update_person(3, role="QA")
    assert result == {"message": "Person updated"}
    person, _ = client.get_person(3)
    assert person["role"] == "QA"

    result, error = client.delete_person(3)
    assert error is None
    _, error = client.get_person(3)
    assert error == {"status_code": 404, "message": "Person not found"}


def test_projects_and_tasks(http_session):
    client = _client(http_session)
    created, _ = client.create_project({"name": "Mobile", "description": "App"})
    project_id = created["id"]

    created, error = client.create_task({"title": "Login", "description": "Form", "projectId": project_id})
    assert error is None
    client.update_task(created["id"], status="in-progress")
    task, _ = client.get_task(created["id"])
    assert task["status"] == "in-progress"
    assert task["projectId"] == project_id

    client.update_project(project_id)
    project, _ = client.get_project(project_id)
    assert project["name"] == "Mobile"

    tasks, _ = client.list_tasks()
    assert len(tasks) == 2
    projects, _ = client.list_projects()
    assert len(projects) == 2

    assert client.delete_project(project_id)[1] is None
    assert client.delete_task(created["id"])[1] is None


def test_validation_error_is_reported(http_session):
    data, error = _client(http_session).create_task({"title": "X"})
    assert data is None
    assert error["status_code"] == 400
    assert error["message"].startswith("Missing required fields")


def test_list_failure_returns_empty_list(http_session):
    client = TeamTrackerClient(base_url="http://testserver", api_prefix="/api/v0", session=http_session)
    items, error = client.list_people()
    assert items == []
    assert error["status_code"] == 404


def test_connection_error(monkeypatch):
    session = requests.Session()

    def refuse(*args, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(session, "request", refuse)
    data, error = _client(session).get_project(1)
    assert data is None
    assert error == {"status_code": None, "message": "connection refused"}
