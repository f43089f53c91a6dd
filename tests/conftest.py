"""Shared fixtures: a fresh seeded application per test."""

from urllib.parse import urlsplit

import pytest
import requests
from fastapi.testclient import TestClient
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from team_tracker_api.app.main import create_app

API = "/api/v1"


@pytest.fixture
def app():
    return create_app(seed=True)


@pytest.fixture
def empty_app():
    return create_app(seed=False)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def empty_client(empty_app):
    return TestClient(empty_app)


class TestClientAdapter(BaseAdapter):
    """requests transport that forwards every call to a FastAPI TestClient."""

    def __init__(self, test_client: TestClient) -> None:
        super().__init__()
        self.test_client = test_client

    def send(self, request, **kwargs):
        path = urlsplit(request.url).path
        reply = self.test_client.request(
            request.method,
            path,
            content=request.body,
            headers=dict(request.headers),
        )
        response = requests.Response()
        response.status_code = reply.status_code
        response.reason = reply.reason_phrase
        response.headers = CaseInsensitiveDict(reply.headers)
        response._content = reply.content
        response.url = request.url
        response.request = request
        return response

    def close(self):
        pass


@pytest.fixture
def http_session(client):
    session = requests.Session()
    session.mount("http://testserver", TestClientAdapter(client))
    return session
