"""Tests for the HTTP surface."""

import pytest
from fastapi.testclient import TestClient

from task_mcp.main import create_app

from tests.conftest import OWNER


@pytest.fixture
def client(database):
    with TestClient(create_app(database)) as test_client:
        yield test_client


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_list_tool_schemas(client):
    response = client.get("/tools")

    assert response.status_code == 200
    names = [tool["name"] for tool in response.json()["tools"]]
    assert names == ["create_task", "get_tasks", "update_task", "delete_task", "create_tag"]


def test_invoke_tool_round_trip(client):
    created = client.post("/tools/create_task", json={"userID": OWNER, "title": "From HTTP"}).json()
    assert created["success"] is True

    listed = client.post("/tools/get_tasks", json={"userID": OWNER, "status": "pending"}).json()

    assert listed["success"] is True
    assert [task["title"] for task in listed["data"]] == ["From HTTP"]


def test_failure_envelope_is_returned_with_200(client):
    response = client.post("/tools/update_task", json={"userID": OWNER, "id": "missing"})

    assert response.status_code == 200
    assert response.json() == {"success": False, "message": "Task missing not found", "data": None}


def test_unknown_tool_is_404(client):
    response = client.post("/tools/complete_task", json={"userID": OWNER})

    assert response.status_code == 404
