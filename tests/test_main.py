"""
Tests for the FastAPI application wiring
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from opsgraph.core.config import Settings
from opsgraph.db.mongodb import MongoDB
from opsgraph.main import create_app


@pytest.fixture
def fake_mongodb():
    mongodb = MagicMock(spec=MongoDB)
    mongodb.ping = AsyncMock(return_value=True)
    return mongodb


@pytest.fixture
def app(fake_mongodb):
    return create_app(Settings(PROJECT_NAME="Test API", MONGODB_DB="praktikum_test"), fake_mongodb)


def test_root(app):
    with TestClient(app) as client:
        response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to Test API API"}


def test_lifespan_connects_and_closes(app, fake_mongodb):
    with TestClient(app):
        fake_mongodb.connect_to_mongodb.assert_called_once()
        assert app.state.services is not None

    fake_mongodb.close_mongodb_connection.assert_called_once()


def test_health(app, fake_mongodb):
    with TestClient(app) as client:
        assert client.get("/health").json() == {"status": "ok"}

        fake_mongodb.ping.return_value = False
        response = client.get("/health")

    assert response.status_code == 503
    assert response.json() == {"status": "unavailable"}


def test_graphql_endpoint_uses_app_services(app, services):
    with TestClient(app) as client:
        app.state.services = services
        response = client.post(
            "/graphql",
            json={"query": 'mutation { createRank(input: { name: "Captain" }) { name description } }'},
        )

    assert response.status_code == 200
    assert response.json() == {"data": {"createRank": {"name": "Captain", "description": ""}}}
