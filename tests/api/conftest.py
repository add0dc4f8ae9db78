"""API test fixtures.

Each client runs the real application lifespan: the schema is created in
a fresh in-memory database on startup and the engine is disposed on
shutdown, so every test starts from an empty store.
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from customer_hub.main import app


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def create_customer(client):
    """POST a customer and return the response body."""

    def _create(
        name: str = "Ada Lovelace",
        email: str = "ada@example.com",
        phone: str = "+14155552671",
    ) -> dict:
        response = client.post(
            "/api/customers", json={"name": name, "email": email, "phone": phone}
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create
