"""
Shared fixtures: an application on an in-memory SQLite database.
"""
import pytest
from fastapi.testclient import TestClient
from creator_finance.core.config import Settings
from creator_finance.main import create_app

TEST_SECRET = "test-secret-key"


@pytest.fixture
def settings():
    return Settings(
        DATABASE_URL="sqlite://",
        SECRET_KEY=TEST_SECRET,
        SEED_SAMPLE_DATA=False,
        LOG_LEVEL="WARNING",
        _env_file=None,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def database(app, client):
    """The application's database, with tables created by the lifespan."""
    return app.state.database


@pytest.fixture
def register(client):
    """Register a user and return the response JSON."""
    def _register(name="Test Creator", email="creator@example.com", password="secret123"):
        response = client.post(
            "/api/register",
            json={"name": name, "email": email, "password": password}
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _register


@pytest.fixture
def auth_headers(register):
    """Build bearer headers for a freshly registered user."""
    def _auth_headers(email="creator@example.com", name="Test Creator"):
        data = register(name=name, email=email)
        return {"Authorization": f"Bearer {data['token']}"}
    return _auth_headers
