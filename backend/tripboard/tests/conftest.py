"""Shared test fixtures: a fresh SQLite database and app per test."""
import pytest
from fastapi.testclient import TestClient
from tripboard.core.config import Settings
from tripboard.main import create_app

TRIP_PAYLOAD = {
    "title": "Lisbon long weekend",
    "description": "Food, trams and viewpoints",
    "startDate": "2025-05-01",
    "endDate": "2025-05-04",
    "location": "Lisbon, Portugal",
    "tags": ["beach", "hiking"],
}

ACTIVITY_PAYLOAD = {
    "date": "2025-05-02",
    "title": "Tram 28",
    "description": "Ride the whole line",
    "location": "Martim Moniz",
}


@pytest.fixture
def app(tmp_path):
    settings = Settings(DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}")
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(app, client):
    session = app.state.db.session()
    yield session
    session.close()


def signup(client, email="alice@example.com", password="testpassword123", **extra):
    return client.post(
        "/api/auth",
        json={"action": "signup", "email": email, "password": password, **extra}
    )


@pytest.fixture
def alice(client):
    """The default client, signed up and signed in as alice."""
    response = signup(client)
    assert response.status_code == 200
    return client


@pytest.fixture
def bob(app, client):
    """A second client signed in as a different user."""
    other = TestClient(app)
    response = signup(other, email="bob@example.com")
    assert response.status_code == 200
    return other


@pytest.fixture
def anonymous(app, client):
    return TestClient(app)


@pytest.fixture
def trip(alice):
    response = alice.post("/api/trips", json=TRIP_PAYLOAD)
    assert response.status_code == 201
    return response.json()["trip"]
