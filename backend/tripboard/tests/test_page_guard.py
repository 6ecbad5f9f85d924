"""
Tests for the page route guard.
"""
from tripboard.tests.conftest import signup


def test_anonymous_page_redirects_to_login(client):
    response = client.get("/trips/1", follow_redirects=False)
    assert response.status_code == 307
    assert response.headers["location"] == "/login"


def test_anonymous_root_redirects_to_login(client):
    response = client.get("/", follow_redirects=False)
    assert response.headers["location"] == "/login"


def test_anonymous_may_visit_login_and_signup(client):
    assert client.get("/login", follow_redirects=False).status_code != 307
    assert client.get("/signup", follow_redirects=False).status_code != 307


def test_signed_in_login_redirects_home(client):
    signup(client)
    for page in ("/login", "/signup"):
        response = client.get(page, follow_redirects=False)
        assert response.status_code == 307
        assert response.headers["location"] == "/"


def test_signed_in_page_passes_through(client):
    signup(client)
    response = client.get("/trips/1", follow_redirects=False)
    assert response.status_code != 307


def test_api_and_health_are_not_redirected(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/api/auth", follow_redirects=False).status_code == 200
