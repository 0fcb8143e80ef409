"""Fixtures compartidos: app sobre SQLite en memoria y helpers de auth."""
import pytest

from blogapi import create_app
from blogapi.extensions import db

TEST_SECRET = "test-secret-key-for-blogapi-tests-only"


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "JWT_SECRET_KEY": TEST_SECRET,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
    })
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}


def register(client, username, email, password="secret"):
    return client.post("/api/auth/register", json={
        "username": username,
        "email": email,
        "password": password,
    })


def login(client, email, password="secret"):
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.get_json()
    return response.get_json()["token"]


@pytest.fixture
def alice(client):
    """Usuario registrado con su token."""
    user_id = register(client, "alice", "alice@example.com").get_json()["id"]
    return {"id": user_id, "token": login(client, "alice@example.com")}


@pytest.fixture
def bob(client):
    user_id = register(client, "bob", "bob@example.com").get_json()["id"]
    return {"id": user_id, "token": login(client, "bob@example.com")}


def create_blog(client, token, title="Hello", content="World"):
    return client.post(
        "/api/blogs", json={"title": title, "content": content}, headers=auth_header(token)
    )
