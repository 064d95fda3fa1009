import os
import sys
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from merchanza.app.config import Config
from merchanza.app.extensions import db
from merchanza.app.factory import create_app

TEST_SECRET = "test-secret"


@pytest.fixture()
def app(tmp_path):
    # File-backed SQLite so separate sessions see the same database.
    class TestConfig(Config):
        TESTING = True
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'test.db'}"
        TOKEN_SECRET = TEST_SECRET
        UPLOAD_FOLDER = str(tmp_path / "images")
        CORS_ORIGINS = []

    app = create_app(TestConfig)

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()
        db.engine.dispose()


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


def signup(client, email="a@x.com", password="p", name="Alice"):
    return client.post("/signup", json={"name": name, "email": email, "password": password})


@pytest.fixture()
def token(client):
    response = signup(client)
    assert response.status_code == 200
    return response.json["token"]
