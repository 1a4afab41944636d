import os

# Settings are read at import time; point them at throwaway values first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.crud.user import user as user_crud
from main import app

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def _make_user(email="admin@local123.org", password="secret123"):
        return user_crud.create(db=db, email=email, password=password)
    return _make_user


def sign_up(client, email, password="secret123"):
    """Create an account through the API and return its auth headers."""
    response = client.post("/api/auth/signup", json={"email": email, "password": password})
    assert response.status_code == 201, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def alice(client):
    return sign_up(client, "alice@example.org")


@pytest.fixture
def bob(client):
    return sign_up(client, "bob@example.org")


@pytest.fixture
def alice_union(client, alice):
    response = client.post("/api/unions", json={"name": "Ironworkers Local 123"}, headers=alice)
    assert response.status_code == 201, response.text
    return response.json()
