import os

os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")

import pytest
from fastapi.testclient import TestClient

from travelease.auth import get_identity_verifier
from travelease.config import Settings
from travelease.database import get_database
from travelease.main import create_app
from tests.fakes import FakeDatabase, FakeVerifier, bearer


@pytest.fixture
def store():
    return FakeDatabase()


@pytest.fixture
def app(store):
    application = create_app(Settings(MONGODB_URI="mongodb://localhost:27017"))
    application.dependency_overrides[get_database] = lambda: store
    application.dependency_overrides[get_identity_verifier] = lambda: FakeVerifier()
    return application


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def vehicle(client):
    """A vehicle created by a@x.com; returns its id"""
    response = client.post(
        "/vehicles",
        json={"userEmail": "a@x.com", "vehicleName": "Van", "pricePerDay": 40},
        headers=bearer("a@x.com"),
    )
    assert response.status_code == 200
    return response.json()["insertedId"]
