import os
import tempfile

import pytest

# Point the app at a throwaway database before anything imports it
_TEST_DB = os.path.join(tempfile.mkdtemp(prefix="gym_admin_test_"), "test.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_TEST_DB}"
os.environ.setdefault("ADMIN_USERNAME", "admin")
os.environ.setdefault("ADMIN_PASSWORD", "admin123")

from fastapi.testclient import TestClient

from database import init_db
from main import app

ADMIN_USERNAME = os.environ["ADMIN_USERNAME"]
ADMIN_PASSWORD = os.environ["ADMIN_PASSWORD"]


@pytest.fixture(autouse=True)
def fresh_db():
    """Every test starts from the demo data set."""
    init_db(reset=True)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def admin_client():
    client = TestClient(app)
    response = client.post("/login", data={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
                           follow_redirects=False)
    assert response.status_code == 302
    assert "access_token" in response.cookies
    return client
