import pytest
from fastapi.testclient import TestClient

from server.database import Base, engine
from server.dependencies import get_now
from server.main import app

NOW = 1_714_572_000_000  # 2024-05-01 14:00:00 UTC

@pytest.fixture
def now():
    return NOW

@pytest.fixture
def api_client(now):
    Base.metadata.create_all(bind=engine)
    app.dependency_overrides[get_now] = lambda: now
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
    Base.metadata.drop_all(bind=engine)

@pytest.fixture
def create_timer(api_client):
    def _create(**payload):
        response = api_client.post("/timers/", json={"name": "Meds", **payload})
        assert response.status_code == 201
        return response.json()
    return _create
