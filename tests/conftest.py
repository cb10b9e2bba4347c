import uuid
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from business_directory_api.app.core.config import Settings
from business_directory_api.app.main import create_app
from business_directory_api.app.schemas.business import Business, BusinessCategory, Coordinate
from business_directory_api.app.services.auth_service import AuthService
from business_directory_api.app.services.directory_service import DirectoryService
from business_directory_api.app.services.entity_store import EntityStore

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_business(**overrides) -> Business:
    """Build a listing with sensible defaults; keyword arguments override fields."""
    fields = {
        "id": str(uuid.uuid4()),
        "owner_id": "owner-1",
        "name": "Tacos Gera",
        "description": "Ricos tacos de bistec",
        "category": BusinessCategory.food,
        "location": Coordinate(latitude=25.676694, longitude=-100.2613924),
        "address": "C. Guadalupe 227A, Guadalupe",
        "phone": "81 1723 5569",
        "images": ["tacos1"],
        "rating": 4.0,
        "review_count": 10,
        "created_at": BASE_TIME,
        "updated_at": BASE_TIME,
    }
    if "minutes" in overrides:
        fields["created_at"] = BASE_TIME + timedelta(minutes=overrides.pop("minutes"))
    fields.update(overrides)
    return Business(**fields)


@pytest.fixture
def store(tmp_path):
    entity_store = EntityStore(str(tmp_path / "directory.db"))
    entity_store.open()
    yield entity_store
    entity_store.close()


@pytest.fixture
def directory(store):
    service = DirectoryService(store)
    service.refresh()
    yield service
    service.close()


@pytest.fixture
def auth(store):
    return AuthService(store)


@pytest.fixture
def client(tmp_path):
    app = create_app(Settings(database_url=str(tmp_path / "api.db"), default_language="en"))
    with TestClient(app) as test_client:
        yield test_client
