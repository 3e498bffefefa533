"""
Comparison Center - Pytest Configuration and Fixtures

This module provides test fixtures for:
- Usecases wired to in-memory fake repositories
- A file-backed SQLite test database behind the FastAPI test client
- Sample comparisons, custom options and objects created through the API
"""
import asyncio
import os
import shutil
import tempfile

# Configuration is read at import time, so it has to be in place before any
# comparison_center module is imported.
TEST_PHOTOS_DIR = tempfile.mkdtemp(prefix="comparison_center_photos_")
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test_comparison_center.db"
os.environ["PHOTOS_DIR"] = TEST_PHOTOS_DIR
os.environ["MAX_UPLOAD_SIZE_MB"] = "1"
os.environ["PHOTO_UPLOAD_RATE_LIMIT"] = "1000/minute"

import pytest
from fastapi.testclient import TestClient

from comparison_center.core.database.engine import drop_db
from comparison_center.features.comparisons.usecase import ComparisonUsecase
from comparison_center.features.custom_options.usecase import CustomOptionUsecase
from comparison_center.features.objects.usecase import ObjectUsecase
from comparison_center.main import app
from tests.fakes import (
    FakeAssociationRepository,
    FakeComparisonRepository,
    FakeCustomOptionRepository,
    FakeObjectRepository,
    SequentialIdGenerator,
)


@pytest.fixture
def id_generator():
    return SequentialIdGenerator()


@pytest.fixture
def comparison_repo():
    return FakeComparisonRepository()


@pytest.fixture
def custom_option_repo():
    return FakeCustomOptionRepository()


@pytest.fixture
def object_repo():
    return FakeObjectRepository()


@pytest.fixture
def association_repo():
    return FakeAssociationRepository()


@pytest.fixture
def comparison_usecase(comparison_repo, id_generator):
    return ComparisonUsecase(comparison_repo, id_generator)


@pytest.fixture
def custom_option_usecase(custom_option_repo, id_generator):
    return CustomOptionUsecase(custom_option_repo, id_generator)


@pytest.fixture
def object_usecase(object_repo, association_repo, id_generator):
    return ObjectUsecase(object_repo, association_repo, id_generator)


@pytest.fixture(scope="function")
def client():
    """Create a test client against a fresh database"""
    with TestClient(app) as test_client:
        yield test_client
    asyncio.run(drop_db())
    shutil.rmtree(TEST_PHOTOS_DIR, ignore_errors=True)


@pytest.fixture
def photos_dir(client):
    """Directory uploads are written to, emptied after each test"""
    os.makedirs(TEST_PHOTOS_DIR, exist_ok=True)
    return TEST_PHOTOS_DIR


@pytest.fixture
def sample_custom_options(client):
    """Create two custom options, returns their ids by name"""
    ids = {}
    for name in ("Weight", "Price"):
        response = client.post("/custom-options", json={"name": name})
        assert response.status_code == 201
        ids[name] = response.json()["id"]
    return ids


@pytest.fixture
def sample_comparison(client, sample_custom_options):
    """Create a comparison using the sample custom options"""
    response = client.post(
        "/comparisons",
        json={"name": "Laptops", "custom_option_ids": list(sample_custom_options.values())},
    )
    assert response.status_code == 201
    return response.json()["id"]


@pytest.fixture
def sample_object(client, sample_comparison, sample_custom_options):
    """Create an object with a value for the Weight option"""
    response = client.post(
        "/objects",
        json={
            "name": "Thin and light",
            "rating": 8,
            "advs": "Easy to carry",
            "disadvs": "Few ports",
            "comparison_id": sample_comparison,
            "custom_options": [{"id": sample_custom_options["Weight"], "value": "1.1 kg"}],
        },
    )
    assert response.status_code == 201
    return response.json()["id"]
