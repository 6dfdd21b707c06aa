import os

os.environ.setdefault('DATABASE_URL', 'sqlite://')
# Lowest cost bcrypt accepts; keeps seeding fast.
os.environ.setdefault('PASSWORD_HASH_ROUNDS', '4')

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from catalog.database import StorageContext, create_db_engine  # noqa: E402
from catalog.main import create_app  # noqa: E402
from catalog.repository import CatalogRepository  # noqa: E402
from catalog.seed_data import SEED_COURSES, SEED_USERS  # noqa: E402


@pytest.fixture
def repository():
    engine = create_db_engine('sqlite://')
    try:
        yield CatalogRepository(StorageContext(engine))
    finally:
        engine.dispose()


@pytest.fixture
def seeded_repository(repository):
    repository.bootstrap(SEED_USERS, SEED_COURSES)
    return repository


@pytest.fixture
def client(repository):
    app = create_app(repository)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
