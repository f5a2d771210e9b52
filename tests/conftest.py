import random

import pytest
from fastapi.testclient import TestClient

from taskboard.main import create_app
from taskboard.store import Store


@pytest.fixture
def seed():
    return 7


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "data" / "taskboard.db")


@pytest.fixture
def store(db_path, seed):
    s = Store(db_path, rng=random.Random(seed))
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def project(store):
    return store.projects.create_project("Launch", "#2563eb")


@pytest.fixture
def client(store, tmp_path):
    # no frontend build: API only
    app = create_app(store=store, static_dir=str(tmp_path / "no-frontend"))
    with TestClient(app) as c:
        yield c
