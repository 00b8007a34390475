import logging

import pytest
from fastapi.testclient import TestClient

from portfolio_qa.api.app import create_app
from portfolio_qa.catalog.default_catalog import default_catalog
from portfolio_qa.config import Settings
from portfolio_qa.service import QuestionService
from portfolio_qa.storage.memory import InMemoryStore


def make_settings(tmp_path, **overrides) -> Settings:
    values = dict(
        storage_backend="memory",
        sqlite_path=str(tmp_path / "qa.db"),
        catalog_path=None,
        api_prefix="/api",
        cors_origins=("*",),
        default_debug=False,
        suggested_questions=6,
        log_dir=str(tmp_path / "logs"),
        log_level="INFO",
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings(tmp_path):
    return make_settings(tmp_path)


@pytest.fixture
def store():
    return InMemoryStore(default_catalog())


@pytest.fixture
def service(store):
    return QuestionService(store, logging.getLogger("portfolio_qa.tests"))


@pytest.fixture
def client(service, settings):
    return TestClient(create_app(service=service, settings=settings))
