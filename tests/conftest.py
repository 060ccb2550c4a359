from __future__ import annotations

from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from explorer_api.app.core.store import InMemoryStore, JSONFileStore, get_store
from explorer_api.app.main import app

API = "/api/v1"


def make_document(**collections: Any) -> Dict[str, Any]:
    document: Dict[str, Any] = {
        "highlights": [],
        "news": [],
        "images": [],
        "sources": [],
        "trending": [],
        "likes": {"articles": {}, "images": {}},
        "feedback": [],
    }
    document.update(collections)
    return document


@pytest.fixture()
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture()
def client(store: InMemoryStore):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def data_path(tmp_path):
    return tmp_path / "db.json"


@pytest.fixture()
def file_client(data_path):
    app.dependency_overrides[get_store] = lambda: JSONFileStore(data_path)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
