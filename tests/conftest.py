import pytest
from fastapi.testclient import TestClient

from markdown_elements.services.ids import counter_ids


@pytest.fixture()
def client() -> TestClient:
    from markdown_elements.main import app

    return TestClient(app)


@pytest.fixture()
def ids():
    return counter_ids()


@pytest.fixture(autouse=True)
def _clear_in_memory_stores(tmp_path, monkeypatch):
    # Ensure deterministic tests across runs.
    from markdown_elements import config
    from markdown_elements.services import input_layer

    # Use a temp data dir for persisted uploads in tests
    monkeypatch.setattr(config, "MARKDOWN_ELEMENTS_DATA_DIR", str(tmp_path))

    input_layer._upload_store.clear()
    yield
