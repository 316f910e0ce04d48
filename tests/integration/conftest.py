from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from intelliforms.api.app import create_app
from intelliforms.config.settings import Settings
from intelliforms.services import Services, build_services


@pytest.fixture
def storage_root(tmp_path: Path) -> Path:
    root = tmp_path / "storage"
    (root / "uploads").mkdir(parents=True)
    return root


@pytest.fixture
def local_settings(settings: Settings, storage_root: Path) -> Settings:
    """Offline settings: local blob store, in-process queue, example generator."""
    settings.local_storage_root = storage_root
    settings.ocr_engine = "tesseract"
    return settings


@pytest.fixture
def services(local_settings: Settings) -> Services:
    return build_services(local_settings)


@pytest.fixture
def client(services: Services) -> TestClient:
    return TestClient(create_app(services))


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"x-api-key": "secret-key"}
