from pathlib import Path

import pytest

from app import create_app
from contactbook.config import Settings
from contactbook.repository import ContactStore


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    path = tmp_path / "contacts"
    path.mkdir()
    return path


@pytest.fixture
def store(data_dir: Path) -> ContactStore:
    return ContactStore(data_dir)


@pytest.fixture
def app(data_dir: Path):
    return create_app(Settings(data_dir=str(data_dir)))


@pytest.fixture
def client(app):
    return app.test_client()
