import os
import tempfile

import pytest
from fastapi.testclient import TestClient

# keep the default store created by videoup.main out of the project tree
os.environ.setdefault("VIDEOUP_DATA_DIR", tempfile.mkdtemp(prefix="videoup-"))

from videoup.main import create_app  # noqa: E402
from videoup.services.video_file_store import VideoFileStore  # noqa: E402
from videoup.services.video_registry import VideoRegistry  # noqa: E402


@pytest.fixture
def registry():
    return VideoRegistry()


@pytest.fixture
def store(tmp_path):
    return VideoFileStore(str(tmp_path / "videos"), chunk_size=256)


@pytest.fixture
def app(registry, store):
    return create_app(registry=registry, store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
