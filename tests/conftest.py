import pytest
from fastapi.testclient import TestClient

from backend.config import Settings
from backend.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATA_DIR=tmp_path / "data",
        UPLOADS_DIR=tmp_path / "uploads",
        MAX_UPLOAD_SIZE_MB=1,
        _env_file=None,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def upload(client):
    """Post a small text file, returning the response."""
    def _upload(name="resume.txt", content=b"hello world", mime="text/plain", **form):
        return client.post("/api/upload", files={"file": (name, content, mime)}, data=form)
    return _upload
