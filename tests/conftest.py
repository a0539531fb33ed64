import pytest
from pathlib import Path
from fastapi.testclient import TestClient

from api.server import create_app
from config import Settings

# Test Data & Media Fixtures

def make_payload(size: int) -> bytes:
    """Deterministic, non-repeating-per-chunk byte pattern."""
    return bytes((i * 7 + i // 251) % 256 for i in range(size))


@pytest.fixture
def payload():
    return make_payload(10_000)


@pytest.fixture
def media_file(tmp_path, payload) -> Path:
    """A 10000-byte .mp4 file with known contents."""
    path = tmp_path / "clip.mp4"
    path.write_bytes(payload)
    return path


@pytest.fixture
def make_media(tmp_path):
    """Factory for media files of arbitrary name and size."""
    def _make(name: str, size: int) -> Path:
        path = tmp_path / name
        path.write_bytes(make_payload(size))
        return path
    return _make

# Mocks & Environment

@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """
    Keeps tests independent of any MEDIA_* variables or .env in the
    developer's shell.
    """
    monkeypatch.chdir(tmp_path)
    for key in ("MEDIA_MEDIA_PATH", "MEDIA_ROUTE", "MEDIA_BUFFER_SIZE",
                "MEDIA_HOST", "MEDIA_PORT", "MEDIA_LOG_LEVEL",
                "MEDIA_LOG_TO_FILE", "MEDIA_LOG_DIR"):
        monkeypatch.delenv(key, raising=False)
    # Disable heavy logging
    monkeypatch.setenv("MEDIA_LOG_LEVEL", "ERROR")


@pytest.fixture
def make_client():
    def _make(media_path: Path, **overrides) -> TestClient:
        config = Settings(media_path=media_path, **overrides)
        return TestClient(create_app(config))
    return _make


@pytest.fixture
def client(make_client, media_file):
    return make_client(media_file)
