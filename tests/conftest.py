import os

os.environ["YT_API_KEY"] = "test-yt-key"
os.environ["ANTHROPIC_API_KEY"] = ""

import pytest
from fastapi.testclient import TestClient

from app.config import get_settings
from app.main import app
from app.schemas.catalog import CandidateVideo


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def no_youtube_key(monkeypatch):
    monkeypatch.setenv("YT_API_KEY", "")
    get_settings.cache_clear()


def _make_video(n: int, **overrides) -> CandidateVideo:
    fields = {
        "id": f"vid{n}",
        "title": f"Python Tutorial part {n}",
        "description": "Learn Python step by step",
        "channel_title": "Code Academy",
        "duration_seconds": 600,
    }
    fields.update(overrides)
    return CandidateVideo(**fields)


@pytest.fixture
def make_video():
    return _make_video


@pytest.fixture
def videos():
    return [_make_video(n) for n in range(1, 6)]
