import io

import pytest

from adapters.local_storage import LocalFileStorage
from adapters.youtube_storage import YouTubeStorage
from tests.acceptance.fake_youtube_service import FakeYouTubeService

VIDEO_CONTENT = b"\x00\x00\x00\x18ftypmp42" + b"fake video payload " * 64


@pytest.fixture
def video_content():
    return VIDEO_CONTENT


@pytest.fixture
def video():
    """In-memory video stream."""
    return io.BytesIO(VIDEO_CONTENT)


@pytest.fixture
def video_file(tmp_path):
    """Video file on disk."""
    path = tmp_path / "blank.mp4"
    path.write_bytes(VIDEO_CONTENT)
    return path


@pytest.fixture
def fake_service():
    return FakeYouTubeService()


@pytest.fixture
def original_storage(tmp_path):
    return LocalFileStorage(tmp_path / "original", base_url="https://cdn.example.com/videos")


@pytest.fixture
def storage_options(original_storage, fake_service):
    return {
        "original_storage": original_storage,
        "client_id": "abc",
        "client_secret": "def",
        "refresh_token": "hij",
        "service": fake_service,
    }


@pytest.fixture
def youtube_storage(storage_options):
    return YouTubeStorage(**storage_options)
