"""
Integration tests against the real YouTube Data API.

Skipped unless YOUTUBE_CLIENT_ID, YOUTUBE_CLIENT_SECRET and
YOUTUBE_REFRESH_TOKEN are set. Uploads count against the API quota and the
uploaded test video is deleted at the end.
"""
import io
import os

import pytest
from dotenv import load_dotenv

from adapters.local_storage import LocalFileStorage
from adapters.youtube_storage import YouTubeStorage

load_dotenv()

REQUIRED_ENV = ("YOUTUBE_CLIENT_ID", "YOUTUBE_CLIENT_SECRET", "YOUTUBE_REFRESH_TOKEN")

pytestmark = pytest.mark.skipif(
    not all(os.getenv(name) for name in REQUIRED_ENV),
    reason="YouTube credentials not configured",
)


@pytest.fixture
def youtube_storage(tmp_path):
    return YouTubeStorage(
        original_storage=LocalFileStorage(tmp_path / "original"),
        client_id=os.environ["YOUTUBE_CLIENT_ID"],
        client_secret=os.environ["YOUTUBE_CLIENT_SECRET"],
        refresh_token=os.environ["YOUTUBE_REFRESH_TOKEN"],
        channel_id=os.getenv("YOUTUBE_CHANNEL_ID") or None,
        request_options={"num_retries": 3},
    )


@pytest.mark.integration
def test_upload_update_delete_roundtrip(youtube_storage):
    video_path = os.getenv("YOUTUBE_TEST_VIDEO")
    if not video_path:
        pytest.skip("YOUTUBE_TEST_VIDEO not set")

    with open(video_path, "rb") as f:
        content = f.read()

    result = youtube_storage.upload(io.BytesIO(content), "placeholder", {"filename": "integration-test.mp4"})
    try:
        assert youtube_storage.exists(result.id)
        assert youtube_storage.read(result.id) == content

        updated = youtube_storage.update(result.id, {"youtube": {"description": "integration test"}})
        assert updated["snippet"]["description"] == "integration test"
        assert updated["snippet"]["title"] == "integration-test.mp4"
    finally:
        youtube_storage.delete(result.id)

    assert not youtube_storage.exists(result.id)


@pytest.mark.integration
def test_channel_lookup(youtube_storage):
    assert youtube_storage.channel_id
