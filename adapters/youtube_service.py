"""YouTube Data API v3 service implementation."""
from __future__ import annotations

import io
import logging
import os
from typing import Any, Optional

from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from googleapiclient.http import MediaFileUpload, MediaIoBaseUpload

from ports.video_service import InvalidUploadSource, VideoService

logger = logging.getLogger(__name__)


class YouTubeApiService(VideoService):
    """
    YouTube Data API v3 implementation of VideoService.

    Authenticates with an OAuth2 refresh token; access tokens are refreshed
    by google-auth as needed.
    """

    SCOPES = [
        "https://www.googleapis.com/auth/youtube",
    ]

    TOKEN_URI = "https://oauth2.googleapis.com/token"

    DEFAULT_MIMETYPE = "application/octet-stream"

    # Error reasons meaning the media body itself was rejected
    UPLOAD_SOURCE_ERRORS = ("mediaBodyRequired", "invalidFilename", "Invalid upload source")

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        refresh_token: str,
        client_options: Optional[dict] = None,
        request_options: Optional[dict] = None,
    ):
        """
        Initialize YouTube API service.

        Args:
            client_id: OAuth2 client id.
            client_secret: OAuth2 client secret.
            refresh_token: OAuth2 refresh token for the channel owner.
            client_options: Options for the API client (e.g., api_endpoint, quota_project_id).
            request_options: Options for every request: num_retries, chunksize, mimetype.
        """
        self.request_options = dict(request_options or {})
        self.num_retries = int(self.request_options.get("num_retries", 0))

        credentials = Credentials(
            token=None,
            refresh_token=refresh_token,
            client_id=client_id,
            client_secret=client_secret,
            token_uri=self.TOKEN_URI,
            scopes=self.SCOPES,
        )

        self.youtube = build(
            "youtube",
            "v3",
            credentials=credentials,
            client_options=client_options or None,
            cache_discovery=False,
        )
        logger.info("YouTube API client initialized")

    def list_channels(self, part: str, *, mine: Optional[bool] = None, id: Optional[str] = None) -> dict:
        params = {"part": part}
        if mine is not None:
            params["mine"] = mine
        if id is not None:
            params["id"] = id
        return self._execute(self.youtube.channels().list(**params))

    def list_videos(self, part: str, *, id: str) -> dict:
        return self._execute(self.youtube.videos().list(part=part, id=id))

    def insert_video(self, part: str, body: dict, media: Any) -> dict:
        media_body = self._media_body(media)
        request = self.youtube.videos().insert(part=part, body=body, media_body=media_body)

        response = None
        while response is None:
            status, response = request.next_chunk(num_retries=self.num_retries)
            if status:
                progress = int(status.progress() * 100)
                logger.debug(f"Upload progress: {progress}%")
        return response

    def update_video(self, part: str, body: dict) -> dict:
        return self._execute(self.youtube.videos().update(part=part, body=body))

    def delete_video(self, video_id: str) -> None:
        self._execute(self.youtube.videos().delete(id=video_id))

    def list_playlist_items(self, part: str, *, playlist_id: str) -> dict:
        return self._execute(self.youtube.playlistItems().list(part=part, playlistId=playlist_id))

    def is_upload_source_error(self, error: Exception) -> bool:
        if isinstance(error, InvalidUploadSource):
            return True

        if not isinstance(error, HttpError) or not 400 <= error.resp.status < 500:
            return False

        content = error.content.decode("utf-8", errors="replace") if error.content else ""
        message = f"{error} {content}"
        return any(reason in message for reason in self.UPLOAD_SOURCE_ERRORS)

    def _execute(self, request) -> dict:
        return request.execute(num_retries=self.num_retries)

    def _media_body(self, media: Any):
        """
        Wrap an upload source as a resumable media body.

        Raises:
            InvalidUploadSource: If media is neither a path nor a usable stream.
        """
        chunksize = self.request_options.get("chunksize", -1)
        mimetype = self.request_options.get("mimetype", self.DEFAULT_MIMETYPE)

        if isinstance(media, (str, os.PathLike)):
            return MediaFileUpload(os.fspath(media), mimetype=mimetype, chunksize=chunksize, resumable=True)

        if not hasattr(media, "read"):
            raise InvalidUploadSource(f"Invalid upload source: {type(media).__name__}")

        try:
            return MediaIoBaseUpload(media, mimetype=mimetype, chunksize=chunksize, resumable=True)
        except (AttributeError, io.UnsupportedOperation, OSError) as e:
            raise InvalidUploadSource(f"Invalid upload source: {e}") from e
