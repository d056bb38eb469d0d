"""Interface for the remote video hosting API (e.g., YouTube Data API)."""
from abc import ABC, abstractmethod
from typing import Any, Optional


class VideoService(ABC):
    """
    Thin RPC surface over the video hosting API.

    Methods mirror the API resources used by the storage adapter and return
    the API's JSON responses as plain dicts.

    Implementation examples: YouTube Data API v3, in-memory fake for tests.
    """

    @abstractmethod
    def list_channels(self, part: str, *, mine: Optional[bool] = None, id: Optional[str] = None) -> dict:
        """
        List channels owned by the authenticated user or matching an id.

        Args:
            part: Comma-separated resource parts (e.g., "id", "contentDetails").
            mine: Restrict to the authenticated user's channels.
            id: Restrict to a channel id.

        Returns:
            Channel list response ({"items": [...], "pageInfo": {...}}).
        """
        pass

    @abstractmethod
    def list_videos(self, part: str, *, id: str) -> dict:
        """
        List videos matching an id.

        Returns:
            Video list response with pageInfo.totalResults.
        """
        pass

    @abstractmethod
    def insert_video(self, part: str, body: dict, media: Any) -> dict:
        """
        Upload a new video.

        Args:
            part: Parts present in body (e.g., "snippet,status").
            body: Video resource (snippet, status).
            media: Upload source: local file path or readable binary stream.

        Returns:
            Inserted video resource.

        Raises:
            InvalidUploadSource: If media cannot be used as an upload body.
        """
        pass

    @abstractmethod
    def update_video(self, part: str, body: dict) -> dict:
        """
        Update parts of an existing video.

        Returns:
            Updated video resource.
        """
        pass

    @abstractmethod
    def delete_video(self, video_id: str) -> None:
        """Delete a video."""
        pass

    @abstractmethod
    def list_playlist_items(self, part: str, *, playlist_id: str) -> dict:
        """
        List the first page of items in a playlist.

        Returns:
            Playlist item list response with pageInfo.totalResults.
        """
        pass

    @abstractmethod
    def is_upload_source_error(self, error: Exception) -> bool:
        """
        Tell whether an insert failure was caused by the upload body itself.

        Such failures (missing media body, invalid filename, unusable
        source) can be recovered by retrying from a local file.
        """
        pass


class VideoServiceError(Exception):
    """Base exception for video service errors."""
    pass


class InvalidUploadSource(VideoServiceError):
    """
    Upload source cannot be sent as a media body.

    Examples: object without read(), stream that cannot seek to report its size.
    """
    pass
