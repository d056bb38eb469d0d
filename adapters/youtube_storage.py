"""YouTube-backed video storage."""
from __future__ import annotations

import logging
from typing import IO, Iterator, Optional, Union

from adapters.youtube_service import YouTubeApiService
from domain.channel_resolver import ChannelResolver
from domain.models import (
    EMBED_URL,
    SHORT_URL,
    WATCH_URL,
    AdapterConfig,
    PrivacyStatus,
    UploadResult,
    UrlType,
    split_metadata,
)
from domain.playlist_paginator import PlaylistPaginator
from domain.upload_pipeline import UploadPipeline
from ports.adapter_error import VideoNotFoundError
from ports.storage import Storage
from ports.video_service import VideoService

logger = logging.getLogger(__name__)


class YouTubeStorage(Storage):
    """
    Storage that keeps videos on YouTube.

    Uploads go to the authenticated user's channel; the same bytes are also
    written to the original storage under the YouTube video id, which serves
    download/open/read/stream.

    Not atomic across the two stores: delete() and clear() remove videos
    from YouTube first, so a failure in the original storage afterwards
    leaves content there that YouTube no longer has.
    """

    def __init__(
        self,
        original_storage: Storage,
        client_id: str,
        client_secret: str,
        refresh_token: str,
        channel_id: Optional[str] = None,
        default_privacy: Union[PrivacyStatus, str] = PrivacyStatus.PRIVATE,
        upload_options: Optional[dict] = None,
        client_options: Optional[dict] = None,
        request_options: Optional[dict] = None,
        service: Optional[VideoService] = None,
    ):
        """
        Initialize YouTube storage.

        Args:
            original_storage: Storage holding the raw video content.
            client_id: OAuth2 client id.
            client_secret: OAuth2 client secret.
            refresh_token: OAuth2 refresh token of the channel owner.
            channel_id: Channel to upload to. If None, the user's only channel is used.
            default_privacy: Privacy status of uploaded videos.
            upload_options: Snippet fields applied to every upload.
            client_options: Options for the YouTube API client.
            request_options: Options for every API request (num_retries, ...).
            service: Prebuilt video service. If None, a YouTubeApiService is built.

        Raises:
            ConfigurationError: If a required option is missing or invalid.
        """
        self.config = AdapterConfig(
            original_storage=original_storage,
            client_id=client_id,
            client_secret=client_secret,
            refresh_token=refresh_token,
            channel_id=channel_id,
            default_privacy=default_privacy,
            upload_options=upload_options,
            client_options=client_options,
            request_options=request_options,
        )

        if service is None:
            service = YouTubeApiService(
                client_id=client_id,
                client_secret=client_secret,
                refresh_token=refresh_token,
                client_options=self.config.client_options,
                request_options=self.config.request_options,
            )
        self.service = service

        self.channel_resolver = ChannelResolver(service, channel_id=channel_id)
        self.upload_pipeline = UploadPipeline(
            service,
            self.channel_resolver,
            original_storage,
            upload_options=self.config.upload_options,
            default_privacy=self.config.default_privacy,
        )
        self.playlist_paginator = PlaylistPaginator(service, self.channel_resolver)

        logger.info("YouTubeStorage initialized")

    @property
    def original_storage(self) -> Storage:
        return self.config.original_storage

    @property
    def default_privacy(self) -> PrivacyStatus:
        return self.config.default_privacy

    @property
    def upload_options(self) -> dict:
        return dict(self.config.upload_options)

    @property
    def channel_id(self) -> str:
        """Channel videos are uploaded to, looked up on first access."""
        return self.channel_resolver.resolve()

    def upload(self, io: IO[bytes], key: str = "", metadata: Optional[dict] = None, **options) -> UploadResult:
        """
        Upload a video to YouTube and to the original storage.

        Args:
            io: Readable video stream.
            key: Placeholder key; ignored, YouTube assigns the id.
            metadata: Caller metadata ("filename", reserved "youtube" entry).
            **options: Per-call snippet options.

        Returns:
            UploadResult; its id is the key to use for later calls.
        """
        result = self.upload_pipeline.upload(io, metadata, **options)
        if key and key != result.id:
            logger.debug(f"Replaced placeholder key {key} with video id {result.id}")
        return result

    def exists(self, key: str) -> bool:
        response = self.service.list_videos("id", id=key)
        return response.get("pageInfo", {}).get("totalResults") == 1

    def delete(self, key: str) -> None:
        """Delete a video from YouTube and the original storage. Unknown ids are ignored."""
        if not self.exists(key):
            logger.debug(f"Video {key} does not exist, nothing to delete")
            return

        self.service.delete_video(key)
        logger.info(f"Deleted video {key}")
        self.original_storage.delete(key)

    def url(self, key: str, type: Optional[Union[UrlType, str]] = None, **options) -> str:
        """
        Build a URL for a video.

        Args:
            key: Video id.
            type: "original" asks the original storage, "embed" and "short"
                 build player and youtu.be links, anything else a watch page link.
            **options: Passed to the original storage for type "original".
        """
        url_type = type.value if isinstance(type, UrlType) else type

        if url_type == UrlType.ORIGINAL.value:
            return self.original_storage.url(key, **options)
        if url_type == UrlType.EMBED.value:
            return EMBED_URL.format(id=key)
        if url_type == UrlType.SHORT.value:
            return SHORT_URL.format(id=key)
        return WATCH_URL.format(id=key)

    def clear(self) -> None:
        """Delete every video of the channel, then clear the original storage."""
        deleted = self.playlist_paginator.delete_all()
        logger.info(f"Deleted {deleted} videos from YouTube")
        self.original_storage.clear()

    def update(self, key: str, metadata: Optional[dict] = None) -> Optional[dict]:
        """
        Update the snippet of an existing video.

        Only the reserved "youtube" metadata entry is used; its fields are
        merged over the current snippet.

        Returns:
            Updated video resource, or None when there is nothing to update.

        Raises:
            VideoNotFoundError: If no single video matches key.
        """
        _, snippet = split_metadata(metadata)
        if snippet is None:
            return None

        response = self.service.list_videos("snippet", id=key)
        found = response.get("pageInfo", {}).get("totalResults", 0)
        if found != 1:
            raise VideoNotFoundError(key, found)

        existing_snippet = response["items"][0].get("snippet", {})
        body = {"id": key, "snippet": {**existing_snippet, **snippet}}

        updated = self.service.update_video("snippet", body)
        logger.info(f"Updated snippet of video {key}: {sorted(snippet)}")
        return dict(updated)

    def download(self, key: str) -> IO[bytes]:
        return self.original_storage.download(key)

    def open(self, key: str) -> IO[bytes]:
        return self.original_storage.open(key)

    def read(self, key: str) -> bytes:
        return self.original_storage.read(key)

    def stream(self, key: str, chunk_size: int = 16 * 1024) -> Iterator[bytes]:
        return self.original_storage.stream(key, chunk_size)
