"""Uploads videos to YouTube and mirrors them into the original storage."""
from __future__ import annotations

import logging
from typing import IO, Any, Optional

from domain.channel_resolver import ChannelResolver
from domain.models import PrivacyStatus, UploadResult, build_snippet, split_metadata
from ports.materializable import Materializable
from ports.storage import Storage
from ports.video_service import VideoService

logger = logging.getLogger(__name__)


class UploadPipeline:
    """
    Video upload workflow.

    Builds the video resource from layered options, inserts it on YouTube
    (retrying once from a local temporary copy when the API rejects the
    stream itself), then stores the same content in the original storage
    under the YouTube video id.
    """

    def __init__(
        self,
        service: VideoService,
        channel_resolver: ChannelResolver,
        original_storage: Storage,
        upload_options: Optional[dict] = None,
        default_privacy: PrivacyStatus = PrivacyStatus.PRIVATE,
    ):
        """
        Initialize upload pipeline.

        Args:
            service: Video service used for inserts.
            channel_resolver: Source of the target channel id.
            original_storage: Storage receiving the raw video content.
            upload_options: Snippet defaults merged into every upload.
            default_privacy: Privacy status of newly uploaded videos.
        """
        self.service = service
        self.channel_resolver = channel_resolver
        self.original_storage = original_storage
        self.upload_options = dict(upload_options or {})
        self.default_privacy = default_privacy

    def upload(self, io: IO[bytes], metadata: Optional[dict] = None, **options) -> UploadResult:
        """
        Upload a video.

        Args:
            io: Readable video stream. Rewound to the start before returning.
            metadata: Caller metadata. "filename" becomes the default title and
                     the reserved "youtube" entry overrides snippet fields.
            **options: Per-call snippet options.

        Returns:
            UploadResult with the YouTube video id and the full video resource.
        """
        forwarded_metadata, overrides = split_metadata(metadata)

        snippet = build_snippet(
            filename=forwarded_metadata.get("filename"),
            channel_id=self.channel_resolver.resolve(),
            upload_options=self.upload_options,
            passed_options=options,
            metadata_overrides=overrides,
        )
        body = {
            "snippet": snippet,
            "status": {"privacyStatus": self.default_privacy.value},
        }

        logger.info(f"Uploading video: {snippet.get('title')}")
        video = self._insert(io, body)
        video_id = video["id"]
        logger.info(f"Video uploaded successfully: video_id={video_id}")

        try:
            self.original_storage.upload(io, video_id, forwarded_metadata)
        finally:
            _rewind(io)
        logger.debug(f"Stored original content under {video_id}")

        return UploadResult(id=video_id, video=dict(video))

    def _insert(self, io: Any, body: dict) -> dict:
        """
        Insert the video, falling back to a local temporary copy.

        The fallback runs only when the API rejects the upload body and the
        source can be materialized; every other error propagates unchanged.
        """
        try:
            return self.service.insert_video("snippet,status", body, io)
        except Exception as e:
            if not (self.service.is_upload_source_error(e) and isinstance(io, Materializable)):
                raise

            logger.warning(f"Upload source rejected ({e}), retrying from a temporary file")
            with io.download() as tempfile:
                return self.service.insert_video("snippet,status", body, tempfile)
        finally:
            _rewind(io)


def _rewind(io: Any) -> None:
    seekable = getattr(io, "seekable", None)
    if callable(seekable) and not seekable():
        return
    if hasattr(io, "seek"):
        io.seek(0)
