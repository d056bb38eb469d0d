"""Resolves the authenticated user's YouTube channel and its uploads playlist."""
from __future__ import annotations

import logging
import threading
from typing import Optional

from ports.adapter_error import ChannelNotFoundError
from ports.video_service import VideoService

logger = logging.getLogger(__name__)


class ChannelResolver:
    """
    Looks up and caches the channel id and uploads playlist id.

    Both values are resolved at most once per instance. A channel id given
    at construction is used as-is without any API call.
    """

    def __init__(self, service: VideoService, channel_id: Optional[str] = None):
        """
        Initialize channel resolver.

        Args:
            service: Video service used for channel lookups.
            channel_id: Explicit channel id. If None, looked up on first use.
        """
        self.service = service
        self._channel_id = channel_id
        self._uploads_playlist_id: Optional[str] = None
        self._lock = threading.Lock()

    def resolve(self) -> str:
        """
        Return the channel id, looking it up on first call.

        Returns:
            Channel id of the authenticated user.

        Raises:
            ChannelNotFoundError: If the user owns zero or several channels.
        """
        if self._channel_id is not None:
            return self._channel_id

        with self._lock:
            if self._channel_id is None:
                self._channel_id = self._find_user_channel()
        return self._channel_id

    def uploads_playlist_id(self) -> str:
        """
        Return the id of the channel's "uploads" playlist.

        Raises:
            ChannelNotFoundError: If the channel cannot be fetched.
        """
        if self._uploads_playlist_id is not None:
            return self._uploads_playlist_id

        channel_id = self.resolve()
        with self._lock:
            if self._uploads_playlist_id is None:
                response = self.service.list_channels("contentDetails", id=channel_id)
                items = response.get("items", [])
                if not items:
                    raise ChannelNotFoundError(0)

                playlist_id = items[0]["contentDetails"]["relatedPlaylists"]["uploads"]
                logger.debug(f"Uploads playlist for channel {channel_id}: {playlist_id}")
                self._uploads_playlist_id = playlist_id
        return self._uploads_playlist_id

    def _find_user_channel(self) -> str:
        response = self.service.list_channels("id", mine=True)
        items = response.get("items", [])

        if len(items) != 1:
            logger.error(f"Expected exactly one channel for the user, found {len(items)}")
            raise ChannelNotFoundError(len(items))

        channel_id = items[0]["id"]
        logger.info(f"Resolved user channel: {channel_id}")
        return channel_id
