"""Deletes every video in the channel's uploads playlist."""
import logging

from domain.channel_resolver import ChannelResolver
from ports.video_service import VideoService

logger = logging.getLogger(__name__)


class PlaylistPaginator:
    """
    Empties the uploads playlist page by page.

    The first page is fetched again after each batch of deletions instead of
    following a page token: deleted videos drop out of the playlist, so the
    first page always holds the remaining ones. This relies on the listing
    being stable under deletion.
    """

    def __init__(self, service: VideoService, channel_resolver: ChannelResolver):
        self.service = service
        self.channel_resolver = channel_resolver

    def delete_all(self) -> int:
        """
        Delete all uploaded videos of the channel.

        Returns:
            Number of deleted videos.

        Raises:
            Any API error from listing or deleting; remaining videos are kept.
        """
        playlist_id = self.channel_resolver.uploads_playlist_id()
        deleted = 0

        while True:
            page = self.service.list_playlist_items("snippet", playlist_id=playlist_id)
            remaining = page.get("pageInfo", {}).get("totalResults", 0)
            if remaining <= 0:
                break

            logger.debug(f"Uploads playlist {playlist_id} has {remaining} videos left")
            for item in page.get("items", []):
                video_id = item["snippet"]["resourceId"]["videoId"]
                self.service.delete_video(video_id)
                logger.info(f"Deleted video {video_id}")
                deleted += 1

        return deleted
