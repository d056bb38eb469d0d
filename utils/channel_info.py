#!/usr/bin/env python3
"""Show the channel and uploads playlist the YouTube storage would use."""

import sys

from adapters.youtube_service import YouTubeApiService
from app.config import get_config
from domain.channel_resolver import ChannelResolver
from ports.adapter_error import ConfigurationError


def main():
    config = get_config()

    missing = [
        name
        for name, value in (
            ("YOUTUBE_CLIENT_ID", config.client_id),
            ("YOUTUBE_CLIENT_SECRET", config.client_secret),
            ("YOUTUBE_REFRESH_TOKEN", config.refresh_token),
        )
        if not value
    ]
    if missing:
        print(f"ERROR: env vars not set: {', '.join(missing)}", file=sys.stderr)
        sys.exit(1)

    service = YouTubeApiService(
        client_id=config.client_id,
        client_secret=config.client_secret,
        refresh_token=config.refresh_token,
        request_options={"num_retries": config.num_retries},
    )
    resolver = ChannelResolver(service, channel_id=config.channel_id)

    print("YouTube Channel")
    print("=" * 50)
    try:
        print(f"  channel_id:       {resolver.resolve()}")
        print(f"  uploads playlist: {resolver.uploads_playlist_id()}")
    except ConfigurationError as e:
        print(f"  ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    playlist = service.list_playlist_items("snippet", playlist_id=resolver.uploads_playlist_id())
    print(f"  uploaded videos:  {playlist.get('pageInfo', {}).get('totalResults', 'N/A')}")


if __name__ == "__main__":
    main()
