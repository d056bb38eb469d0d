"""
Configuration module for the application.

Handles reading environment variables for YouTube credentials and the
original storage location.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass
class Config:
    """
    Application configuration for the YouTube storage.

    Attributes:
        client_id: OAuth2 client id
        client_secret: OAuth2 client secret
        refresh_token: OAuth2 refresh token of the channel owner
        channel_id: Channel to upload to (None to look up the user's channel)
        default_privacy: Privacy status of uploaded videos
        num_retries: Retries per API request for transient HTTP errors
        storage_base_path: Directory of the original (local) storage
        storage_base_url: Public URL prefix of the original storage
    """
    client_id: str
    client_secret: str
    refresh_token: str
    channel_id: Optional[str]
    default_privacy: str
    num_retries: int
    storage_base_path: str
    storage_base_url: Optional[str]


# Module-level cache for configuration
_config_instance: Config | None = None


def get_config() -> Config:
    """
    Get application configuration (singleton pattern).

    Reads configuration from environment variables with sensible defaults.
    Loads .env file if present in the project root.

    Environment variables:
        YOUTUBE_CLIENT_ID: OAuth2 client id (required by YouTubeStorage)
        YOUTUBE_CLIENT_SECRET: OAuth2 client secret (required by YouTubeStorage)
        YOUTUBE_REFRESH_TOKEN: OAuth2 refresh token (required by YouTubeStorage)
        YOUTUBE_CHANNEL_ID: Channel id. Default: looked up from the account
        YOUTUBE_DEFAULT_PRIVACY: public, unlisted or private. Default: "private"
        YOUTUBE_NUM_RETRIES: Retries per request. Default: 0
        STORAGE_BASE_PATH: Original storage directory. Default: ".data/storage"
        STORAGE_BASE_URL: Original storage URL prefix. Default: file:// URIs

    Returns:
        Config instance with loaded configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file if it exists
    load_dotenv()

    num_retries_str = os.getenv("YOUTUBE_NUM_RETRIES", "0")
    try:
        num_retries = int(num_retries_str)
    except ValueError:
        raise ValueError(f"YOUTUBE_NUM_RETRIES must be an integer, got: {num_retries_str}")

    _config_instance = Config(
        client_id=os.getenv("YOUTUBE_CLIENT_ID", ""),
        client_secret=os.getenv("YOUTUBE_CLIENT_SECRET", ""),
        refresh_token=os.getenv("YOUTUBE_REFRESH_TOKEN", ""),
        channel_id=os.getenv("YOUTUBE_CHANNEL_ID") or None,
        default_privacy=os.getenv("YOUTUBE_DEFAULT_PRIVACY", "private"),
        num_retries=num_retries,
        storage_base_path=os.getenv("STORAGE_BASE_PATH", ".data/storage"),
        storage_base_url=os.getenv("STORAGE_BASE_URL") or None,
    )

    return _config_instance
