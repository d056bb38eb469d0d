"""Domain models for the YouTube video storage."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from ports.adapter_error import ConfigurationError

# Reserved caller-metadata entry holding YouTube snippet overrides.
METADATA_KEY = "youtube"

WATCH_URL = "https://youtube.com/watch?v={id}"
EMBED_URL = "https://youtube.com/embed/{id}"
SHORT_URL = "https://youtu.be/{id}"


class PrivacyStatus(str, Enum):
    """YouTube video privacy status."""
    PUBLIC = "public"
    UNLISTED = "unlisted"
    PRIVATE = "private"


class UrlType(str, Enum):
    """Kinds of URL the storage can build for a video id."""
    ORIGINAL = "original"
    EMBED = "embed"
    SHORT = "short"
    WATCH = "watch"


@dataclass(frozen=True)
class AdapterConfig:
    """
    Configuration of a YouTube storage instance.

    Immutable after construction. Credentials and the original storage are
    required; everything else has defaults.
    """
    # Required fields
    original_storage: Any
    client_id: str
    client_secret: str
    refresh_token: str

    # Optional fields
    channel_id: Optional[str] = None
    default_privacy: PrivacyStatus = PrivacyStatus.PRIVATE
    upload_options: dict = field(default_factory=dict)
    client_options: dict = field(default_factory=dict)  # passed to the API client builder
    request_options: dict = field(default_factory=dict)  # passed to every request (num_retries)

    REQUIRED_OPTIONS = ("original_storage", "client_id", "client_secret", "refresh_token")

    def __post_init__(self):
        """Validate required options and normalize privacy status."""
        for name in self.REQUIRED_OPTIONS:
            value = getattr(self, name)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise ConfigurationError(
                    code="MISSING_OPTION",
                    message=f"Required option is missing: {name}",
                    details={"option": name},
                )

        try:
            privacy = PrivacyStatus(self.default_privacy)
        except ValueError as e:
            raise ConfigurationError(
                code="INVALID_PRIVACY",
                message=f"Invalid default_privacy: {self.default_privacy}",
                details={"allowed": [p.value for p in PrivacyStatus]},
            ) from e
        object.__setattr__(self, "default_privacy", privacy)

        for name in ("upload_options", "client_options", "request_options"):
            object.__setattr__(self, name, dict(getattr(self, name) or {}))


@dataclass
class UploadResult:
    """
    Result of uploading a video.

    id is the YouTube-assigned video id; it replaces the caller's placeholder
    key and is the key the original storage holds the content under.
    """
    id: str
    video: dict

    @property
    def snippet(self) -> dict:
        return self.video.get("snippet", {})


def build_snippet(
    filename: Optional[str],
    channel_id: str,
    upload_options: Optional[dict] = None,
    passed_options: Optional[dict] = None,
    metadata_overrides: Optional[dict] = None,
) -> dict:
    """
    Layer snippet sources, lowest precedence first.

    Filename-derived title and channel id, then storage-level upload options,
    then per-call options, then the reserved metadata entry. Last writer wins.
    """
    snippet = {"title": filename, "channelId": channel_id}
    snippet.update(upload_options or {})
    snippet.update(passed_options or {})
    snippet.update(metadata_overrides or {})
    return snippet


def split_metadata(metadata: Optional[dict]) -> tuple[dict, Optional[dict]]:
    """
    Separate the reserved YouTube entry from caller metadata.

    Returns:
        (metadata without the reserved entry, reserved entry or None).
        The caller's dict is not modified.
    """
    remaining = dict(metadata or {})
    overrides = remaining.pop(METADATA_KEY, None)
    return remaining, overrides
