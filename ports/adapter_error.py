"""Unified adapter error types."""
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class AdapterError(Exception):
    """
    Unified error type for failures raised by the storage adapter itself.

    Carries a machine-readable code plus enough details (option name, ids,
    counts) to diagnose the problem without inspecting adapter internals.
    Remote API errors are not wrapped in this type; they pass through as-is.
    """
    code: str
    message: str
    details: Optional[Any] = None

    def __str__(self) -> str:
        if self.details:
            return f"[{self.code}] {self.message} (details: {self.details})"
        return f"[{self.code}] {self.message}"


class ConfigurationError(AdapterError):
    """
    Adapter is misconfigured and cannot operate.

    Examples: missing credentials, unknown privacy status, no unique channel.
    """
    pass


class ChannelNotFoundError(ConfigurationError):
    """The authenticated account does not own exactly one YouTube channel."""

    def __init__(self, found_channel_count: int):
        super().__init__(
            code="CHANNEL_NOT_FOUND",
            message=(
                f"Could not determine the user's channel (found {found_channel_count} channels). "
                "Create a channel at https://www.youtube.com/create_channel or set channel_id."
            ),
            details={"found": found_channel_count},
        )


class VideoNotFoundError(AdapterError):
    """No single video matches the requested id."""

    def __init__(self, video_id: str, found: int = 0):
        super().__init__(
            code="VIDEO_NOT_FOUND",
            message=f"Video not found: {video_id}",
            details={"id": video_id, "found": found},
        )
