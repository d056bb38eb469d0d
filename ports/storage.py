"""Interface for blob storage backends wrapped by the video storage."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import IO, Any, Iterator, Optional


class Storage(ABC):
    """
    Blob storage interface addressed by string keys.

    The YouTube storage implements it and also wraps another implementation
    ("original storage") that keeps the raw bytes of every uploaded video.

    Implementation examples: Local filesystem, Cloud storage (S3, GCS).
    """

    @abstractmethod
    def upload(self, io: IO[bytes], key: str, metadata: Optional[dict] = None) -> Any:
        """
        Store the content of a readable stream under the given key.

        Args:
            io: Readable binary stream positioned at the start.
            key: Storage key.
            metadata: Caller metadata (filename, mime type, ...).
        """
        pass

    @abstractmethod
    def download(self, key: str) -> IO[bytes]:
        """
        Copy stored content into a local temporary file.

        Returns:
            Temporary file object opened for reading, rewound to the start.

        Raises:
            FileNotFoundInStorage: If nothing is stored under the key.
        """
        pass

    @abstractmethod
    def open(self, key: str) -> IO[bytes]:
        """
        Open stored content for reading.

        Raises:
            FileNotFoundInStorage: If nothing is stored under the key.
        """
        pass

    @abstractmethod
    def read(self, key: str) -> bytes:
        """Return the full stored content."""
        pass

    @abstractmethod
    def stream(self, key: str, chunk_size: int = 16 * 1024) -> Iterator[bytes]:
        """Yield stored content in chunks of at most chunk_size bytes."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Delete stored content. Missing keys are ignored."""
        pass

    @abstractmethod
    def exists(self, key: str) -> bool:
        """
        Check if content is stored under the key.

        Returns:
            True if it exists, False otherwise.
        """
        pass

    @abstractmethod
    def url(self, key: str, **options) -> str:
        """Build a URL for the stored content."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Delete everything held by the storage."""
        pass


class StorageError(Exception):
    """Base exception for storage errors."""
    pass


class FileNotFoundInStorage(StorageError):
    """Nothing is stored under the requested key."""
    pass
