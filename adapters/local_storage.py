"""Local filesystem storage adapter."""
from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import IO, Iterator, Optional

from ports.storage import FileNotFoundInStorage, Storage, StorageError

logger = logging.getLogger(__name__)


class LocalFileStorage(Storage):
    """
    Local filesystem storage implementation.

    Each key is stored as a file directly under the storage directory.
    Used as the original storage keeping the raw bytes of uploaded videos.
    """

    def __init__(self, directory: str | Path, base_url: Optional[str] = None):
        """
        Initialize local storage.

        Args:
            directory: Directory holding stored files. Created if missing.
            base_url: Optional public URL prefix. If None, url() returns file:// URIs.
        """
        self.directory = Path(directory).resolve()
        self.base_url = base_url.rstrip("/") if base_url else None
        self.directory.mkdir(parents=True, exist_ok=True)
        logger.debug(f"LocalFileStorage initialized with directory={self.directory}")

    def upload(self, io: IO[bytes], key: str, metadata: Optional[dict] = None) -> None:
        """
        Store content under key.

        Content is written to a temporary file in the storage directory and
        moved into place once complete, so a failing source never leaves a
        partial file under key.

        Raises:
            StorageError: If the file cannot be written.
        """
        path = self._path(key)
        tmp = tempfile.NamedTemporaryFile(dir=self.directory, prefix=".upload-", delete=False)
        try:
            with tmp:
                shutil.copyfileobj(io, tmp)
            os.replace(tmp.name, path)
        except OSError as e:
            raise StorageError(f"Cannot write {key}: {e}") from e
        finally:
            if os.path.exists(tmp.name):
                os.unlink(tmp.name)
        logger.debug(f"Stored {key} ({path.stat().st_size} bytes)")

    def download(self, key: str) -> IO[bytes]:
        """
        Copy stored file into a temporary file.

        Returns:
            Temporary file rewound to the start; deleted when closed.
        """
        tmp = tempfile.NamedTemporaryFile(prefix="storage-", suffix=self._path(key).suffix)
        try:
            for chunk in self.stream(key):
                tmp.write(chunk)
            tmp.flush()
            tmp.seek(0)
        except Exception:
            tmp.close()
            raise
        return tmp

    def open(self, key: str) -> IO[bytes]:
        path = self._existing_path(key)
        return open(path, "rb")

    def read(self, key: str) -> bytes:
        return self._existing_path(key).read_bytes()

    def stream(self, key: str, chunk_size: int = 16 * 1024) -> Iterator[bytes]:
        with self.open(key) as f:
            while True:
                chunk = f.read(chunk_size)
                if not chunk:
                    break
                yield chunk

    def delete(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()
            logger.debug(f"Deleted {key}")

    def exists(self, key: str) -> bool:
        """Check if file exists."""
        try:
            path = self._path(key)
        except StorageError:
            return False
        return path.is_file()

    def url(self, key: str, **options) -> str:
        if self.base_url:
            return f"{self.base_url}/{key}"
        return self._path(key).as_uri()

    def clear(self) -> None:
        for path in self.directory.iterdir():
            if path.is_dir():
                shutil.rmtree(path)
            else:
                path.unlink()
        logger.info(f"Cleared storage directory {self.directory}")

    def _existing_path(self, key: str) -> Path:
        path = self._path(key)
        if not path.is_file():
            raise FileNotFoundInStorage(f"File does not exist: {key}")
        return path

    def _path(self, key: str) -> Path:
        """
        Resolve key to a path inside the storage directory.

        Raises:
            StorageError: If key is empty or escapes the directory.
        """
        if not key:
            raise StorageError("Empty storage key")

        path = (self.directory / key).resolve()
        if path.parent != self.directory:
            raise StorageError(f"Invalid storage key: {key}")
        return path
