"""Readable stream over content held in a storage."""
from __future__ import annotations

import logging
import tempfile
from contextlib import contextmanager
from pathlib import PurePosixPath
from typing import IO, Iterator, Optional

from ports.storage import Storage

logger = logging.getLogger(__name__)


class UploadedFile:
    """
    File-like view of a stored object.

    Opens the underlying storage stream lazily on first read. Supports
    download() into a temporary file, so it can be retried as a local file
    when the YouTube API rejects it as an upload body.
    """

    def __init__(self, storage: Storage, key: str):
        self.storage = storage
        self.key = key
        self._io: Optional[IO[bytes]] = None
        self._closed = False

    @property
    def io(self) -> IO[bytes]:
        if self._closed:
            raise ValueError("I/O operation on closed file")
        if self._io is None:
            self._io = self.storage.open(self.key)
        return self._io

    def read(self, size: int = -1) -> bytes:
        return self.io.read(size)

    def seek(self, offset: int, whence: int = 0) -> int:
        return self.io.seek(offset, whence)

    def tell(self) -> int:
        return self.io.tell()

    def seekable(self) -> bool:
        return True

    def rewind(self) -> None:
        if self._io is not None:
            self._io.seek(0)

    def close(self) -> None:
        if self._io is not None:
            self._io.close()
            self._io = None
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    @contextmanager
    def download(self) -> Iterator[IO[bytes]]:
        """
        Copy the stored content into a temporary file.

        Yields:
            Temporary file rewound to the start. Deleted on exit, also when
            the body of the with-block raises.
        """
        suffix = PurePosixPath(self.key).suffix
        with tempfile.NamedTemporaryFile(prefix="upload-", suffix=suffix) as tmp:
            for chunk in self.storage.stream(self.key):
                tmp.write(chunk)
            tmp.flush()
            tmp.seek(0)
            logger.debug(f"Downloaded {self.key} to {tmp.name}")
            yield tmp

    def __enter__(self) -> "UploadedFile":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"UploadedFile(key={self.key!r})"
