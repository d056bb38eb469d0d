"""Capability of upload sources that can be copied to a local file."""
from typing import IO, ContextManager, Protocol, runtime_checkable


@runtime_checkable
class Materializable(Protocol):
    """
    Upload source that can be downloaded into a temporary local file.

    download() returns a context manager yielding the temporary file object;
    the file is deleted when the context exits.
    """

    def download(self) -> ContextManager[IO[bytes]]:
        ...
