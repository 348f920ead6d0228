"""
Scratch files for editing remote objects locally.

A scratch file is the local working copy handed to the editor. It is created
with a collision-free name (optionally carrying the object's extension so the
editor can pick a syntax), and it is always deleted when the session ends.
"""
from __future__ import annotations

import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator, Optional

from .errors import ScratchFileError

__all__ = ["ScratchFile", "scratch_file", "SCRATCH_PREFIX"]

logger = logging.getLogger(__name__)

SCRATCH_PREFIX = "blobedit-"


class ScratchFile:
    """
    A uniquely named local file opened for read and write.

    The editor runs as a separate process and opens the file by path, so
    after editing the content is re-read through the path rather than the
    handle: many editors save by writing a new file and renaming it over
    the old one.
    """

    def __init__(self, path: Path, handle: IO[bytes]) -> None:
        self.path = path
        self._handle: Optional[IO[bytes]] = handle

    @classmethod
    def create(cls, extension: Optional[str] = None, *, directory: Optional[str] = None) -> ScratchFile:
        """
        Allocate a new scratch file.

        Args:
            extension: Extension hint; the file name gets a ".{extension}" suffix
            directory: Directory to create the file in (None = system temp dir)

        Returns:
            ScratchFile open for read/write at offset 0

        Raises:
            ScratchFileError: If no file could be allocated or opened
        """
        suffix = f".{extension}" if extension else ""
        try:
            fd, name = tempfile.mkstemp(prefix=SCRATCH_PREFIX, suffix=suffix, dir=directory)
        except OSError as e:
            raise ScratchFileError(f"creating temporary file: {e}") from e

        try:
            handle = os.fdopen(fd, "w+b")
        except OSError as e:
            os.close(fd)
            Path(name).unlink(missing_ok=True)
            raise ScratchFileError(f"opening temporary file {name}: {e}") from e

        logger.debug(f"created temporary file {name}")
        return cls(Path(name), handle)

    @property
    def released(self) -> bool:
        return self._handle is None

    def _require_handle(self) -> IO[bytes]:
        if self._handle is None:
            raise ScratchFileError(f"scratch file {self.path} already released")
        return self._handle

    def write(self, chunk: bytes) -> int:
        try:
            return self._require_handle().write(chunk)
        except OSError as e:
            raise ScratchFileError(f"writing temporary file {self.path}: {e}") from e

    def flush(self) -> None:
        """Flush buffered bytes so the editor sees the full content."""
        handle = self._require_handle()
        try:
            handle.flush()
            os.fsync(handle.fileno())
        except OSError as e:
            raise ScratchFileError(f"flushing temporary file {self.path}: {e}") from e

    def read_contents(self) -> bytes:
        """
        Read the file's full current content from offset 0.

        Raises:
            ScratchFileError: If the file was removed or cannot be read
        """
        self._require_handle()
        try:
            return self.path.read_bytes()
        except OSError as e:
            raise ScratchFileError(f"reading edited file {self.path}: {e}") from e

    def release(self) -> None:
        """
        Close the handle and delete the file.

        Safe to call more than once; a file already removed is not an error.
        """
        if self._handle is None:
            return
        handle, self._handle = self._handle, None
        try:
            handle.close()
        finally:
            self.path.unlink(missing_ok=True)
            logger.debug(f"removed temporary file {self.path}")


@contextmanager
def scratch_file(extension: Optional[str] = None, *, directory: Optional[str] = None) -> Iterator[ScratchFile]:
    """
    Create a scratch file and release it on every exit path.

    Example:
        >>> with scratch_file("txt") as scratch:
        ...     scratch.write(b"hello")
        ...     scratch.flush()
    """
    scratch = ScratchFile.create(extension, directory=directory)
    try:
        yield scratch
    finally:
        scratch.release()
