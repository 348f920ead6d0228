"""
blobedit error classes.

Provides a clear taxonomy of errors that can occur during an edit session.
Each error carries the name of the workflow stage that failed so the CLI can
report where things went wrong, regardless of the underlying SDK exception.
"""
from __future__ import annotations

from typing import Optional


class BlobEditError(Exception):
    """
    Base class for all blobedit errors.

    Every error is terminal for the current invocation; nothing is retried.
    """
    stage = "edit"

    def __str__(self) -> str:
        return f"[{self.stage}] {super().__str__()}"


class AddressParseError(BlobEditError, ValueError):
    """The object location could not be parsed."""
    stage = "resolve"


class MissingSchemeError(AddressParseError):
    """
    Location does not start with a recognized scheme prefix.

    Raised for inputs like "bucket/key", "ftp://bucket/key" or "".
    """
    pass


class MissingContainerError(AddressParseError):
    """Location has a scheme but no container/bucket segment."""
    pass


class ScratchFileError(BlobEditError):
    """
    Local scratch file could not be created, written or read.

    Raised when:
    - the temp directory is missing or not writable
    - the disk is full
    - the file vanished before it could be re-read
    """
    stage = "scratch"


class TransportFetchError(BlobEditError):
    """
    Fetching the remote object failed.

    Covers both the initial request and errors while reading body chunks.
    """
    stage = "fetch"


class ObjectNotFoundError(TransportFetchError):
    """The remote object (or its container) does not exist."""
    pass


class TransportWriteError(BlobEditError):
    """
    Writing the edited content back failed.

    The local edit is lost from the store's point of view; the remote object
    is left as it was before the session.
    """
    stage = "writeback"


class EditorSpawnError(BlobEditError):
    """The editor program could not be started."""
    stage = "editor"


class EditorExitError(BlobEditError):
    """
    The editor terminated with a failure status.

    Attributes:
        returncode: Exit status; negative values mean the editor was killed
            by signal ``-returncode``.
    """
    stage = "editor"

    def __init__(self, message: str, returncode: Optional[int] = None):
        super().__init__(message)
        self.returncode = returncode


__all__ = [
    "BlobEditError",
    "AddressParseError",
    "MissingSchemeError",
    "MissingContainerError",
    "ScratchFileError",
    "TransportFetchError",
    "ObjectNotFoundError",
    "TransportWriteError",
    "EditorSpawnError",
    "EditorExitError",
]
