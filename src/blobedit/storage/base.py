"""
Storage interfaces for blobedit.

This protocol defines the boundary between the edit workflow and blob store
implementations, enabling clean dependency injection and testing with fakes.
"""
from __future__ import annotations

from typing import Iterator, Protocol, runtime_checkable

from .uri import RemoteRef

__all__ = ["ObjectTransport"]


@runtime_checkable
class ObjectTransport(Protocol):
    """Protocol for whole-object fetch and store against a blob store."""

    def fetch(self, ref: RemoteRef) -> Iterator[bytes]:
        """
        Stream the object's full content.

        The returned iterator is lazy, finite and single-pass. Chunks arrive
        in the object's byte order. Nothing is retried: an error on the
        request or on any chunk read aborts the stream.

        Args:
            ref: Remote object reference

        Returns:
            Iterator over content chunks

        Raises:
            ObjectNotFoundError: If the object does not exist
            TransportFetchError: For other network/authorization errors
        """
        ...

    def store(self, ref: RemoteRef, data: bytes) -> None:
        """
        Replace the object's content with ``data``.

        Args:
            ref: Remote object reference
            data: New full content of the object

        Raises:
            TransportWriteError: For any network/authorization error
        """
        ...
