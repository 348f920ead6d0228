"""
URI parsing utilities for remote objects.

Turns the location given on the command line into a structured reference
(scheme, container, key, extension hint) shared by the transports and the
scratch file manager.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from ..errors import MissingContainerError, MissingSchemeError

__all__ = ["RemoteRef", "SUPPORTED_SCHEMES", "MAX_EXTENSION_LENGTH", "parse_remote_uri", "extension_of"]

Scheme = Literal["s3", "az"]

SUPPORTED_SCHEMES: tuple[str, ...] = ("s3", "az")

# Longer extensions are dropped so the scratch file name stays under NAME_MAX.
MAX_EXTENSION_LENGTH = 32


@dataclass(frozen=True)
class RemoteRef:
    """
    Parsed components of a remote object location.

    Attributes:
        scheme: Storage provider scheme (s3, az)
        container: Bucket/container name, never empty
        key: Object key within the container; may be empty or contain "/"
        extension: File extension hint used only to name the scratch file
        original: Original location string for error messages
    """
    scheme: Scheme
    container: str
    key: str
    extension: Optional[str]
    original: str

    @property
    def uri(self) -> str:
        """Canonical ``scheme://container/key`` form."""
        return f"{self.scheme}://{self.container}/{self.key}"


def extension_of(key: str) -> Optional[str]:
    """
    Return the extension of the key's final path segment.

    Only the last segment is considered, so "a.b/c" has no extension.
    A trailing dot ("notes.") also yields None, and so does an extension
    longer than MAX_EXTENSION_LENGTH characters.

    Examples:
        >>> extension_of("dir/file.txt")
        'txt'

        >>> extension_of("archive.tar.gz")
        'gz'

        >>> extension_of("a.b/c") is None
        True
    """
    name = key.rsplit("/", 1)[-1]
    if "." not in name:
        return None
    ext = name.rsplit(".", 1)[1]
    if len(ext) > MAX_EXTENSION_LENGTH:
        return None
    return ext or None


def parse_remote_uri(uri: str) -> RemoteRef:
    """
    Parse a remote object location.

    Accepts locations in the form: {s3|az}://container[/key]

    The key is everything after the first "/" following the container and
    may be empty, in which case the transports will reject it. No other
    validation of the key is done.

    Args:
        uri: Location string from the command line

    Returns:
        RemoteRef with parsed components

    Raises:
        MissingSchemeError: If uri does not start with a supported scheme
        MissingContainerError: If the container segment is empty

    Examples:
        >>> parse_remote_uri("s3://mybucket/dir/file.txt")
        RemoteRef(scheme='s3', container='mybucket', key='dir/file.txt', extension='txt', original='...')

        >>> parse_remote_uri("az://mycontainer")
        RemoteRef(scheme='az', container='mycontainer', key='', extension=None, original='...')
    """
    scheme = next(
        (s for s in SUPPORTED_SCHEMES if uri.startswith(f"{s}://")),
        None,
    )
    if scheme is None:
        expected = ", ".join(f"{s}://" for s in SUPPORTED_SCHEMES)
        raise MissingSchemeError(f"missing scheme prefix (expected one of {expected}): {uri!r}")

    remainder = uri[len(scheme) + 3:]
    container, _, key = remainder.partition("/")

    if not container:
        raise MissingContainerError(f"missing bucket/container name: {uri!r}")

    return RemoteRef(
        scheme=scheme,  # type: ignore  # checked against SUPPORTED_SCHEMES
        container=container,
        key=key,
        extension=extension_of(key),
        original=uri,
    )
