"""Remote object addressing and blob store transports."""
from .base import ObjectTransport
from .object_store import AzureBlobTransport, S3Transport, transport_for
from .uri import RemoteRef, parse_remote_uri

__all__ = [
    "ObjectTransport",
    "AzureBlobTransport",
    "S3Transport",
    "transport_for",
    "RemoteRef",
    "parse_remote_uri",
]
