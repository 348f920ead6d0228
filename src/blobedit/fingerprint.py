"""
Content fingerprints for change detection.

A fingerprint is only ever compared for equality against another fingerprint
of the same object, so a fast digest is enough. MD5 is used with
``usedforsecurity=False``; it is not a security control.
"""
from __future__ import annotations

import hashlib
from dataclasses import dataclass

__all__ = ["ContentFingerprint", "Fingerprinter", "fingerprint", "fingerprints_equal", "ALGORITHM"]

ALGORITHM = "md5"


@dataclass(frozen=True)
class ContentFingerprint:
    """Digest of a byte sequence, compared by value."""
    algorithm: str
    digest: bytes

    @property
    def hexdigest(self) -> str:
        return self.digest.hex()

    def __str__(self) -> str:
        return f"{self.algorithm}:{self.hexdigest}"


class Fingerprinter:
    """
    Incremental fingerprint over a stream of chunks.

    Chunks must be fed in delivery order; the result is independent of how
    the content was split into chunks.
    """

    def __init__(self) -> None:
        self._hash = hashlib.new(ALGORITHM, usedforsecurity=False)
        self.size = 0

    def update(self, chunk: bytes) -> None:
        self._hash.update(chunk)
        self.size += len(chunk)

    def finalize(self) -> ContentFingerprint:
        return ContentFingerprint(algorithm=ALGORITHM, digest=self._hash.digest())


def fingerprint(data: bytes) -> ContentFingerprint:
    """Fingerprint a complete byte sequence."""
    fp = Fingerprinter()
    fp.update(data)
    return fp.finalize()


def fingerprints_equal(a: ContentFingerprint, b: ContentFingerprint) -> bool:
    return a == b
