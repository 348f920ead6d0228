"""
Edit workflow for a single remote object.

Sequences one session: fetch the object into a scratch file while
fingerprinting it, run the editor, re-read and fingerprint the result, and
write it back only when the content changed.

    Resolved -> Fetched -> Edited -> Decided -> WrittenBack | Skipped

Any stage may fail with a BlobEditError, which ends the session. The scratch
file is released on every path, and the remote object is only ever touched
by the single store() call in the WrittenBack transition.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .editor import Editor
from .fingerprint import ContentFingerprint, Fingerprinter, fingerprint, fingerprints_equal
from .scratch import scratch_file
from .storage.base import ObjectTransport
from .storage.uri import RemoteRef

__all__ = ["EditOutcome", "EditResult", "edit_object"]

logger = logging.getLogger(__name__)


class EditOutcome(str, Enum):
    WRITTEN_BACK = "written_back"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class EditResult:
    """
    Result of a completed edit session.

    Attributes:
        ref: The edited object
        outcome: Whether new content was written back
        bytes_fetched: Size of the original content
        bytes_stored: Size of the content written back (0 when skipped)
        before: Fingerprint of the fetched content
        after: Fingerprint of the content after editing
    """
    ref: RemoteRef
    outcome: EditOutcome
    bytes_fetched: int
    bytes_stored: int
    before: ContentFingerprint
    after: ContentFingerprint

    @property
    def changed(self) -> bool:
        return self.outcome is EditOutcome.WRITTEN_BACK


def edit_object(
    ref: RemoteRef,
    *,
    transport: ObjectTransport,
    editor: Editor,
    scratch_dir: Optional[str] = None,
) -> EditResult:
    """
    Run one fetch-edit-writeback session.

    Args:
        ref: Object to edit
        transport: Transport used to fetch and store the object
        editor: Editor session runner
        scratch_dir: Directory for the scratch file (None = system temp dir)

    Returns:
        EditResult describing what happened

    Raises:
        ScratchFileError: If the local working copy cannot be created or read
        TransportFetchError: If the object cannot be fetched
        EditorSpawnError: If the editor cannot be started
        EditorExitError: If the editor exits unsuccessfully
        TransportWriteError: If the changed content cannot be written back
    """
    with scratch_file(ref.extension, directory=scratch_dir) as scratch:
        before_fp = Fingerprinter()
        for chunk in transport.fetch(ref):
            before_fp.update(chunk)
            scratch.write(chunk)
        scratch.flush()
        before = before_fp.finalize()
        logger.debug(f"fetched {ref.uri}: {before_fp.size} bytes written, checksum {before}")

        editor.run(str(scratch.path))

        new_contents = scratch.read_contents()
        after = fingerprint(new_contents)
        logger.debug(f"computed new checksum {after}")

        if fingerprints_equal(before, after):
            logger.info(f"{ref.uri} not changed, skipping write back")
            return EditResult(
                ref=ref,
                outcome=EditOutcome.SKIPPED,
                bytes_fetched=before_fp.size,
                bytes_stored=0,
                before=before,
                after=after,
            )

        logger.debug(f"new file contents for {ref.uri}: {len(new_contents)} bytes")
        transport.store(ref, new_contents)
        logger.info(f"wrote {len(new_contents)} bytes back to {ref.uri}")

        return EditResult(
            ref=ref,
            outcome=EditOutcome.WRITTEN_BACK,
            bytes_fetched=before_fp.size,
            bytes_stored=len(new_contents),
            before=before,
            after=after,
        )
