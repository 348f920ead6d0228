"""
Editor session runner.

Launches the interactive editor on the scratch file and blocks until it
exits. The editor inherits the terminal (stdin/stdout/stderr) so the user
interacts with it directly. No timeout is applied.
"""
from __future__ import annotations

import logging
import shlex
import subprocess
from typing import List, Protocol, runtime_checkable

from .errors import EditorExitError, EditorSpawnError
from .settings import DEFAULT_EDITOR

__all__ = ["Editor", "SubprocessEditor"]

logger = logging.getLogger(__name__)


@runtime_checkable
class Editor(Protocol):
    """Protocol for an interactive editing session on a local file."""

    def run(self, path: str) -> None:
        """
        Edit the file at ``path`` and return once the session is over.

        Raises:
            EditorSpawnError: If the editor could not be started
            EditorExitError: If the editor exited unsuccessfully
        """
        ...


class SubprocessEditor(Editor):
    """
    Runs a fixed external editor program as a child process.

    ``command`` is split with shlex, so it may carry leading arguments
    ("nvim -u NONE"); the file path is always appended last.
    """

    def __init__(self, command: str = DEFAULT_EDITOR) -> None:
        self.command = command

    def argv(self, path: str) -> List[str]:
        try:
            parts = shlex.split(self.command)
        except ValueError as e:
            raise EditorSpawnError(f"invalid editor command {self.command!r}: {e}") from e
        if not parts:
            raise EditorSpawnError("editor command is empty")
        return [*parts, path]

    def run(self, path: str) -> None:
        argv = self.argv(path)
        logger.debug(f"spawning editor: {argv}")

        try:
            proc = subprocess.Popen(argv)
        except OSError as e:
            raise EditorSpawnError(f"spawning editor {argv[0]!r}: {e}") from e

        returncode = proc.wait()
        logger.debug(f"editor exited with status {returncode}")

        if returncode < 0:
            raise EditorExitError(f"editor killed by signal {-returncode}", returncode=returncode)
        if returncode != 0:
            raise EditorExitError(f"editor exited unsuccessfully (status {returncode})", returncode=returncode)
