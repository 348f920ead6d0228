"""
Tests for the subprocess editor runner.

A small Python program stands in for the interactive editor.
"""
from __future__ import annotations

import shlex
import sys

import pytest

from blobedit.editor import Editor, SubprocessEditor
from blobedit.errors import EditorExitError, EditorSpawnError


def python_editor(code: str) -> str:
    """Editor command that runs ``code`` with the file path in sys.argv[1]."""
    return f"{shlex.quote(sys.executable)} -c {shlex.quote(code)}"


class TestSubprocessEditor:

    def test_is_editor(self):
        assert isinstance(SubprocessEditor(), Editor)

    def test_default_command(self):
        assert SubprocessEditor().command == "nvim"

    def test_argv_appends_path_last(self):
        editor = SubprocessEditor("nvim -u NONE")
        assert editor.argv("/tmp/file.txt") == ["nvim", "-u", "NONE", "/tmp/file.txt"]

    def test_edits_file(self, tmp_path):
        target = tmp_path / "file.txt"
        target.write_bytes(b"hello")
        editor = SubprocessEditor(python_editor(
            "import sys; p = sys.argv[1]; open(p, 'ab').write(b' world')"
        ))

        editor.run(str(target))

        assert target.read_bytes() == b"hello world"

    def test_non_zero_exit(self, tmp_path):
        editor = SubprocessEditor(python_editor("import sys; sys.exit(3)"))

        with pytest.raises(EditorExitError, match="status 3") as exc_info:
            editor.run(str(tmp_path / "file.txt"))
        assert exc_info.value.returncode == 3

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals")
    def test_killed_by_signal(self, tmp_path):
        editor = SubprocessEditor(python_editor("import os, signal; os.kill(os.getpid(), signal.SIGTERM)"))

        with pytest.raises(EditorExitError, match="killed by signal") as exc_info:
            editor.run(str(tmp_path / "file.txt"))
        assert exc_info.value.returncode < 0

    def test_program_not_found(self, tmp_path):
        editor = SubprocessEditor("blobedit-no-such-editor-program")

        with pytest.raises(EditorSpawnError, match="spawning editor") as exc_info:
            editor.run(str(tmp_path / "file.txt"))
        assert isinstance(exc_info.value.__cause__, OSError)

    @pytest.mark.parametrize("command", ["", "   ", "'unterminated"])
    def test_invalid_command(self, command, tmp_path):
        with pytest.raises(EditorSpawnError):
            SubprocessEditor(command).run(str(tmp_path / "file.txt"))
