"""
Tests for scratch file lifecycle.

Every test checks the scratch directory afterwards: nothing may be left behind.
"""
from __future__ import annotations

import os

import pytest

from blobedit.errors import ScratchFileError
from blobedit.scratch import SCRATCH_PREFIX, ScratchFile, scratch_file


class TestScratchFile:

    def test_create_with_extension(self, scratch_dir):
        scratch = ScratchFile.create("txt", directory=str(scratch_dir))
        try:
            assert scratch.path.parent == scratch_dir
            assert scratch.path.name.startswith(SCRATCH_PREFIX)
            assert scratch.path.name.endswith(".txt")
            assert scratch.path.exists()
        finally:
            scratch.release()
        assert list(scratch_dir.iterdir()) == []

    def test_create_without_extension(self, scratch_dir):
        with scratch_file(None, directory=str(scratch_dir)) as scratch:
            assert "." not in scratch.path.name

    def test_names_are_unique(self, scratch_dir):
        with scratch_file("txt", directory=str(scratch_dir)) as a, \
                scratch_file("txt", directory=str(scratch_dir)) as b:
            assert a.path != b.path
            assert len(list(scratch_dir.iterdir())) == 2
        assert list(scratch_dir.iterdir()) == []

    def test_write_flush_read(self, scratch_dir):
        with scratch_file("md", directory=str(scratch_dir)) as scratch:
            scratch.write(b"hel")
            scratch.write(b"lo")
            scratch.flush()
            assert scratch.path.read_bytes() == b"hello"
            assert scratch.read_contents() == b"hello"

    def test_read_after_rename_save(self, scratch_dir):
        """Content saved by replacing the file is still read back."""
        with scratch_file("txt", directory=str(scratch_dir)) as scratch:
            scratch.write(b"old")
            scratch.flush()

            tmp = scratch_dir / "swap"
            tmp.write_bytes(b"new content")
            os.replace(tmp, scratch.path)

            assert scratch.read_contents() == b"new content"
        assert list(scratch_dir.iterdir()) == []

    def test_released_on_exception(self, scratch_dir):
        with pytest.raises(RuntimeError):
            with scratch_file("txt", directory=str(scratch_dir)) as scratch:
                scratch.write(b"data")
                raise RuntimeError("boom")
        assert scratch.released
        assert list(scratch_dir.iterdir()) == []

    def test_release_is_idempotent(self, scratch_dir):
        scratch = ScratchFile.create(directory=str(scratch_dir))
        scratch.release()
        scratch.release()
        assert scratch.released
        assert not scratch.path.exists()

    def test_release_when_file_already_removed(self, scratch_dir):
        scratch = ScratchFile.create(directory=str(scratch_dir))
        scratch.path.unlink()
        scratch.release()
        assert scratch.released

    def test_use_after_release_raises(self, scratch_dir):
        scratch = ScratchFile.create(directory=str(scratch_dir))
        scratch.release()
        with pytest.raises(ScratchFileError, match="already released"):
            scratch.write(b"x")

    def test_read_missing_file_raises(self, scratch_dir):
        with scratch_file(directory=str(scratch_dir)) as scratch:
            scratch.path.unlink()
            with pytest.raises(ScratchFileError, match="reading edited file"):
                scratch.read_contents()

    def test_create_in_missing_directory(self, tmp_path):
        with pytest.raises(ScratchFileError, match="creating temporary file") as exc_info:
            ScratchFile.create("txt", directory=str(tmp_path / "does-not-exist"))
        assert isinstance(exc_info.value.__cause__, OSError)
