"""
Test error mapping and CLI exit code functionality.

Validates that exceptions are correctly mapped to exit codes and that
the run_and_exit wrapper reports errors for CLI commands.
"""
from __future__ import annotations

import pytest
import typer

from blobedit.errors import (
    EditorExitError,
    EditorSpawnError,
    MissingContainerError,
    MissingSchemeError,
    ObjectNotFoundError,
    ScratchFileError,
    TransportFetchError,
    TransportWriteError,
)
from blobedit.operations.mappers import EXIT_CODES, FALLBACK_EXIT_CODE, exit_code_for, run_and_exit


class TestExitCodeMapping:

    @pytest.mark.parametrize("exc,code", [
        (MissingSchemeError("x"), 2),
        (MissingContainerError("x"), 2),
        (ValueError("bad config"), 2),
        (TransportFetchError("x"), 3),
        (ObjectNotFoundError("x"), 3),
        (ScratchFileError("x"), 4),
        (EditorSpawnError("x"), 5),
        (EditorExitError("x", returncode=1), 6),
        (TransportWriteError("x"), 7),
    ])
    def test_known_exceptions(self, exc, code):
        assert exit_code_for(exc) == code

    def test_unknown_exception_maps_to_fallback(self):
        assert exit_code_for(RuntimeError("test")) == FALLBACK_EXIT_CODE == 1
        assert exit_code_for(KeyError("test")) == 1

    def test_every_failure_is_non_zero(self):
        assert all(code != 0 for code in EXIT_CODES.values())
        assert FALLBACK_EXIT_CODE != 0

    def test_stages_have_distinct_codes(self):
        stage_errors = ["TransportFetchError", "ScratchFileError", "EditorSpawnError",
                        "EditorExitError", "TransportWriteError", "AddressParseError"]
        codes = [EXIT_CODES[name] for name in stage_errors]
        assert len(set(codes)) == len(codes)


class TestRunAndExit:

    def test_returns_result_on_success(self):
        assert run_and_exit(lambda: 42) == 42

    def test_maps_exception_to_exit(self, capsys):
        def boom():
            raise TransportWriteError("putting file contents back to s3://b/k: AccessDenied")

        with pytest.raises(typer.Exit) as exc_info:
            run_and_exit(boom)

        assert exc_info.value.exit_code == 7
        err = capsys.readouterr().err
        assert "[writeback]" in err
        assert "AccessDenied" in err

    def test_reports_unexpected_errors_with_type(self, capsys):
        def boom():
            raise RuntimeError("unexpected")

        with pytest.raises(typer.Exit) as exc_info:
            run_and_exit(boom)

        assert exc_info.value.exit_code == 1
        assert "RuntimeError: unexpected" in capsys.readouterr().err
