"""
blobedit CLI

Single verb: edit a remote object in the configured editor.

    blobedit s3://bucket/dir/file.txt
    blobedit az://container/config.yaml
"""
from __future__ import annotations

import logging

import typer

from .cli_context import CLIContext
from .operations import run_and_exit
from .operations.printers import print_edit_summary

app = typer.Typer(name="blobedit", help="Edit a remote blob store object in a local editor")

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(level: int) -> None:
    """Configure root logging once per process."""
    logging.basicConfig(level=level, format=_LOG_FORMAT)
    logging.getLogger().setLevel(level)


@app.command()
def edit(
    location: str = typer.Argument(..., help="Object location: s3://bucket/key or az://container/blob"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Fetch an object, open it in the editor, and write it back if changed."""

    def _edit() -> None:
        context = CLIContext.from_env()
        _configure_logging(logging.DEBUG if verbose else context.settings.log_level_value)

        result = context.operations.edit(location)
        print_edit_summary(result)

    run_and_exit(_edit)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
