"""
Human-readable output formatting.

Centralizes all CLI output so commands stay thin. Summaries go to stdout,
errors to stderr.
"""
from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from ..errors import BlobEditError
from ..workflow import EditResult

_console = Console(highlight=False)
_err_console = Console(stderr=True, highlight=False)


def print_edit_summary(result: EditResult) -> None:
    """
    Print the outcome of an edit session.

    Args:
        result: Result returned by the workflow
    """
    uri = escape(result.ref.uri)
    if result.changed:
        _console.print(
            f"[bold green]Updated[/] {uri} "
            f"({_format_bytes(result.bytes_fetched)} -> {_format_bytes(result.bytes_stored)})",
            soft_wrap=True,
        )
    else:
        _console.print(f"[bold]No changes[/] to {uri}", soft_wrap=True)


def print_error(exc: BaseException) -> None:
    """Print a failure with the stage it happened in."""
    if isinstance(exc, BlobEditError):
        message = str(exc)
    else:
        message = f"{type(exc).__name__}: {exc}"
    _err_console.print(f"[bold red]Error:[/] {escape(message)}", soft_wrap=True)


def _format_bytes(size: int) -> str:
    """Format byte count in human-readable form."""
    for unit in ["B", "KB", "MB", "GB"]:
        if size < 1024:
            return f"{size:.1f} {unit}" if unit != "B" else f"{size} {unit}"
        size /= 1024
    return f"{size:.1f} TB"
