"""
Error mapping and CLI utilities.

Provides centralized exception-to-exit-code mapping and a CLI command wrapper
so every failure is reported with its stage and a stable exit code.
"""
from __future__ import annotations

import logging
from typing import Callable, TypeVar

import typer

T = TypeVar('T')

logger = logging.getLogger(__name__)

# Looked up along the exception's MRO, so subclasses inherit their parent's code
EXIT_CODES = {
    "AddressParseError": 2,
    "ValueError": 2,
    "TransportFetchError": 3,
    "ScratchFileError": 4,
    "EditorSpawnError": 5,
    "EditorExitError": 6,
    "TransportWriteError": 7,
}

FALLBACK_EXIT_CODE = 1


def exit_code_for(exc: BaseException) -> int:
    """
    Map exception to standardized exit code.

    Returns:
    - 2: Invalid location (AddressParseError) or configuration (ValueError)
    - 3: Fetch failure (TransportFetchError, ObjectNotFoundError)
    - 4: Local scratch file failure (ScratchFileError)
    - 5: Editor could not be started (EditorSpawnError)
    - 6: Editor exited unsuccessfully (EditorExitError)
    - 7: Write back failure (TransportWriteError)
    - 1: Anything else

    Args:
        exc: Exception to map

    Returns:
        Exit code
    """
    for cls in type(exc).__mro__:
        code = EXIT_CODES.get(cls.__name__)
        if code is not None:
            return code
    return FALLBACK_EXIT_CODE


def run_and_exit(func: Callable[[], T]) -> T:
    """
    Unified error wrapper for CLI commands.

    Executes the given function; any exception is printed to stderr and
    mapped to an exit code via typer.Exit.

    Args:
        func: Function to execute

    Returns:
        Function result if successful

    Raises:
        typer.Exit: With appropriate exit code if function raises exception
    """
    try:
        return func()
    except Exception as e:
        from .printers import print_error
        logger.debug("command failed", exc_info=True)
        print_error(e)
        raise typer.Exit(code=exit_code_for(e)) from e
