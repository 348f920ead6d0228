"""
Operations package - Application service layer between CLI and workflow.

This package provides the Operations facade that resolves locations and wires
transports and editors into the edit workflow, centralizes error mapping,
and handles output formatting while keeping CLI commands thin and testable.
"""
from .facade import Operations
from .mappers import exit_code_for, run_and_exit

__all__ = ["Operations", "exit_code_for", "run_and_exit"]
