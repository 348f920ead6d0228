"""
CLI Context for managing application dependencies.

Provides a clean way to manage CLI-level dependencies (settings and the
operations facade), avoiding global state and enabling dependency injection.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .editor import SubprocessEditor
from .operations import Operations
from .settings import Settings, create_settings_from_env
from .storage.object_store import transport_for


@dataclass
class CLIContext:
    """
    Shared context for CLI commands.

    Settings are loaded once per invocation; the operations facade is created
    lazily on first access.
    """
    settings: Settings
    _operations: Optional[Operations] = None

    @classmethod
    def from_env(cls) -> CLIContext:
        """
        Create CLI context from environment variables.

        Returns:
            CLIContext with settings loaded from environment
        """
        return cls(settings=create_settings_from_env())

    @property
    def operations(self) -> Operations:
        """Get or create the operations facade."""
        if self._operations is None:
            self._operations = Operations(
                self.settings,
                transport_factory=transport_for,
                editor=SubprocessEditor(self.settings.editor),
            )
        return self._operations
