"""
Operations Facade - Application service layer.

Provides a clean interface between the CLI and the edit workflow, owning
address resolution, transport construction and editor injection while
keeping CLI commands thin and testable.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from ..editor import Editor, SubprocessEditor
from ..settings import Settings
from ..storage.base import ObjectTransport
from ..storage.object_store import transport_for
from ..storage.uri import RemoteRef, parse_remote_uri
from ..workflow import EditResult, edit_object

logger = logging.getLogger(__name__)

TransportFactory = Callable[[RemoteRef, Settings], ObjectTransport]


class Operations:
    """
    Application service facade for CLI operations.

    Design Notes: Operations Facade

    - Resolution happens before anything else, so a malformed location
      never constructs a transport or touches the network
    - The transport factory and editor are injected (fakes in tests)
    - Exceptions bubble up for central mapping in ``run_and_exit``
    """

    def __init__(self, settings: Settings, *,
                 transport_factory: TransportFactory = transport_for,
                 editor: Optional[Editor] = None):
        """
        Initialize Operations facade.

        Args:
            settings: Session settings
            transport_factory: Builds the transport for a resolved reference
            editor: Editor session runner (default: SubprocessEditor(settings.editor))
        """
        self.settings = settings
        self.transport_factory = transport_factory
        self.editor = editor if editor is not None else SubprocessEditor(settings.editor)

    def resolve(self, location: str) -> RemoteRef:
        """
        Resolve a location string without side effects.

        Raises:
            AddressParseError: If the location is malformed
        """
        ref = parse_remote_uri(location)
        logger.debug(f"extracted object information: {ref}")
        return ref

    def edit(self, location: str) -> EditResult:
        """
        Edit the remote object at ``location``.

        Args:
            location: scheme://container/key string

        Returns:
            EditResult of the session
        """
        ref = self.resolve(location)
        transport = self.transport_factory(ref, self.settings)
        return edit_object(
            ref,
            transport=transport,
            editor=self.editor,
            scratch_dir=self.settings.scratch_dir,
        )
