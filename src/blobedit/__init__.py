"""
blobedit: edit objects in S3 or Azure Blob Storage with a local editor.

The object is fetched into a scratch file, the editor runs on it, and the
content is written back only if it changed.
"""
from .errors import BlobEditError
from .settings import Settings, create_settings_from_env
from .storage.uri import RemoteRef, parse_remote_uri
from .workflow import EditOutcome, EditResult, edit_object

__version__ = "0.1.0"

__all__ = [
    "BlobEditError",
    "Settings",
    "create_settings_from_env",
    "RemoteRef",
    "parse_remote_uri",
    "EditOutcome",
    "EditResult",
    "edit_object",
]
