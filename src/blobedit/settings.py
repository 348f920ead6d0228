"""
Settings and configuration for blobedit.

Centralizes configuration values and provides validation with fail-fast behavior.
Settings are loaded from the environment once by the CLI and handed to the
transports explicitly, so adapters never read the environment themselves.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

__all__ = ["Settings", "DEFAULT_EDITOR", "create_settings_from_env"]

DEFAULT_EDITOR = "nvim"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """
    Configuration settings for an edit session.

    Session Settings:
        editor: Editor program (optionally with leading arguments)
        scratch_dir: Directory for scratch files (None = system temp dir)
        timeout_s: Connect/read timeout for blob store requests
        log_level: Root log level when not running with --verbose

    S3 Settings:
        aws_profile: Named AWS profile to load credentials from
        aws_region: AWS region for the S3 client
        s3_endpoint_url: Custom S3 endpoint (MinIO, LocalStack)

    Azure Blob Settings:
        az_connection_string: Azure storage connection string
        az_account: Azure storage account name
        az_key: Azure storage account key
        az_blob_endpoint: Custom Azure blob endpoint (for Azurite/private endpoints)
    """
    editor: str = DEFAULT_EDITOR
    scratch_dir: Optional[str] = None
    timeout_s: float = 60.0
    log_level: str = "WARNING"

    # S3
    aws_profile: Optional[str] = None
    aws_region: Optional[str] = None
    s3_endpoint_url: Optional[str] = None

    # Azure Blob
    az_connection_string: Optional[str] = None
    az_account: Optional[str] = None
    az_key: Optional[str] = None
    az_blob_endpoint: Optional[str] = None

    def __post_init__(self):
        """Validate settings on construction."""
        if not self.editor or not self.editor.strip():
            raise ValueError("editor is required")

        if self.timeout_s <= 0:
            raise ValueError(f"timeout_s must be positive, got {self.timeout_s}")

        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {self.log_level}. Use one of {', '.join(_LOG_LEVELS)}")

        # Azure auth: connection string OR (account + key), never both
        has_conn_str = bool(self.az_connection_string)
        has_account_key = bool(self.az_account and self.az_key)

        if has_conn_str and has_account_key:
            raise ValueError("Specify either az_connection_string OR (az_account + az_key), not both")

        # Azure auth is optional (S3-only users), but if partially configured it must be complete
        if self.az_account and not self.az_key:
            raise ValueError("az_account specified but az_key is missing")
        if self.az_key and not self.az_account:
            raise ValueError("az_key specified but az_account is missing")

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for ``logging.basicConfig``."""
        return getattr(logging, self.log_level.upper())


def create_settings_from_env() -> Settings:
    """
    Load settings from environment variables.

    Environment Variables:
        Session:
        - BLOBEDIT_EDITOR (default: nvim)
        - BLOBEDIT_SCRATCH_DIR (optional)
        - BLOBEDIT_TIMEOUT (default: 60.0)
        - BLOBEDIT_LOG_LEVEL (default: WARNING)

        S3:
        - AWS_PROFILE (optional)
        - AWS_REGION or AWS_DEFAULT_REGION (optional)
        - BLOBEDIT_S3_ENDPOINT (optional, for MinIO/LocalStack)

        Azure Blob:
        - AZURE_STORAGE_CONNECTION_STRING (optional)
        - AZURE_STORAGE_ACCOUNT (optional)
        - AZURE_STORAGE_KEY (optional)
        - BLOBEDIT_AZURE_BLOB_ENDPOINT (optional, for Azurite/custom endpoints)

    Returns:
        Settings object with validated configuration

    Raises:
        ValueError: If configuration is invalid

    Note:
        Creates a fresh Settings instance every time (no caching).
    """
    def get_float(key: str, default: float) -> float:
        value = os.getenv(key)
        if not value:
            return default
        try:
            return float(value)
        except ValueError:
            raise ValueError(f"{key} must be a number, got {value!r}") from None

    return Settings(
        editor=os.getenv("BLOBEDIT_EDITOR") or DEFAULT_EDITOR,
        scratch_dir=os.getenv("BLOBEDIT_SCRATCH_DIR") or None,
        timeout_s=get_float("BLOBEDIT_TIMEOUT", 60.0),
        log_level=os.getenv("BLOBEDIT_LOG_LEVEL") or "WARNING",
        aws_profile=os.getenv("AWS_PROFILE") or None,
        aws_region=os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION") or None,
        s3_endpoint_url=os.getenv("BLOBEDIT_S3_ENDPOINT") or None,
        az_connection_string=os.getenv("AZURE_STORAGE_CONNECTION_STRING") or None,
        az_account=os.getenv("AZURE_STORAGE_ACCOUNT") or None,
        az_key=os.getenv("AZURE_STORAGE_KEY") or None,
        az_blob_endpoint=os.getenv("BLOBEDIT_AZURE_BLOB_ENDPOINT") or None,
    )
