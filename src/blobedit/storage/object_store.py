"""
Object store transports for remote objects.

Implements the ObjectTransport protocol for Amazon S3 (s3://) and Azure Blob
Storage (az://). Both transports read their configuration from an explicit
Settings object and are built with SDK retries disabled: every request is
attempted exactly once and failures surface to the caller.
"""
from __future__ import annotations

import logging
import re
from typing import Iterable, Iterator

from ..errors import ObjectNotFoundError, TransportFetchError, TransportWriteError
from ..settings import Settings
from .base import ObjectTransport
from .uri import RemoteRef

__all__ = ["AzureBlobTransport", "S3Transport", "transport_for", "CHUNK_SIZE"]

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024  # 1 MiB

# S3 error codes that mean "nothing there" rather than "request failed"
_S3_NOT_FOUND_CODES = {"NoSuchKey", "NoSuchBucket", "404", "NotFound"}


def _guarded_chunks(ref: RemoteRef, chunks: Iterable[bytes]) -> Iterator[bytes]:
    """
    Re-raise any SDK error raised while reading body chunks as TransportFetchError.

    Partial streams are never resumed or re-fetched.
    """
    stream = iter(chunks)
    while True:
        try:
            chunk = next(stream)
        except StopIteration:
            return
        except Exception as e:
            raise TransportFetchError(f"reading {ref.uri} failed mid-stream: {e}") from e
        yield chunk


class S3Transport(ObjectTransport):
    """
    ObjectTransport for Amazon S3 and S3-compatible stores.

    Uses boto3 with an optional named profile, region and custom endpoint
    (MinIO/LocalStack). Credentials come from the standard AWS chain.
    """

    def __init__(self, *, settings: Settings) -> None:
        self._settings = settings
        self._client = None

        if settings.s3_endpoint_url:
            logger.debug(f"S3 transport using custom endpoint: {settings.s3_endpoint_url}")
        if settings.aws_profile:
            logger.debug(f"S3 transport using profile {settings.aws_profile}")

    def _get_client(self):
        """Create the S3 client on first use."""
        if self._client is not None:
            return self._client

        try:
            import boto3
            from botocore.config import Config
        except ImportError:
            raise ImportError("boto3 package required for s3:// objects")

        session = boto3.session.Session(
            profile_name=self._settings.aws_profile,
            region_name=self._settings.aws_region,
        )
        self._client = session.client(
            "s3",
            endpoint_url=self._settings.s3_endpoint_url,
            config=Config(
                connect_timeout=self._settings.timeout_s,
                read_timeout=self._settings.timeout_s,
                retries={"mode": "standard", "total_max_attempts": 1},
            ),
        )
        return self._client

    def fetch(self, ref: RemoteRef) -> Iterator[bytes]:
        """
        Stream an S3 object.

        Args:
            ref: s3:// reference

        Returns:
            Iterator over body chunks of at most CHUNK_SIZE bytes

        Raises:
            ObjectNotFoundError: If the bucket or key does not exist
            TransportFetchError: For other S3/network errors
        """
        if not ref.key:
            raise TransportFetchError(f"cannot fetch {ref.original}: object key is empty")

        try:
            from botocore.exceptions import ClientError
        except ImportError:
            raise ImportError("boto3 package required for s3:// objects")

        try:
            response = self._get_client().get_object(Bucket=ref.container, Key=ref.key)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "")
            if code in _S3_NOT_FOUND_CODES:
                raise ObjectNotFoundError(f"object not found: {ref.uri}") from e
            raise TransportFetchError(f"fetching {ref.uri}: {e}") from e
        except ImportError:
            raise
        except Exception as e:
            raise TransportFetchError(f"fetching {ref.uri}: {e}") from e

        logger.debug(f"S3 get_object {ref.uri}: {response.get('ContentLength')} bytes announced")

        body = response["Body"]
        try:
            yield from _guarded_chunks(ref, body.iter_chunks(CHUNK_SIZE))
        finally:
            body.close()

    def store(self, ref: RemoteRef, data: bytes) -> None:
        """
        Upload ``data`` as the full content of an S3 object.

        Raises:
            TransportWriteError: For any S3/network error
        """
        if not ref.key:
            raise TransportWriteError(f"cannot store {ref.original}: object key is empty")

        try:
            self._get_client().put_object(Bucket=ref.container, Key=ref.key, Body=data)
        except ImportError:
            raise
        except Exception as e:
            raise TransportWriteError(f"putting file contents back to {ref.uri}: {e}") from e

        logger.debug(f"S3 put_object {ref.uri}: {len(data)} bytes")


class AzureBlobTransport(ObjectTransport):
    """
    ObjectTransport for Azure Blob Storage.

    Uses azure-storage-blob with connection string or account+key authentication.
    Supports custom endpoints for Azurite and private Azure clouds.
    """

    def __init__(self, *, settings: Settings) -> None:
        """
        Initialize Azure transport with settings.

        Args:
            settings: Settings containing Azure authentication and configuration

        Raises:
            ValueError: If Azure authentication is not properly configured
        """
        self._settings = settings
        self._service_client = None
        self._validate_azure_auth()

        if settings.az_connection_string:
            logger.debug("Azure transport using connection string auth")
        else:
            logger.debug(f"Azure transport using account+key auth for {settings.az_account}")
        if settings.az_blob_endpoint:
            logger.debug(f"Azure transport using custom endpoint: {settings.az_blob_endpoint}")

    def _validate_azure_auth(self) -> None:
        """Validate Azure authentication configuration."""
        has_conn_str = bool(self._settings.az_connection_string)
        has_account_key = bool(self._settings.az_account and self._settings.az_key)

        if not has_conn_str and not has_account_key:
            raise ValueError("Azure authentication not configured: need AZURE_STORAGE_CONNECTION_STRING or (AZURE_STORAGE_ACCOUNT + AZURE_STORAGE_KEY)")

    def _get_service_client(self):
        """
        Create the BlobServiceClient on first use.

        Connection patterns:

        1. Connection string: BlobServiceClient.from_connection_string()
        2. Connection string + custom endpoint: account name is taken from the
           connection string and the endpoint becomes {endpoint}/{account}
           (Azurite)
        3. Account+key: https://{account}.blob.core.windows.net
        4. Account+key + custom endpoint: {endpoint}/{account}

        Retries are disabled in every pattern.
        """
        if self._service_client is not None:
            return self._service_client

        try:
            from azure.storage.blob import BlobServiceClient
        except ImportError:
            raise ImportError("azure-storage-blob package required for az:// objects")

        options = dict(
            connection_timeout=self._settings.timeout_s,
            read_timeout=self._settings.timeout_s,
            retry_total=0,
        )
        endpoint = self._settings.az_blob_endpoint.rstrip("/") if self._settings.az_blob_endpoint else None

        if self._settings.az_connection_string:
            conn_str = self._settings.az_connection_string
            account_match = re.search(r"AccountName=([^;]+)", conn_str) if endpoint else None
            if account_match:
                account_key = re.search(r"AccountKey=([^;]+)", conn_str)
                credential = None
                if account_key:
                    credential = {"account_name": account_match.group(1), "account_key": account_key.group(1)}
                client = BlobServiceClient(
                    account_url=f"{endpoint}/{account_match.group(1)}",
                    credential=credential,
                    **options,
                )
            else:
                client = BlobServiceClient.from_connection_string(conn_str, **options)
        else:
            account = self._settings.az_account
            account_url = f"{endpoint}/{account}" if endpoint else f"https://{account}.blob.core.windows.net"
            client = BlobServiceClient(
                account_url=account_url,
                credential={"account_name": account, "account_key": self._settings.az_key},
                **options,
            )

        self._service_client = client
        return client

    def _get_blob_client(self, ref: RemoteRef):
        if ref.scheme != "az":
            raise ValueError(f"Expected az:// location, got {ref.original}")
        return self._get_service_client().get_blob_client(container=ref.container, blob=ref.key)

    def fetch(self, ref: RemoteRef) -> Iterator[bytes]:
        """
        Stream an Azure blob.

        Args:
            ref: az:// reference

        Returns:
            Iterator over downloaded chunks

        Raises:
            ObjectNotFoundError: If the container or blob does not exist
            TransportFetchError: For other Azure/network errors
        """
        if not ref.key:
            raise TransportFetchError(f"cannot fetch {ref.original}: blob name is empty")

        try:
            from azure.core.exceptions import ResourceNotFoundError
        except ImportError:
            raise ImportError("azure-storage-blob package required for az:// objects")

        try:
            downloader = self._get_blob_client(ref).download_blob()
        except ResourceNotFoundError as e:
            raise ObjectNotFoundError(f"blob not found: {ref.uri}") from e
        except ImportError:
            raise
        except Exception as e:
            raise TransportFetchError(f"fetching {ref.uri}: {e}") from e

        logger.debug(f"Azure download_blob {ref.uri}: {downloader.size} bytes announced")
        yield from _guarded_chunks(ref, downloader.chunks())

    def store(self, ref: RemoteRef, data: bytes) -> None:
        """
        Upload ``data`` as the full content of an Azure blob.

        Raises:
            TransportWriteError: For any Azure/network error
        """
        if not ref.key:
            raise TransportWriteError(f"cannot store {ref.original}: blob name is empty")

        try:
            self._get_blob_client(ref).upload_blob(data, overwrite=True)
        except ImportError:
            raise
        except Exception as e:
            raise TransportWriteError(f"putting file contents back to {ref.uri}: {e}") from e

        logger.debug(f"Azure upload_blob {ref.uri}: {len(data)} bytes")


def transport_for(ref: RemoteRef, settings: Settings) -> ObjectTransport:
    """
    Create the transport matching the reference's scheme.

    Args:
        ref: Parsed remote reference
        settings: Settings for transport configuration

    Returns:
        ObjectTransport for the scheme

    Raises:
        ValueError: For unsupported schemes or incomplete Azure auth
    """
    if ref.scheme == "s3":
        return S3Transport(settings=settings)
    elif ref.scheme == "az":
        return AzureBlobTransport(settings=settings)
    else:
        # parse_remote_uri only produces supported schemes
        raise ValueError(f"Unsupported URI scheme: {ref.scheme}")
