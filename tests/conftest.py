"""Root pytest configuration for blobedit tests."""
import pytest

from blobedit.settings import Settings
from .storage.fakes.fake_transport import FakeObjectTransport

_ENV_VARS = (
    "BLOBEDIT_EDITOR",
    "BLOBEDIT_SCRATCH_DIR",
    "BLOBEDIT_TIMEOUT",
    "BLOBEDIT_LOG_LEVEL",
    "BLOBEDIT_S3_ENDPOINT",
    "BLOBEDIT_AZURE_BLOB_ENDPOINT",
    "AWS_PROFILE",
    "AWS_REGION",
    "AWS_DEFAULT_REGION",
    "AZURE_STORAGE_CONNECTION_STRING",
    "AZURE_STORAGE_ACCOUNT",
    "AZURE_STORAGE_KEY",
)


@pytest.fixture(autouse=True)
def test_env(monkeypatch):
    """Start every test from an environment without blobedit/cloud settings."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def scratch_dir(tmp_path):
    """Empty directory that receives scratch files, for leak checks."""
    path = tmp_path / "scratch"
    path.mkdir()
    return path


@pytest.fixture
def settings(scratch_dir):
    """Standard test settings."""
    return Settings(editor="nvim", scratch_dir=str(scratch_dir))


@pytest.fixture
def transport():
    """Fake transport seeded with s3://bucket1/dir/file.txt = b"hello"."""
    fake = FakeObjectTransport()
    fake.seed("bucket1", "dir/file.txt", b"hello")
    return fake
