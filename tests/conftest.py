"""Shared pytest fixtures for sha1py tests."""

import hashlib
import logging
import os
import pytest
import structlog
import tempfile
import shutil
from pathlib import Path

from sha1py.core.config import Config
from sha1py.core.logs import PACKAGE_LOGGER


def known_good_hash(data):
    """Reference digest as five 32-bit words, from hashlib."""
    raw = hashlib.sha1(data).digest()
    return tuple(int.from_bytes(raw[i:i + 4], 'big') for i in range(0, 20, 4))


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def isolated_config(temp_dir, monkeypatch):
    """
    Run inside temp_dir with the global config redirected there too.

    Also clears SHA1PY_* environment overrides so tests see only
    what they write.
    """
    home = temp_dir / 'home'
    home.mkdir()
    monkeypatch.setattr(Config, 'GLOBAL_CONFIG_PATH', home / '.sha1pyconfig')
    for key in list(os.environ):
        if key.startswith('SHA1PY_'):
            monkeypatch.delenv(key)
    monkeypatch.chdir(temp_dir)
    return temp_dir


@pytest.fixture
def working_files(isolated_config):
    """Create sample files in the working directory."""
    file1 = isolated_config / "test1.txt"
    file2 = isolated_config / "test2.bin"
    (isolated_config / "subdir").mkdir()
    file3 = isolated_config / "subdir" / "test3.txt"

    file1.write_bytes(b"Content 1")
    file2.write_bytes(bytes(range(256)) * 5)
    file3.write_bytes(b"")

    return {
        'file1': file1,
        'file2': file2,
        'file3': file3,
    }


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging configuration done by CLI invocations."""
    yield
    structlog.reset_defaults()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
