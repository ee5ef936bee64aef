"""Shared pytest fixtures for grit tests."""

import pytest
import tempfile
import shutil
from pathlib import Path
from grit.core.repository import Repository
from grit.core.objects import GitObject


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    return Repository.init(temp_dir)


@pytest.fixture
def sample_blob(repo):
    """Create a sample blob owned by the repository."""
    return GitObject.blob(b"Hello, World!\n", repo)


@pytest.fixture
def in_dir(monkeypatch):
    """Return a helper that changes the working directory for one test."""
    def _chdir(path):
        monkeypatch.chdir(path)
        return path
    return _chdir
