"""Shared pytest fixtures for Yo tests."""

import itertools
import pytest
import tempfile
import shutil
from datetime import datetime, timedelta, timezone
from pathlib import Path
from yo.core.repository import Repository


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    repo = Repository(str(temp_dir))
    repo.init()
    return repo


@pytest.fixture
def working_files(repo):
    """Create sample files in the repository root."""
    files = {
        'a.txt': b'hello',
        'b.txt': b'world',
        'c.txt': b'third file\n',
    }
    for name, content in files.items():
        (repo.work_tree / name).write_bytes(content)
    return files


@pytest.fixture
def clock():
    """
    Factory for fake clocks.

    Each clock returns a UTC datetime one second later than the last,
    starting at 2024-01-01 12:00:00.
    """
    def make_clock(start=datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)):
        moments = (start + timedelta(seconds=i) for i in itertools.count())
        return lambda: next(moments)
    return make_clock
