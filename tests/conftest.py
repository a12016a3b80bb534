# File: tests/conftest.py

import pytest
import os
import sys
import tempfile
from pathlib import Path

import sqlalchemy
from sqlalchemy import text
from sqlalchemy_utils import database_exists, create_database

# 1. Add project root to path
sys.path.append(os.getcwd())

# 2. Point the catalog at a throwaway SQLite file before anything connects
TEST_DB_PATH = Path(tempfile.gettempdir()) / "hostfs_test_catalog.db"
os.environ["HOSTFS_CATALOG_URL"] = f"sqlite:///{TEST_DB_PATH}"

from hostfs.core.database.connection import engine as TEST_ENGINE
from hostfs.core.execution.context import ExecutionContext, reset_default_context
from hostfs.features.change_dir.data.working_directory import SessionWorkingDirectory
from hostfs.features.listing.data import enumerator as enumerator_module


@pytest.fixture(scope="session", autouse=True)
def global_setup():
    """
    Runs once per test session.
    Ensures the catalog database and its tables exist.
    """
    if not database_exists(TEST_ENGINE.url):
        create_database(TEST_ENGINE.url)

    # Import all models to ensure they are registered
    from hostfs.core.database.base import Base
    import hostfs.features.catalog.data.sql_models

    Base.metadata.create_all(bind=TEST_ENGINE)

    yield

    TEST_ENGINE.dispose()


@pytest.fixture(scope="function", autouse=True)
def clean_db(global_setup):
    """
    Runs before EVERY test. Empties every catalog table.
    """
    from hostfs.core.database.base import Base

    Base.metadata.create_all(bind=TEST_ENGINE)

    with TEST_ENGINE.connect() as conn:
        trans = conn.begin()
        table_names = sqlalchemy.inspect(conn).get_table_names()
        if table_names:
            conn.execute(text("PRAGMA foreign_keys = OFF;"))
            for table in table_names:
                conn.execute(text(f'DELETE FROM "{table}";'))
            conn.execute(text("PRAGMA foreign_keys = ON;"))
        trans.commit()

    yield


@pytest.fixture(autouse=True)
def fresh_default_context():
    """
    Every test starts without a shared context, so a cd made through the
    facades never leaks into the next test.
    """
    reset_default_context()
    yield
    reset_default_context()


@pytest.fixture
def sample_tree(tmp_path):
    """
    Creates:
    root/
      a.txt          (file, 5 bytes)
      sub/
        b.txt        (file)
      locked/        (made unreadable by the deny_access fixture)
        secret.txt
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_text("hello")

    sub = root / "sub"
    sub.mkdir()
    (sub / "b.txt").write_text("nested")

    locked = root / "locked"
    locked.mkdir()
    (locked / "secret.txt").write_text("classified")

    return root


class ScanSpy:
    """Wraps the directory scan: records every call, fails on denied paths."""

    def __init__(self, real_scan):
        self.real_scan = real_scan
        self.denied = set()
        self.scanned = []

    def deny(self, *paths):
        self.denied.update(os.path.realpath(p) for p in paths)

    def __call__(self, directory):
        resolved = os.path.realpath(directory)
        self.scanned.append(resolved)
        if resolved in self.denied:
            raise PermissionError(13, "Permission denied", str(directory))
        return self.real_scan(directory)


@pytest.fixture
def deny_access(monkeypatch):
    """
    Makes the enumerator's directory scan raise PermissionError for the
    given paths. Works even when the suite runs as root, where chmod
    cannot lock a directory.
    """
    spy = ScanSpy(enumerator_module._scan)
    monkeypatch.setattr(enumerator_module, "_scan", spy)
    return spy


@pytest.fixture
def context(tmp_path):
    """Execution context whose working directory starts at tmp_path."""
    return ExecutionContext(SessionWorkingDirectory(tmp_path))
