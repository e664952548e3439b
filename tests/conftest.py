from __future__ import annotations

import logging
import os
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

import autoclear.logging as autoclear_logging

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _reset_package_logger(monkeypatch: pytest.MonkeyPatch):
    # Handlers created by cli.main bind to the per-test captured stderr.
    monkeypatch.setattr(autoclear_logging, "_handler", None)
    package_logger = logging.getLogger("autoclear")
    yield
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def make_backup(tmp_path: Path, now: datetime):
    def _make(name: str, age: timedelta, directory: Path | None = None) -> Path:
        path = (directory or tmp_path) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(name)
        stamp = (now - age).timestamp()
        os.utime(path, (stamp, stamp))
        return path

    return _make


@pytest.fixture
def make_backup_dir(tmp_path: Path, now: datetime):
    def _make(name: str, age: timedelta, contents: tuple[str, ...] = ()) -> Path:
        path = tmp_path / name
        path.mkdir()
        for child in contents:
            (path / child).write_text(child)
        stamp = (now - age).timestamp()
        os.utime(path, (stamp, stamp))
        return path

    return _make
