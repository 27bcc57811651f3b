from __future__ import annotations

import logging
import os

import pytest

from nordpaths.identity import GroupRecord, StaticIdentityDirectory, UserRecord
from nordpaths.paths import Locator


@pytest.fixture
def restore_logging():
    """Undo configure_logging's changes to the root logger."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def home(tmp_path):
    path = tmp_path / "home" / "alice"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def identities(home) -> StaticIdentityDirectory:
    return StaticIdentityDirectory(
        users=[
            UserRecord(name="root", uid=0, gid=0, home="/root"),
            UserRecord(name="alice", uid=1000, gid=1000, home=str(home)),
            UserRecord(name="nohome", uid=1001, gid=1001, home=""),
        ],
        groups=[GroupRecord(name="nordvpn", gid=977)],
    )


@pytest.fixture
def runtime_dirs() -> set[str]:
    """Paths the fake existence check reports as present; tests add to it."""
    return set()


@pytest.fixture
def locator(identities, runtime_dirs) -> Locator:
    def exists(path: str) -> bool:
        if path.startswith("/run/user"):
            return path in runtime_dirs
        return os.path.exists(path)

    return Locator(identities=identities, exists=exists)
