"""Privilege-aware socket, config and log path resolution.

Every answer is recomputed from the caller's identity and the current state
of the filesystem; nothing is created and nothing is cached.

  service socket   root or no /run/user/<uid>  ->  /run/<svc>/<svc>.sock
                   otherwise                   ->  /run/user/<uid>/<svc>/<svc>.sock
  config dir       <home>/.config/nordvpn/ when present, error otherwise
  log target       /var/log/nordvpn/nordfileshared.log for root,
                   <config dir>/nordfileshared.log for users,
                   /var/log/nordvpn/nordfileshared-<uid>.log as the fallback
"""

from __future__ import annotations

import logging
import os
from typing import Callable, Optional

from nordpaths.constants import (
    CONFIG_DIR_NAME,
    FILESHARE_HISTORY_FILE,
    FILESHARED,
    FILESHARED_LOG_FILE,
    LOG_DIR,
    NORDVPN_GROUP,
    USER_DATA_PATH,
    USER_RUN_DIR,
)
from nordpaths.errors import InvalidInputError, LocatorError, NotFoundError
from nordpaths.identity import IdentityDirectory, SystemIdentityDirectory


logger = logging.getLogger(__name__)


def user_runtime_dir(uid: int) -> str:
    return f"{USER_RUN_DIR}/{uid}"


def _log_suffix(uid: str) -> str:
    """Canonical decimal uid, or ``unknown`` for anything else."""
    try:
        value = int(uid)
    except (TypeError, ValueError):
        return "unknown"
    return str(value) if value >= 0 else "unknown"


class Locator:
    """Resolves per-identity locations for the fileshare daemon."""

    def __init__(self, identities: Optional[IdentityDirectory] = None,
                 exists: Optional[Callable[[str], bool]] = None):
        self.identities = identities if identities is not None else SystemIdentityDirectory()
        self.exists = exists if exists is not None else os.path.exists

    def _present(self, path: str) -> bool:
        # Any stat error, not only ENOENT, reads as absent.
        try:
            return bool(self.exists(path))
        except (OSError, ValueError):
            return False

    # -- sockets -------------------------------------------------------------

    def service_socket(self, uid: int, service: str = FILESHARED) -> str:
        """Return the socket path a ``service`` instance for ``uid`` listens on."""
        if uid < 0:
            raise InvalidInputError(f"invalid user id {uid}")
        if uid == 0 or not self._present(user_runtime_dir(uid)):
            return f"/run/{service}/{service}.sock"
        return f"{user_runtime_dir(uid)}/{service}/{service}.sock"

    # -- config / history ----------------------------------------------------

    def user_config_dir(self, home: str) -> str:
        """Return ``<home>/.config/nordvpn/`` if it exists.

        Privileged callers cannot derive another user's config directory from
        their own environment, so the path is rebuilt from the home directory.
        A user with ``XDG_CONFIG_HOME`` pointing elsewhere ends up with
        ``NotFoundError`` here.
        """
        if not home:
            raise InvalidInputError("user does not have a home directory")
        candidate = os.path.join(home, CONFIG_DIR_NAME, USER_DATA_PATH)
        if self._present(candidate):
            return candidate
        raise NotFoundError(f"{CONFIG_DIR_NAME} directory not found in users home directory")

    def history_file(self, home: str) -> str:
        """Transfer history database inside the user's config directory."""
        return os.path.join(self.user_config_dir(home), FILESHARE_HISTORY_FILE)

    # -- logs ----------------------------------------------------------------

    def log_target(self, uid: str) -> str:
        """Return the fileshare log file for ``uid`` when systemd is not collecting logs.

        Never raises: any lookup or config directory problem lands on a
        per-uid file under the system log directory.
        """
        if uid == "0":
            return os.path.join(LOG_DIR, FILESHARED_LOG_FILE)

        fallback = os.path.join(LOG_DIR, f"{FILESHARED}-{_log_suffix(uid)}.log")
        try:
            user = self.identities.lookup_user_by_id(uid)
        except LocatorError as exc:
            logger.warning("failed to lookup user, users fileshared logs will be stored in %s: %s",
                           LOG_DIR, exc)
            return fallback

        try:
            config_dir = self.user_config_dir(user.home)
        except LocatorError as exc:
            logger.warning("users fileshared logs will be stored in %s: %s", LOG_DIR, exc)
            return fallback

        return os.path.join(config_dir, FILESHARED_LOG_FILE)

    # -- groups --------------------------------------------------------------

    def group_id(self, name: str = NORDVPN_GROUP) -> int:
        """Numeric id of ``name``; lookup errors propagate unchanged."""
        return self.identities.lookup_group_by_name(name).gid


def fileshared_socket(uid: int) -> str:
    return Locator().service_socket(uid)


def fileshared_log_path(uid: str) -> str:
    return Locator().log_target(uid)


def nordvpn_gid() -> int:
    return Locator().group_id(NORDVPN_GROUP)
