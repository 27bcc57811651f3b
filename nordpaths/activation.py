"""Socket-activation environment parsing.

A supervisor that pre-binds the listening socket passes it as descriptor 3
onwards and announces it through ``LISTEN_PID``, ``LISTEN_FDS`` and
``LISTEN_FDNAMES``. The variables only count when ``LISTEN_PID`` names the
current process.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from nordpaths.constants import LISTEN_FDNAMES, LISTEN_FDS, LISTEN_FDS_START, LISTEN_PID


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActivatedSocket:
    fd: int
    name: str = "unknown"


def listen_fds(environ=None, pid: int | None = None) -> list[ActivatedSocket]:
    """Return the descriptors handed over by the supervisor, or an empty list."""
    env = os.environ if environ is None else environ
    pid = os.getpid() if pid is None else pid

    raw_pid = env.get(LISTEN_PID)
    raw_fds = env.get(LISTEN_FDS)
    if raw_pid is None or raw_fds is None:
        return []

    try:
        listen_pid = int(raw_pid)
        count = int(raw_fds)
    except ValueError:
        logger.debug("ignoring malformed %s=%r / %s=%r", LISTEN_PID, raw_pid, LISTEN_FDS, raw_fds)
        return []

    if listen_pid != pid:
        logger.debug("activation environment belongs to pid %d, not %d", listen_pid, pid)
        return []
    if count <= 0:
        return []

    names = env.get(LISTEN_FDNAMES, "")
    names = names.split(":") if names else []
    sockets = []
    for i in range(count):
        name = names[i] if i < len(names) and names[i] else "unknown"
        sockets.append(ActivatedSocket(fd=LISTEN_FDS_START + i, name=name))
    return sockets


def is_socket_activated(environ=None, pid: int | None = None) -> bool:
    return bool(listen_fds(environ, pid))
