"""Listening socket for the fileshare daemon.

When started by a socket-activation supervisor the pre-bound descriptor is
adopted as-is; the supervisor unit points at the same path ``Locator``
resolves, so clients connect to one address either way. Without activation
the socket is bound here at the resolved path.
"""

from __future__ import annotations

import logging
import os
import socket
from pathlib import Path

from nordpaths.activation import listen_fds
from nordpaths.constants import PERM_USER_RW_GROUP_RW, PERM_USER_RWX


logger = logging.getLogger(__name__)


def open_listener(path: str | Path, environ=None, backlog: int = 4,
                  mode: int = PERM_USER_RW_GROUP_RW) -> socket.socket:
    """Return a listening Unix socket for ``path``."""
    activated = listen_fds(environ)
    if activated:
        first = activated[0]
        logger.info("using socket-activated descriptor %d (%s)", first.fd, first.name)
        return socket.socket(socket.AF_UNIX, socket.SOCK_STREAM, fileno=first.fd)

    sock_path = Path(path)
    # Remove stale socket file
    if os.path.lexists(sock_path):
        sock_path.unlink()

    try:
        sock_path.parent.mkdir(mode=PERM_USER_RWX, parents=True, exist_ok=True)
    except PermissionError as exc:
        raise PermissionError(
            f"cannot create socket directory '{sock_path.parent}'"
        ) from exc

    sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    try:
        sock.bind(str(sock_path))
        sock.listen(backlog)
        os.chmod(str(sock_path), mode)
    except OSError:
        sock.close()
        raise

    logger.info("listening on %s", sock_path)
    return sock


def close_listener(sock: socket.socket, path: str | Path | None = None):
    """Close ``sock``; pass ``path`` only for sockets bound by ``open_listener``."""
    try:
        sock.close()
    except OSError:
        pass
    if path is None:
        return
    sock_path = Path(path)
    if os.path.lexists(sock_path):
        try:
            sock_path.unlink()
        except OSError:
            pass
