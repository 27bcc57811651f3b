"""Entry point and argument parsing for nordpaths.

Subcommands
-----------
socket          Fileshare (or other service) socket for a uid.
daemon-socket   System VPN daemon socket.
config-dir      Per-user config directory, if present.
history-path    Fileshare transfer history database.
log-path        Fileshare log file when systemd is not collecting logs.
gid             Numeric id of the nordvpn group.
iptables        Firewall rule-set executables the platform supports.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from nordpaths.capabilities import PlatformCapabilities
from nordpaths.constants import DAEMON_SOCKET, FILESHARED, NORDVPN_GROUP
from nordpaths.errors import LocatorError
from nordpaths.logging_setup import configure_logging
from nordpaths.paths import Locator


logger = logging.getLogger(__name__)


# -- shared helpers ----------------------------------------------------------

def _add_uid_arg(parser: argparse.ArgumentParser):
    parser.add_argument("--uid", type=int, default=None,
                        help="User id (default: the calling process's uid)")


def _uid(args) -> int:
    return os.getuid() if args.uid is None else args.uid


def _home(locator: Locator, args) -> str:
    """Home directory from ``--home`` or the user record for ``--uid``."""
    if args.home is not None:
        return args.home
    return locator.identities.lookup_user_by_id(str(_uid(args))).home


# -- subcommand handlers -----------------------------------------------------

def _cmd_socket(locator: Locator, args):
    print(locator.service_socket(_uid(args), args.service))


def _cmd_daemon_socket(locator: Locator, args):
    print(DAEMON_SOCKET)


def _cmd_config_dir(locator: Locator, args):
    print(locator.user_config_dir(_home(locator, args)))


def _cmd_history_path(locator: Locator, args):
    print(locator.history_file(_home(locator, args)))


def _cmd_log_path(locator: Locator, args):
    print(locator.log_target(str(_uid(args))))


def _cmd_gid(locator: Locator, args):
    print(locator.group_id(args.group))


def _cmd_iptables(locator: Locator, args):
    caps = PlatformCapabilities.from_env()
    if args.no_ipv4 or args.no_ipv6:
        caps = PlatformCapabilities(ipv4=caps.ipv4 and not args.no_ipv4,
                                    ipv6=caps.ipv6 and not args.no_ipv6)
    for name in caps.supported_iptables():
        print(name)


# -- main --------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="nordpaths",
        description="nordpaths - socket, config and log locations for nordvpn daemons")
    sub = ap.add_subparsers(dest="command")

    sp = sub.add_parser("socket", help="Service socket path for a user")
    _add_uid_arg(sp)
    sp.add_argument("--service", default=FILESHARED,
                    help=f"Service name (default: {FILESHARED})")
    sp.set_defaults(func=_cmd_socket)

    sp = sub.add_parser("daemon-socket", help="System VPN daemon socket path")
    sp.set_defaults(func=_cmd_daemon_socket)

    for name, func, text in (
        ("config-dir", _cmd_config_dir, "Per-user config directory"),
        ("history-path", _cmd_history_path, "Fileshare transfer history database"),
    ):
        sp = sub.add_parser(name, help=text)
        _add_uid_arg(sp)
        sp.add_argument("--home", default=None,
                        help="Home directory (default: looked up from --uid)")
        sp.set_defaults(func=func)

    sp = sub.add_parser("log-path", help="Fileshare log file for a user")
    _add_uid_arg(sp)
    sp.set_defaults(func=_cmd_log_path)

    sp = sub.add_parser("gid", help="Numeric id of a group")
    sp.add_argument("--group", default=NORDVPN_GROUP,
                    help=f"Group name (default: {NORDVPN_GROUP})")
    sp.set_defaults(func=_cmd_gid)

    sp = sub.add_parser("iptables", help="Supported firewall rule-set executables")
    sp.add_argument("--no-ipv4", action="store_true", help="Platform lacks IPv4 filtering")
    sp.add_argument("--no-ipv6", action="store_true", help="Platform lacks IPv6 filtering")
    sp.set_defaults(func=_cmd_iptables)

    return ap


def main(argv=None, locator: Locator | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.command is None:
        ap.error("a command is required")

    configure_logging(default_level="WARNING", stream=sys.stderr)
    locator = locator if locator is not None else Locator()

    try:
        args.func(locator, args)
    except LocatorError as e:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
