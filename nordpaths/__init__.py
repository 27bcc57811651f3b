"""nordpaths - privilege-aware socket, config and log locations for nordvpn daemons."""

from nordpaths.capabilities import PlatformCapabilities
from nordpaths.errors import InvalidInputError, LocatorError, LookupFailureError, NotFoundError
from nordpaths.identity import GroupRecord, StaticIdentityDirectory, SystemIdentityDirectory, UserRecord
from nordpaths.paths import Locator, fileshared_log_path, fileshared_socket, nordvpn_gid

__all__ = [
    "Locator",
    "PlatformCapabilities",
    "LocatorError",
    "InvalidInputError",
    "NotFoundError",
    "LookupFailureError",
    "UserRecord",
    "GroupRecord",
    "SystemIdentityDirectory",
    "StaticIdentityDirectory",
    "fileshared_socket",
    "fileshared_log_path",
    "nordvpn_gid",
]
