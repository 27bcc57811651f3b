"""Firewall protocol families supported by the running platform."""

from __future__ import annotations

import os
from dataclasses import dataclass

from nordpaths.constants import IP6TABLES_EXEC, IPTABLES_EXEC

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _env_flag(environ, name: str, default: bool) -> bool:
    raw = environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    return default


@dataclass(frozen=True)
class PlatformCapabilities:
    """Protocol support decided once at startup and handed to rule generators."""

    ipv4: bool = True
    ipv6: bool = True

    @classmethod
    def from_env(cls, environ=None) -> PlatformCapabilities:
        """Read ``NORDPATHS_IPV4`` / ``NORDPATHS_IPV6``; unset or unparsable keeps the default."""
        env = os.environ if environ is None else environ
        return cls(ipv4=_env_flag(env, "NORDPATHS_IPV4", True),
                   ipv6=_env_flag(env, "NORDPATHS_IPV6", True))

    def supported_iptables(self) -> tuple[str, ...]:
        """Rule-set executables to emit rules for, IPv4 first."""
        families = []
        if self.ipv4:
            families.append(IPTABLES_EXEC)
        if self.ipv6:
            families.append(IP6TABLES_EXEC)
        return tuple(families)
