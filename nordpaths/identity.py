"""User and group lookups behind a small swappable interface.

``SystemIdentityDirectory`` reads the local passwd/group databases.
``StaticIdentityDirectory`` answers from in-memory records so resolution can
be exercised without real system accounts.
"""

from __future__ import annotations

import grp
import pwd
from dataclasses import dataclass, field
from typing import Protocol

from nordpaths.errors import InvalidInputError, LookupFailureError, NotFoundError


@dataclass(frozen=True)
class UserRecord:
    name: str
    uid: int
    gid: int
    home: str


@dataclass(frozen=True)
class GroupRecord:
    name: str
    gid: int


class IdentityDirectory(Protocol):
    def lookup_user_by_id(self, uid: str) -> UserRecord: ...

    def lookup_group_by_name(self, name: str) -> GroupRecord: ...


def _parse_uid(uid: str) -> int:
    try:
        value = int(uid)
    except (TypeError, ValueError):
        raise InvalidInputError(f"invalid user id {uid!r}") from None
    if value < 0:
        raise InvalidInputError(f"invalid user id {uid!r}")
    return value


class SystemIdentityDirectory:
    """Lookups against the host's passwd and group databases."""

    def lookup_user_by_id(self, uid: str) -> UserRecord:
        numeric = _parse_uid(uid)
        try:
            entry = pwd.getpwuid(numeric)
        except KeyError:
            raise NotFoundError(f"unknown user id {uid}") from None
        except OSError as exc:
            raise LookupFailureError(f"user lookup for id {uid} failed: {exc}") from exc
        return UserRecord(name=entry.pw_name, uid=entry.pw_uid,
                          gid=entry.pw_gid, home=entry.pw_dir)

    def lookup_group_by_name(self, name: str) -> GroupRecord:
        if not name:
            raise InvalidInputError("group name is empty")
        try:
            entry = grp.getgrnam(name)
        except KeyError:
            raise NotFoundError(f"group: unknown group {name}") from None
        except OSError as exc:
            raise LookupFailureError(f"group lookup for {name} failed: {exc}") from exc
        return GroupRecord(name=entry.gr_name, gid=entry.gr_gid)


@dataclass
class StaticIdentityDirectory:
    """In-memory identity directory.

    Set ``failure`` to make every lookup raise ``LookupFailureError``, which
    stands in for an unreachable user database (e.g. a dead NSS backend).
    """

    users: list[UserRecord] = field(default_factory=list)
    groups: list[GroupRecord] = field(default_factory=list)
    failure: str | None = None

    def lookup_user_by_id(self, uid: str) -> UserRecord:
        if self.failure:
            raise LookupFailureError(self.failure)
        numeric = _parse_uid(uid)
        for user in self.users:
            if user.uid == numeric:
                return user
        raise NotFoundError(f"unknown user id {uid}")

    def lookup_group_by_name(self, name: str) -> GroupRecord:
        if self.failure:
            raise LookupFailureError(self.failure)
        if not name:
            raise InvalidInputError("group name is empty")
        for group in self.groups:
            if group.name == name:
                return group
        raise NotFoundError(f"group: unknown group {name}")
