"""The calling actor, as resolved once per request."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from marathon.domain.value_objects import UserId


class Capability(Enum):
    """Named permission flags carried on roles."""

    ADMIN = "admin"
    MANAGE_USERS = "can_manage_users"
    MANAGE_CONTENT = "can_manage_content"


@dataclass(frozen=True)
class RoleGrant:
    """Snapshot of one role row held by a user."""

    admin: bool = False
    can_manage_users: bool = False
    can_manage_content: bool = False
    runner: bool = False
    volunteer: bool = False
    event: str | None = None


@dataclass(frozen=True)
class Actor:
    """Identity plus capability flags for the request's lifetime.

    Flags are additive: each is true when any of the user's roles sets it.
    """

    user_id: UserId
    username: str
    is_admin: bool = False
    can_manage_users: bool = False
    can_manage_content: bool = False
    runner: bool = False
    volunteer: bool = False
    events: frozenset[str] = frozenset()

    @classmethod
    def from_grants(
        cls, user_id: UserId, username: str, grants: Iterable[RoleGrant]
    ) -> "Actor":
        grants = tuple(grants)
        return cls(
            user_id=user_id,
            username=username,
            is_admin=any(g.admin for g in grants),
            can_manage_users=any(g.can_manage_users for g in grants),
            can_manage_content=any(g.can_manage_content for g in grants),
            runner=any(g.runner for g in grants),
            volunteer=any(g.volunteer for g in grants),
            events=frozenset(g.event for g in grants if g.event),
        )

    def has(self, capability: Capability) -> bool:
        if capability is Capability.ADMIN:
            return self.is_admin
        if capability is Capability.MANAGE_USERS:
            return self.can_manage_users
        return self.can_manage_content
