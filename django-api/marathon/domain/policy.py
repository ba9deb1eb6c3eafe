"""Access policy evaluator.

Maps (actor, record type, operation) to a decision:

- Allow: unrestricted for this operation.
- Deny: refused entirely.
- FilteredAllow: restricted to records matching ORM-style field lookups.

Evaluation is pure. It reads the actor's flags and the static policy table
below and nothing else, so it can run on every request without I/O.

Precedence per record type: domain capability first (Allow), then the
ownership or publication filter, then default deny.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from marathon.domain.actor import Actor, Capability


class Operation(Enum):
    QUERY = "query"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class RecordType(Enum):
    USER = "user"
    ROLE = "role"
    EVENT = "event"
    SUBMISSION = "submission"
    RUN = "run"
    VOLUNTEER = "volunteer"
    VERIFICATION = "verification"
    TICKET = "ticket"
    SHIRT_ORDER = "shirt_order"


class Decision:
    """Base class for policy decisions."""

    rank = 0

    @property
    def permits(self) -> bool:
        return self.rank > 0


@dataclass(frozen=True)
class Allow(Decision):
    rank = 2


@dataclass(frozen=True)
class Deny(Decision):
    rank = 0


@dataclass(frozen=True)
class FilteredAllow(Decision):
    """Visible or mutable set restricted to records matching every lookup."""

    filters: tuple[tuple[str, Any], ...]

    rank = 1

    @classmethod
    def where(cls, **lookups: Any) -> "FilteredAllow":
        return cls(filters=tuple(sorted(lookups.items())))

    def narrowed(self, **lookups: Any) -> "FilteredAllow":
        return FilteredAllow.where(**{**self.lookups(), **lookups})

    def lookups(self) -> dict[str, Any]:
        return dict(self.filters)


ALLOW = Allow()
DENY = Deny()

EDITABLE_STATUS = "submitted"


def most_permissive(*decisions: Decision) -> Decision:
    """Allow beats FilteredAllow beats Deny. No decisions means Deny."""
    return max(decisions, key=lambda d: d.rank, default=DENY)


@dataclass(frozen=True)
class OwnedRecordPolicy:
    """Self-service records scoped to their owner.

    Owners get the operations in `owner_operations`. When `editable_status`
    is set, owner updates and deletes are limited to records still in it.
    """

    capability: Capability
    owner_field: str
    owner_operations: frozenset[Operation] = frozenset(Operation)
    editable_status: str | None = None

    def baseline(self, actor: Actor | None, operation: Operation) -> Decision:
        if actor is None or operation not in self.owner_operations:
            return DENY
        if operation is Operation.CREATE:
            return ALLOW
        owned = FilteredAllow.where(**{self.owner_field: actor.username})
        if self.editable_status and operation in (Operation.UPDATE, Operation.DELETE):
            return owned.narrowed(status=self.editable_status)
        return owned


@dataclass(frozen=True)
class PublishedContentPolicy:
    """Publicly readable once published; mutations need the capability."""

    capability: Capability
    published_field: str

    def baseline(self, actor: Actor | None, operation: Operation) -> Decision:
        if operation is Operation.QUERY:
            return FilteredAllow.where(**{self.published_field: True})
        return DENY


@dataclass(frozen=True)
class RestrictedPolicy:
    """Only holders of the capability may touch these records."""

    capability: Capability

    def baseline(self, actor: Actor | None, operation: Operation) -> Decision:
        return DENY


_READ_ONLY = frozenset({Operation.QUERY})

POLICIES = {
    RecordType.EVENT: PublishedContentPolicy(Capability.ADMIN, "published"),
    RecordType.RUN: PublishedContentPolicy(Capability.MANAGE_CONTENT, "event__published"),
    RecordType.SUBMISSION: OwnedRecordPolicy(
        Capability.MANAGE_CONTENT, "runner__username", editable_status=EDITABLE_STATUS
    ),
    RecordType.VOLUNTEER: OwnedRecordPolicy(
        Capability.MANAGE_CONTENT, "volunteer__username", editable_status=EDITABLE_STATUS
    ),
    RecordType.TICKET: OwnedRecordPolicy(
        Capability.MANAGE_CONTENT, "user__username", owner_operations=_READ_ONLY
    ),
    RecordType.SHIRT_ORDER: OwnedRecordPolicy(
        Capability.MANAGE_CONTENT, "user__username", owner_operations=_READ_ONLY
    ),
    RecordType.USER: OwnedRecordPolicy(
        Capability.MANAGE_USERS,
        "username",
        owner_operations=frozenset({Operation.QUERY, Operation.UPDATE}),
    ),
    RecordType.ROLE: RestrictedPolicy(Capability.MANAGE_USERS),
    RecordType.VERIFICATION: RestrictedPolicy(Capability.MANAGE_USERS),
}


def evaluate(actor: Actor | None, record_type: RecordType, operation: Operation) -> Decision:
    """Decide whether `actor` may perform `operation` on `record_type`."""
    policy = POLICIES[record_type]
    granted = ALLOW if actor is not None and actor.has(policy.capability) else DENY
    return most_permissive(granted, policy.baseline(actor, operation))
