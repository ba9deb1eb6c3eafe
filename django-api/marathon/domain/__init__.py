from marathon.domain.actor import Actor, Capability, RoleGrant
from marathon.domain.models import (
    Account,
    Event,
    ShirtAttributes,
    ShirtOrder,
    Ticket,
    TicketAttributes,
    TicketConfirmation,
    VerificationRecord,
)
from marathon.domain.policy import (
    ALLOW,
    DENY,
    Allow,
    Decision,
    Deny,
    FilteredAllow,
    Operation,
    RecordType,
    evaluate,
)
from marathon.domain.value_objects import (
    EventId,
    PaymentMethod,
    PaymentReference,
    ResourceKind,
    ReviewStatus,
    ShirtColour,
    ShirtSize,
    TicketCount,
    UserId,
)

__all__ = [
    "Account",
    "Actor",
    "Capability",
    "RoleGrant",
    "Event",
    "Ticket",
    "ShirtOrder",
    "TicketAttributes",
    "ShirtAttributes",
    "TicketConfirmation",
    "VerificationRecord",
    "ALLOW",
    "DENY",
    "Allow",
    "Deny",
    "Decision",
    "FilteredAllow",
    "Operation",
    "RecordType",
    "evaluate",
    "EventId",
    "UserId",
    "PaymentReference",
    "PaymentMethod",
    "ResourceKind",
    "ReviewStatus",
    "ShirtColour",
    "ShirtSize",
    "TicketCount",
]
