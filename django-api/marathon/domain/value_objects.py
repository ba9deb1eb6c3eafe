"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self
from uuid import UUID, uuid4

PAYMENT_REFERENCE_MAX_LENGTH = 255


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID


@dataclass(frozen=True)
class UserId:
    """Unique identifier for a User."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value)))


@dataclass(frozen=True)
class PaymentReference:
    """Opaque reference correlating a resource with an external payment.

    Unique per resource kind; doubles as the idempotency key for issuance.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("Payment reference cannot be blank")
        if len(self.value) > PAYMENT_REFERENCE_MAX_LENGTH:
            raise ValueError("Payment reference is too long")

    @classmethod
    def generate(cls) -> Self:
        return cls(value=str(uuid4()))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TicketCount:
    """Positive number of tickets on a single order."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("Ticket count must be at least 1")


class ResourceKind(Enum):
    """Kinds of issuable resource."""

    TICKET = "ticket"
    SHIRT_ORDER = "shirt order"


class PaymentMethod(Enum):
    STRIPE = "stripe"
    BANK = "bank"


class ShirtSize(Enum):
    XS = "xs"
    S = "s"
    M = "m"
    L = "l"
    XL = "xl"
    XXL = "2xl"
    XXXL = "3xl"


class ShirtColour(Enum):
    BLUE = "blue"
    PURPLE = "purple"


class ReviewStatus(Enum):
    """Lifecycle of self-service records. Only SUBMITTED is owner-editable."""

    SUBMITTED = "submitted"
    ACCEPTED = "accepted"
    BACKUP = "backup"
    REJECTED = "rejected"
