"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in marathon/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from marathon.domain.value_objects import (
    EventId,
    PaymentMethod,
    PaymentReference,
    ShirtColour,
    ShirtSize,
    TicketCount,
    UserId,
)


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    shortname: str
    published: bool
    accepting_submissions: bool
    accepting_tickets: bool
    schedule_released: bool
    accepting_volunteers: bool
    accepting_backups: bool
    accepting_shirts: bool
    event_timezone: str
    start_date: datetime | None
    end_date: datetime | None
    raised: Decimal | None


@dataclass(frozen=True)
class Account:
    """The slice of a user that issuance eligibility depends on."""

    id: UserId
    username: str
    verified: bool


@dataclass(frozen=True)
class Ticket:
    """Domain representation of an issued Ticket."""

    id: str
    user_id: UserId
    username: str
    event: str
    number_of_tickets: TicketCount
    method: PaymentMethod
    payment_reference: PaymentReference
    paid: bool
    created_at: datetime


@dataclass(frozen=True)
class ShirtOrder:
    """Domain representation of an issued ShirtOrder."""

    id: str
    user_id: UserId
    username: str
    size: ShirtSize
    colour: ShirtColour
    method: PaymentMethod
    payment_reference: PaymentReference
    paid: bool
    created_at: datetime


@dataclass(frozen=True)
class TicketAttributes:
    """What a caller asks for when generating a ticket."""

    event: str
    number_of_tickets: TicketCount
    method: PaymentMethod


@dataclass(frozen=True)
class ShirtAttributes:
    """What a caller asks for when generating a shirt order."""

    size: ShirtSize
    colour: ShirtColour
    method: PaymentMethod


@dataclass(frozen=True)
class TicketConfirmation:
    """Final ticket count reported by the payment provider."""

    number_of_tickets: TicketCount


@dataclass(frozen=True)
class VerificationRecord:
    """A one-time account verification code and the user it belongs to."""

    id: str
    code: str
    user_id: UserId
    username: str
    created_at: datetime
