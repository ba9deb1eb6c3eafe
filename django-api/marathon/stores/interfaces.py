"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Every method takes the
access context of the caller; stores consult `ctx.decide()` before touching
rows, so an ElevatedContext is the only way past the access policy.
"""

from abc import ABC, abstractmethod

from marathon.context import AccessContext
from marathon.domain import (
    Account,
    Event,
    PaymentReference,
    ShirtAttributes,
    ShirtOrder,
    Ticket,
    TicketAttributes,
    TicketConfirmation,
    UserId,
    VerificationRecord,
)


class EventStore(ABC):
    """Interface for event catalog reads."""

    @abstractmethod
    def list_events(self, ctx: AccessContext) -> list[Event]:
        """Return the events visible to `ctx`, newest first."""
        ...

    @abstractmethod
    def get_event(self, ctx: AccessContext, shortname: str) -> Event | None:
        """Return a visible event by shortname, or None if not found."""
        ...


class IssuanceStore(ABC):
    """Interface for ticket and shirt order persistence."""

    @abstractmethod
    def get_account(self, ctx: AccessContext, user_id: UserId) -> Account | None:
        """Return the user by ID, or None if not visible or not found."""
        ...

    @abstractmethod
    def get_event(self, ctx: AccessContext, shortname: str) -> Event | None:
        """Return an event by shortname, or None if not visible or not found."""
        ...

    @abstractmethod
    def create_ticket(
        self,
        ctx: AccessContext,
        user_id: UserId,
        event: Event,
        attributes: TicketAttributes,
        reference: PaymentReference,
    ) -> Ticket:
        """Insert an unpaid ticket.

        Raises:
            DuplicatePaymentReferenceError: If the reference is already used.
            AccessDeniedError: If `ctx` may not create tickets.
        """
        ...

    @abstractmethod
    def create_shirt_order(
        self,
        ctx: AccessContext,
        user_id: UserId,
        attributes: ShirtAttributes,
        reference: PaymentReference,
    ) -> ShirtOrder:
        """Insert an unpaid shirt order.

        Raises:
            DuplicatePaymentReferenceError: If the reference is already used.
            AccessDeniedError: If `ctx` may not create shirt orders.
        """
        ...

    @abstractmethod
    def confirm_ticket(
        self,
        ctx: AccessContext,
        reference: PaymentReference,
        confirmation: TicketConfirmation | None,
    ) -> Ticket | None:
        """Mark the ticket paid and apply the confirmed count in one conditional write.

        An already-paid ticket is returned unchanged. Returns None when no
        ticket carries the reference.
        """
        ...

    @abstractmethod
    def confirm_shirt_order(
        self, ctx: AccessContext, reference: PaymentReference
    ) -> ShirtOrder | None:
        """Mark the shirt order paid. Same replay semantics as confirm_ticket."""
        ...


class VerificationStore(ABC):
    """Interface for account verification codes."""

    @abstractmethod
    def find_by_code(self, ctx: AccessContext, code: str) -> list[VerificationRecord]:
        """Return every verification record whose code equals `code`."""
        ...
