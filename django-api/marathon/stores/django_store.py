"""Django ORM implementations of the store interfaces."""

import logging

from django.db import IntegrityError, transaction
from django.utils import timezone

from marathon import models
from marathon.context import AccessContext
from marathon.domain import (
    Account,
    Event,
    EventId,
    Operation,
    PaymentMethod,
    PaymentReference,
    RecordType,
    ResourceKind,
    ShirtAttributes,
    ShirtColour,
    ShirtOrder,
    ShirtSize,
    Ticket,
    TicketAttributes,
    TicketConfirmation,
    TicketCount,
    UserId,
    VerificationRecord,
)
from marathon.domain.errors import DuplicatePaymentReferenceError
from marathon.stores.governed import authorize, scoped
from marathon.stores.interfaces import EventStore, IssuanceStore, VerificationStore

logger = logging.getLogger(__name__)


def to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        name=row.name,
        shortname=row.shortname,
        published=row.published,
        accepting_submissions=row.accepting_submissions,
        accepting_tickets=row.accepting_tickets,
        schedule_released=row.schedule_released,
        accepting_volunteers=row.accepting_volunteers,
        accepting_backups=row.accepting_backups,
        accepting_shirts=row.accepting_shirts,
        event_timezone=row.event_timezone,
        start_date=row.start_date,
        end_date=row.end_date,
        raised=row.raised,
    )


def to_ticket(row: models.Ticket) -> Ticket:
    return Ticket(
        id=str(row.id),
        user_id=UserId(row.user_id),
        username=row.user.username,
        event=row.event.shortname,
        number_of_tickets=TicketCount(row.number_of_tickets),
        method=PaymentMethod(row.method),
        payment_reference=PaymentReference(row.payment_reference),
        paid=row.paid,
        created_at=row.created_at,
    )


def to_shirt_order(row: models.ShirtOrder) -> ShirtOrder:
    return ShirtOrder(
        id=str(row.id),
        user_id=UserId(row.user_id),
        username=row.user.username,
        size=ShirtSize(row.size),
        colour=ShirtColour(row.colour),
        method=PaymentMethod(row.method),
        payment_reference=PaymentReference(row.payment_reference),
        paid=row.paid,
        created_at=row.created_at,
    )


def to_verification(row: models.Verification) -> VerificationRecord:
    return VerificationRecord(
        id=str(row.id),
        code=row.code,
        user_id=UserId(row.user_id),
        username=row.user.username,
        created_at=row.created_at,
    )


class DjangoEventStore(EventStore):
    """PostgreSQL-backed event store using Django ORM."""

    def list_events(self, ctx: AccessContext) -> list[Event]:
        return [to_event(row) for row in scoped(ctx, RecordType.EVENT, Operation.QUERY)]

    def get_event(self, ctx: AccessContext, shortname: str) -> Event | None:
        row = scoped(ctx, RecordType.EVENT, Operation.QUERY).filter(shortname=shortname).first()
        return to_event(row) if row is not None else None


class DjangoIssuanceStore(IssuanceStore):
    """Ticket and shirt order persistence.

    Reference uniqueness is the database's unique index. Confirmation is a
    single UPDATE guarded by `paid = false`, so concurrent or replayed
    confirmations apply their attributes at most once.
    """

    def __init__(self) -> None:
        self._events = DjangoEventStore()

    def get_account(self, ctx: AccessContext, user_id: UserId) -> Account | None:
        row = scoped(ctx, RecordType.USER, Operation.QUERY).filter(pk=user_id.value).first()
        if row is None:
            return None
        return Account(id=UserId(row.pk), username=row.username, verified=row.verified)

    def get_event(self, ctx: AccessContext, shortname: str) -> Event | None:
        return self._events.get_event(ctx, shortname)

    def create_ticket(
        self,
        ctx: AccessContext,
        user_id: UserId,
        event: Event,
        attributes: TicketAttributes,
        reference: PaymentReference,
    ) -> Ticket:
        authorize(ctx, RecordType.TICKET, Operation.CREATE)
        try:
            with transaction.atomic():
                row = models.Ticket.objects.create(
                    user_id=user_id.value,
                    event_id=event.id.value,
                    number_of_tickets=attributes.number_of_tickets.value,
                    method=attributes.method.value,
                    payment_reference=reference.value,
                )
        except IntegrityError as exc:
            if models.Ticket.objects.filter(payment_reference=reference.value).exists():
                raise DuplicatePaymentReferenceError(ResourceKind.TICKET.value) from exc
            raise
        return to_ticket(self._tickets(ctx, Operation.QUERY).get(pk=row.pk))

    def create_shirt_order(
        self,
        ctx: AccessContext,
        user_id: UserId,
        attributes: ShirtAttributes,
        reference: PaymentReference,
    ) -> ShirtOrder:
        authorize(ctx, RecordType.SHIRT_ORDER, Operation.CREATE)
        try:
            with transaction.atomic():
                row = models.ShirtOrder.objects.create(
                    user_id=user_id.value,
                    size=attributes.size.value,
                    colour=attributes.colour.value,
                    method=attributes.method.value,
                    payment_reference=reference.value,
                )
        except IntegrityError as exc:
            if models.ShirtOrder.objects.filter(payment_reference=reference.value).exists():
                raise DuplicatePaymentReferenceError(ResourceKind.SHIRT_ORDER.value) from exc
            raise
        return to_shirt_order(self._shirt_orders(ctx, Operation.QUERY).get(pk=row.pk))

    def confirm_ticket(
        self,
        ctx: AccessContext,
        reference: PaymentReference,
        confirmation: TicketConfirmation | None,
    ) -> Ticket | None:
        authorize(ctx, RecordType.TICKET, Operation.UPDATE)
        changes = {"paid": True, "updated_at": timezone.now()}
        if confirmation is not None:
            changes["number_of_tickets"] = confirmation.number_of_tickets.value
        with transaction.atomic():
            matching = self._tickets(ctx, Operation.UPDATE).filter(
                payment_reference=reference.value
            )
            applied = matching.filter(paid=False).update(**changes)
            row = matching.first()
        if row is None:
            return None
        if not applied:
            logger.info(
                "Ticket already paid, confirmation ignored",
                extra={"payment_reference": reference.value},
            )
        return to_ticket(row)

    def confirm_shirt_order(
        self, ctx: AccessContext, reference: PaymentReference
    ) -> ShirtOrder | None:
        authorize(ctx, RecordType.SHIRT_ORDER, Operation.UPDATE)
        with transaction.atomic():
            matching = self._shirt_orders(ctx, Operation.UPDATE).filter(
                payment_reference=reference.value
            )
            applied = matching.filter(paid=False).update(paid=True, updated_at=timezone.now())
            row = matching.first()
        if row is None:
            return None
        if not applied:
            logger.info(
                "Shirt order already paid, confirmation ignored",
                extra={"payment_reference": reference.value},
            )
        return to_shirt_order(row)

    def _tickets(self, ctx: AccessContext, operation: Operation):
        return scoped(
            ctx, RecordType.TICKET, operation, models.Ticket.objects.select_related("user", "event")
        )

    def _shirt_orders(self, ctx: AccessContext, operation: Operation):
        return scoped(
            ctx, RecordType.SHIRT_ORDER, operation, models.ShirtOrder.objects.select_related("user")
        )


class DjangoVerificationStore(VerificationStore):
    """Verification code lookups using Django ORM."""

    def find_by_code(self, ctx: AccessContext, code: str) -> list[VerificationRecord]:
        rows = scoped(
            ctx,
            RecordType.VERIFICATION,
            Operation.QUERY,
            models.Verification.objects.select_related("user"),
        ).filter(code=code)
        return [to_verification(row) for row in rows]
