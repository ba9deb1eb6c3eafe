"""Payment-gated issuance of tickets and shirt orders.

Two pipelines per resource kind:

- generate: check the shared secret, confirm the target user is verified,
  resolve the payment reference, insert the resource unpaid.
- confirm: check the shared secret, mark the resource with the reference
  paid in a single conditional write.

The payment reference is the idempotency key. A repeated generate with the
same reference fails with a conflict; a repeated confirm returns the
already-paid resource without re-applying its attributes.

Both pipelines read and write under an ElevatedContext, since the caller is
authenticated by the shared secret rather than by session capabilities.
"""

import logging

from marathon.context import ElevatedContext, SessionContext
from marathon.domain import (
    PaymentReference,
    ResourceKind,
    ShirtAttributes,
    ShirtOrder,
    Ticket,
    TicketAttributes,
    TicketConfirmation,
    UserId,
)
from marathon.domain.errors import (
    EventClosedError,
    EventNotFoundError,
    InvalidIdentifierError,
    InvalidPaymentReferenceError,
    ResourceNotFoundError,
    UnverifiedUserError,
)
from marathon.services.shared_secret import require_shared_secret
from marathon.stores.interfaces import IssuanceStore

logger = logging.getLogger(__name__)

Resource = Ticket | ShirtOrder


class IssuanceService:
    """Service for ticket and shirt order issuance."""

    def __init__(self, store: IssuanceStore, shared_secret: str) -> None:
        self._store = store
        self._shared_secret = shared_secret

    def generate(
        self,
        session: SessionContext,
        kind: ResourceKind,
        user_id: str,
        attributes: TicketAttributes | ShirtAttributes,
        secret: str | None,
        payment_reference: str | None = None,
    ) -> Resource:
        """Create an unpaid resource for a verified user.

        Raises:
            AuthorizationError: If `secret` does not match.
            InvalidIdentifierError: If `user_id` is not a valid UUID.
            InvalidPaymentReferenceError: If a supplied reference is blank or too long.
            UnverifiedUserError: If the user is missing or unverified.
            EventNotFoundError: If a ticket names an unknown event.
            EventClosedError: If the event is not accepting tickets.
            DuplicatePaymentReferenceError: If the reference is already used.
        """
        require_shared_secret(secret, self._shared_secret, f"generate {kind.value}")
        target = self._parse_user_id(user_id)
        reference = self._parse_reference(payment_reference)

        ctx = session.elevate(f"generate {kind.value}")
        account = self._store.get_account(ctx, target)
        if account is None or not account.verified:
            logger.warning(
                "Refused %s for unverified user", kind.value, extra={"user_id": str(target.value)}
            )
            raise UnverifiedUserError()

        if kind is ResourceKind.TICKET:
            resource = self._generate_ticket(ctx, target, attributes, reference)
        else:
            resource = self._store.create_shirt_order(ctx, target, attributes, reference)

        logger.info(
            "Issued unpaid %s",
            kind.value,
            extra={"payment_reference": resource.payment_reference.value, "user": account.username},
        )
        return resource

    def confirm(
        self,
        session: SessionContext,
        kind: ResourceKind,
        payment_reference: str,
        confirmation: TicketConfirmation | None,
        secret: str | None,
    ) -> Resource:
        """Mark the resource carrying `payment_reference` as paid.

        Confirming an already-paid resource is a no-op that returns it as is.

        Raises:
            AuthorizationError: If `secret` does not match.
            InvalidPaymentReferenceError: If the reference is blank or too long.
            ResourceNotFoundError: If no resource of `kind` has the reference.
        """
        require_shared_secret(secret, self._shared_secret, f"confirm {kind.value}")
        reference = self._parse_reference(payment_reference, required=True)

        ctx = session.elevate(f"confirm {kind.value}")
        if kind is ResourceKind.TICKET:
            resource = self._store.confirm_ticket(ctx, reference, confirmation)
        else:
            resource = self._store.confirm_shirt_order(ctx, reference)

        if resource is None:
            raise ResourceNotFoundError(kind.value)
        logger.info("Confirmed %s", kind.value, extra={"payment_reference": reference.value})
        return resource

    def _generate_ticket(
        self,
        ctx: ElevatedContext,
        target: UserId,
        attributes: TicketAttributes,
        reference: PaymentReference,
    ) -> Ticket:
        event = self._store.get_event(ctx, attributes.event)
        if event is None:
            raise EventNotFoundError()
        if not event.accepting_tickets:
            raise EventClosedError(event.shortname)
        return self._store.create_ticket(ctx, target, event, attributes, reference)

    @staticmethod
    def _parse_user_id(user_id: str) -> UserId:
        try:
            return UserId.from_string(user_id)
        except ValueError as exc:
            raise InvalidIdentifierError() from exc

    @staticmethod
    def _parse_reference(value: str | None, required: bool = False) -> PaymentReference:
        if value is None and not required:
            return PaymentReference.generate()
        try:
            return PaymentReference(value or "")
        except ValueError as exc:
            raise InvalidPaymentReferenceError() from exc
