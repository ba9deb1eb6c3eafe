"""Unit tests for the services.

Stores are in-memory fakes; these test orchestration and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

import logging
import uuid

import pytest

from marathon.context import SessionContext
from marathon.domain import (
    EventId,
    PaymentMethod,
    ResourceKind,
    ShirtAttributes,
    ShirtColour,
    ShirtSize,
    TicketAttributes,
    TicketConfirmation,
    TicketCount,
)
from marathon.domain.errors import (
    AmbiguousVerificationCodeError,
    AuthorizationError,
    DuplicatePaymentReferenceError,
    EventClosedError,
    EventNotFoundError,
    InvalidIdentifierError,
    InvalidPaymentReferenceError,
    MissingVerificationCodeError,
    ResourceNotFoundError,
    UnverifiedUserError,
    VerificationNotFoundError,
)
from marathon.services import EventService, IssuanceService, VerificationService
from marathon.stores.interfaces import EventStore

SECRET = "s3cret"


def ticket_attributes(event: str = "asm2026", count: int = 1) -> TicketAttributes:
    return TicketAttributes(event=event, number_of_tickets=TicketCount(count), method=PaymentMethod.STRIPE)


def shirt_attributes() -> ShirtAttributes:
    return ShirtAttributes(size=ShirtSize.M, colour=ShirtColour.PURPLE, method=PaymentMethod.BANK)


@pytest.fixture
def service(issuance_store) -> IssuanceService:
    return IssuanceService(issuance_store, shared_secret=SECRET)


@pytest.fixture
def session() -> SessionContext:
    return SessionContext.anonymous()


class TestSharedSecret:
    """Every issuance operation starts with the shared-secret check."""

    @pytest.mark.parametrize("secret", [None, "", "wrong", "S3CRET", "s3cret "])
    def test_mismatch_rejected_before_store_access(self, service, issuance_store, session, secret):
        """A bad secret raises AuthorizationError and touches no data."""
        account = issuance_store.add_account("alice", verified=True)
        with pytest.raises(AuthorizationError):
            service.generate(session, ResourceKind.TICKET, str(account.id.value), ticket_attributes(), secret)
        assert issuance_store.contexts == []
        assert issuance_store.tickets == {}

    def test_unconfigured_secret_rejects_every_call(self, issuance_store, session, caplog):
        """An empty configured secret never matches, not even an empty one."""
        service = IssuanceService(issuance_store, shared_secret="")
        with caplog.at_level(logging.ERROR):
            with pytest.raises(AuthorizationError):
                service.confirm(session, ResourceKind.TICKET, "ref-1", None, "")
        assert "not configured" in caplog.text

    def test_confirm_checks_secret(self, service, session):
        with pytest.raises(AuthorizationError):
            service.confirm(session, ResourceKind.SHIRT_ORDER, "ref-1", None, "nope")


class TestGenerate:
    """Tests for IssuanceService.generate."""

    def test_verified_user_gets_unpaid_ticket(self, service, issuance_store, session):
        account = issuance_store.add_account("alice", verified=True)
        ticket = service.generate(
            session, ResourceKind.TICKET, str(account.id.value), ticket_attributes(count=2), SECRET, "pi_1"
        )
        assert ticket.paid is False
        assert ticket.username == "alice"
        assert ticket.event == "asm2026"
        assert ticket.number_of_tickets.value == 2
        assert ticket.payment_reference.value == "pi_1"

    def test_store_is_called_elevated(self, service, issuance_store, session):
        """Writes happen under an elevated context, not the caller's session."""
        account = issuance_store.add_account("alice", verified=True)
        service.generate(session, ResourceKind.SHIRT_ORDER, str(account.id.value), shirt_attributes(), SECRET)
        assert issuance_store.contexts
        assert all(ctx.elevated for ctx in issuance_store.contexts)
        assert issuance_store.contexts[0].reason == "generate shirt order"

    def test_reference_generated_when_absent(self, service, issuance_store, session):
        account = issuance_store.add_account("alice", verified=True)
        order = service.generate(
            session, ResourceKind.SHIRT_ORDER, str(account.id.value), shirt_attributes(), SECRET
        )
        uuid.UUID(order.payment_reference.value)
        assert order.size is ShirtSize.M

    def test_unverified_user_rejected(self, service, issuance_store, session):
        """Unverified users never receive a resource."""
        account = issuance_store.add_account("bob", verified=False)
        with pytest.raises(UnverifiedUserError):
            service.generate(session, ResourceKind.TICKET, str(account.id.value), ticket_attributes(), SECRET)
        assert issuance_store.tickets == {}

    def test_missing_user_rejected(self, service, issuance_store, session):
        with pytest.raises(UnverifiedUserError):
            service.generate(session, ResourceKind.TICKET, str(uuid.uuid4()), ticket_attributes(), SECRET)

    def test_malformed_user_id_rejected(self, service, session):
        with pytest.raises(InvalidIdentifierError):
            service.generate(session, ResourceKind.TICKET, "not-a-uuid", ticket_attributes(), SECRET)

    def test_blank_reference_rejected(self, service, issuance_store, session):
        account = issuance_store.add_account("alice", verified=True)
        with pytest.raises(InvalidPaymentReferenceError):
            service.generate(session, ResourceKind.TICKET, str(account.id.value), ticket_attributes(), SECRET, "  ")

    def test_unknown_event_rejected(self, service, issuance_store, session):
        account = issuance_store.add_account("alice", verified=True)
        with pytest.raises(EventNotFoundError):
            service.generate(
                session, ResourceKind.TICKET, str(account.id.value), ticket_attributes("nope"), SECRET
            )

    def test_closed_event_rejected(self, service, issuance_store, session):
        """Events not accepting tickets refuse issuance."""
        account = issuance_store.add_account("alice", verified=True)
        with pytest.raises(EventClosedError):
            service.generate(
                session, ResourceKind.TICKET, str(account.id.value), ticket_attributes("closed2026"), SECRET
            )

    def test_same_reference_twice_conflicts(self, service, issuance_store, session):
        """The payment reference is unique per resource kind."""
        account = issuance_store.add_account("alice", verified=True)
        user_id = str(account.id.value)
        service.generate(session, ResourceKind.TICKET, user_id, ticket_attributes(), SECRET, "pi_dup")
        with pytest.raises(DuplicatePaymentReferenceError):
            service.generate(session, ResourceKind.TICKET, user_id, ticket_attributes(), SECRET, "pi_dup")
        assert len(issuance_store.tickets) == 1


class TestConfirm:
    """Tests for IssuanceService.confirm."""

    @pytest.fixture
    def unpaid_ticket(self, service, issuance_store, session):
        account = issuance_store.add_account("alice", verified=True)
        return service.generate(
            session, ResourceKind.TICKET, str(account.id.value), ticket_attributes(count=1), SECRET, "pi_1"
        )

    def test_marks_paid(self, service, session, unpaid_ticket):
        ticket = service.confirm(session, ResourceKind.TICKET, "pi_1", None, SECRET)
        assert ticket.paid is True
        assert ticket.number_of_tickets.value == 1

    def test_applies_confirmed_ticket_count(self, service, session, unpaid_ticket):
        confirmation = TicketConfirmation(number_of_tickets=TicketCount(3))
        ticket = service.confirm(session, ResourceKind.TICKET, "pi_1", confirmation, SECRET)
        assert ticket.number_of_tickets.value == 3

    def test_reconfirm_is_noop(self, service, session, unpaid_ticket):
        """A replayed confirmation returns the paid ticket without re-applying attributes."""
        service.confirm(session, ResourceKind.TICKET, "pi_1", TicketConfirmation(TicketCount(2)), SECRET)
        again = service.confirm(session, ResourceKind.TICKET, "pi_1", TicketConfirmation(TicketCount(5)), SECRET)
        assert again.paid is True
        assert again.number_of_tickets.value == 2

    def test_unknown_reference_not_found(self, service, session):
        with pytest.raises(ResourceNotFoundError) as excinfo:
            service.confirm(session, ResourceKind.SHIRT_ORDER, "pi_missing", None, SECRET)
        assert "shirt order" in excinfo.value.message

    def test_reference_from_other_kind_not_found(self, service, session, unpaid_ticket):
        """Ticket references do not confirm shirt orders."""
        with pytest.raises(ResourceNotFoundError):
            service.confirm(session, ResourceKind.SHIRT_ORDER, "pi_1", None, SECRET)

    def test_blank_reference_rejected(self, service, session):
        with pytest.raises(InvalidPaymentReferenceError):
            service.confirm(session, ResourceKind.TICKET, "", None, SECRET)

    def test_confirm_runs_elevated(self, service, issuance_store, session, unpaid_ticket):
        issuance_store.contexts.clear()
        service.confirm(session, ResourceKind.TICKET, "pi_1", None, SECRET)
        [ctx] = issuance_store.contexts
        assert ctx.elevated
        assert ctx.reason == "confirm ticket"


class TestVerificationService:
    """Tests for VerificationService.lookup."""

    def test_single_match_returned(self, verification_store, session):
        record = verification_store.add("abc123", username="alice")
        assert VerificationService(verification_store).lookup(session, "abc123") == record

    def test_lookup_runs_elevated(self, verification_store, session):
        verification_store.add("abc123")
        VerificationService(verification_store).lookup(session, "abc123")
        [ctx] = verification_store.contexts
        assert ctx.elevated

    def test_no_match_not_found(self, verification_store, session):
        verification_store.add("abc123")
        with pytest.raises(VerificationNotFoundError):
            VerificationService(verification_store).lookup(session, "zzz")

    def test_empty_code_rejected_before_lookup(self, verification_store, session):
        """An empty code is a bad request, not a miss."""
        with pytest.raises(MissingVerificationCodeError):
            VerificationService(verification_store).lookup(session, "")
        assert verification_store.contexts == []

    def test_duplicate_code_is_ambiguous(self, verification_store, session, caplog):
        """Never pick one of several matches."""
        verification_store.add("dup")
        verification_store.add("dup")
        with caplog.at_level(logging.ERROR):
            with pytest.raises(AmbiguousVerificationCodeError):
                VerificationService(verification_store).lookup(session, "dup")
        assert "shared by 2 records" in caplog.text


class FakeEventStore(EventStore):
    def __init__(self, events) -> None:
        self.events = {event.shortname: event for event in events}

    def list_events(self, ctx):
        return list(self.events.values())

    def get_event(self, ctx, shortname):
        return self.events.get(shortname)


class TestEventService:
    """Tests for EventService."""

    def test_get_event_not_found_raises_error(self, session):
        """get_event raises EventNotFoundError when store returns None."""
        with pytest.raises(EventNotFoundError):
            EventService(FakeEventStore([])).get_event(session, "nope")

    def test_list_events_passes_through(self, session, issuance_store):
        events = list(issuance_store.events.values())
        assert EventService(FakeEventStore(events)).list_events(session) == events

    def test_get_event_returns_domain_model(self, session, issuance_store):
        event = issuance_store.events["asm2026"]
        found = EventService(FakeEventStore([event])).get_event(session, "asm2026")
        assert isinstance(found.id, EventId)
