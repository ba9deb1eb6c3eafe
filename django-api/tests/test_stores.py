"""Tests for the Django ORM issuance store.

Run with: pytest tests/test_stores.py -v
"""

import pytest
from django.db import IntegrityError

from marathon import models
from marathon.context import SessionContext
from marathon.domain import (
    PaymentMethod,
    PaymentReference,
    ShirtAttributes,
    ShirtColour,
    ShirtSize,
    TicketAttributes,
    TicketCount,
    UserId,
)
from marathon.domain.errors import AccessDeniedError, DuplicatePaymentReferenceError
from marathon.stores import DjangoEventStore, DjangoIssuanceStore


@pytest.fixture
def elevated():
    return SessionContext.anonymous().elevate("store test")


@pytest.fixture
def store() -> DjangoIssuanceStore:
    return DjangoIssuanceStore()


def ticket_attributes() -> TicketAttributes:
    return TicketAttributes(event="asm2026", number_of_tickets=TicketCount(1), method=PaymentMethod.STRIPE)


@pytest.mark.django_db
class TestCreateTicket:
    """Tests for DjangoIssuanceStore.create_ticket."""

    @pytest.fixture
    def target(self, make_user, make_event):
        make_event("asm2026")
        return UserId(make_user("alice").pk)

    def test_reused_reference_conflicts(self, store, elevated, target):
        event = DjangoEventStore().get_event(elevated, "asm2026")
        store.create_ticket(elevated, target, event, ticket_attributes(), PaymentReference("pi_1"))
        with pytest.raises(DuplicatePaymentReferenceError):
            store.create_ticket(elevated, target, event, ticket_attributes(), PaymentReference("pi_1"))
        assert models.Ticket.objects.count() == 1

    def test_other_integrity_errors_propagate(self, store, elevated, target, monkeypatch):
        """A failed insert for a fresh reference is not reported as a conflict."""
        event = DjangoEventStore().get_event(elevated, "asm2026")

        def fail(**kwargs):
            raise IntegrityError("FOREIGN KEY constraint failed")

        monkeypatch.setattr(models.Ticket.objects, "create", fail)
        with pytest.raises(IntegrityError):
            store.create_ticket(elevated, target, event, ticket_attributes(), PaymentReference("pi_new"))

    def test_session_without_capability_cannot_create(self, store, target, make_actor):
        event = DjangoEventStore().get_event(SessionContext.anonymous(), "asm2026")
        session = SessionContext(make_actor("alice"))
        with pytest.raises(AccessDeniedError):
            store.create_ticket(session, target, event, ticket_attributes(), PaymentReference("pi_1"))
        assert not models.Ticket.objects.exists()


@pytest.mark.django_db
class TestCreateShirtOrder:
    def test_other_integrity_errors_propagate(self, store, elevated, make_user, monkeypatch):
        target = UserId(make_user("alice").pk)
        attributes = ShirtAttributes(size=ShirtSize.S, colour=ShirtColour.BLUE, method=PaymentMethod.BANK)

        def fail(**kwargs):
            raise IntegrityError("FOREIGN KEY constraint failed")

        monkeypatch.setattr(models.ShirtOrder.objects, "create", fail)
        with pytest.raises(IntegrityError):
            store.create_shirt_order(elevated, target, attributes, PaymentReference("bank-1"))
