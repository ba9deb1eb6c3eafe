"""Tests for issued-resource save guards.

Run with: pytest tests/test_signals.py -v
"""

import pytest

from marathon.domain.errors import InvalidPaymentTransitionError
from marathon.models import ShirtOrder, Ticket


@pytest.mark.django_db
class TestIssuedResourceGuard:
    """Paid resources never revert and never change hands."""

    @pytest.fixture
    def ticket(self, make_user, make_event):
        return Ticket.objects.create(
            user=make_user("alice"),
            event=make_event("asm2026"),
            method="stripe",
            payment_reference="pi_1",
            paid=True,
        )

    def test_paid_ticket_cannot_be_unpaid(self, ticket):
        ticket.paid = False
        with pytest.raises(InvalidPaymentTransitionError):
            ticket.save()
        ticket.refresh_from_db()
        assert ticket.paid

    def test_owner_cannot_change(self, ticket, make_user):
        ticket.user = make_user("bob")
        with pytest.raises(InvalidPaymentTransitionError):
            ticket.save()

    def test_other_edits_allowed(self, ticket):
        ticket.number_of_tickets = 4
        ticket.save()
        ticket.refresh_from_db()
        assert ticket.number_of_tickets == 4

    def test_unpaid_shirt_can_be_paid(self, make_user):
        order = ShirtOrder.objects.create(
            user=make_user("alice"), size="s", colour="blue", method="bank", payment_reference="b-1"
        )
        order.paid = True
        order.save()
        order.refresh_from_db()
        assert order.paid
