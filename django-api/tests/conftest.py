"""Pytest configuration and shared fixtures."""

import uuid
from dataclasses import replace
from datetime import datetime, timezone

import pytest
from rest_framework.test import APIClient

from marathon.domain import (
    Account,
    Actor,
    Event,
    EventId,
    PaymentReference,
    ShirtAttributes,
    ShirtOrder,
    Ticket,
    TicketAttributes,
    TicketConfirmation,
    UserId,
    VerificationRecord,
)
from marathon.domain.errors import DuplicatePaymentReferenceError
from marathon.stores.interfaces import IssuanceStore, VerificationStore

API_KEY = "test-api-key"


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_key(settings) -> str:
    settings.ISSUANCE_API_KEY = API_KEY
    return API_KEY


@pytest.fixture
def make_user(db):
    """Create a user, optionally holding one role with the given flags."""
    from marathon.models import Role, User

    def _make(username: str, verified: bool = True, role_event=None, **flags) -> User:
        user = User.objects.create_user(username=username, password="pw-not-used", verified=verified)
        if flags:
            role = Role.objects.create(name=f"{username} role", event=role_event, **flags)
            user.roles.add(role)
        return user

    return _make


@pytest.fixture
def make_event(db):
    from marathon.models import Event as EventRow

    def _make(shortname: str, **fields) -> EventRow:
        defaults = {"name": shortname.upper(), "published": True, "accepting_tickets": True}
        defaults.update(fields)
        return EventRow.objects.create(shortname=shortname, **defaults)

    return _make


def actor(username: str = "runner", **flags) -> Actor:
    return Actor(user_id=UserId(uuid.uuid4()), username=username, **flags)


@pytest.fixture
def make_actor():
    return actor


def domain_event(shortname: str = "asm2026", accepting_tickets: bool = True) -> Event:
    return Event(
        id=EventId(uuid.uuid4()),
        name=shortname.upper(),
        shortname=shortname,
        published=True,
        accepting_submissions=False,
        accepting_tickets=accepting_tickets,
        schedule_released=False,
        accepting_volunteers=False,
        accepting_backups=False,
        accepting_shirts=False,
        event_timezone="Australia/Melbourne",
        start_date=None,
        end_date=None,
        raised=None,
    )


class InMemoryIssuanceStore(IssuanceStore):
    """Dict-backed store that records the context of every call."""

    def __init__(self) -> None:
        self.accounts: dict[UserId, Account] = {}
        self.events: dict[str, Event] = {}
        self.tickets: dict[str, Ticket] = {}
        self.shirt_orders: dict[str, ShirtOrder] = {}
        self.contexts: list = []

    def add_account(self, username: str, verified: bool) -> Account:
        account = Account(id=UserId(uuid.uuid4()), username=username, verified=verified)
        self.accounts[account.id] = account
        return account

    def get_account(self, ctx, user_id):
        self.contexts.append(ctx)
        return self.accounts.get(user_id)

    def get_event(self, ctx, shortname):
        self.contexts.append(ctx)
        return self.events.get(shortname)

    def create_ticket(self, ctx, user_id, event, attributes: TicketAttributes, reference: PaymentReference):
        self.contexts.append(ctx)
        if reference.value in self.tickets:
            raise DuplicatePaymentReferenceError("ticket")
        ticket = Ticket(
            id=str(uuid.uuid4()),
            user_id=user_id,
            username=self.accounts[user_id].username,
            event=event.shortname,
            number_of_tickets=attributes.number_of_tickets,
            method=attributes.method,
            payment_reference=reference,
            paid=False,
            created_at=datetime.now(timezone.utc),
        )
        self.tickets[reference.value] = ticket
        return ticket

    def create_shirt_order(self, ctx, user_id, attributes: ShirtAttributes, reference: PaymentReference):
        self.contexts.append(ctx)
        if reference.value in self.shirt_orders:
            raise DuplicatePaymentReferenceError("shirt order")
        order = ShirtOrder(
            id=str(uuid.uuid4()),
            user_id=user_id,
            username=self.accounts[user_id].username,
            size=attributes.size,
            colour=attributes.colour,
            method=attributes.method,
            payment_reference=reference,
            paid=False,
            created_at=datetime.now(timezone.utc),
        )
        self.shirt_orders[reference.value] = order
        return order

    def confirm_ticket(self, ctx, reference, confirmation: TicketConfirmation | None):
        self.contexts.append(ctx)
        ticket = self.tickets.get(reference.value)
        if ticket is None or ticket.paid:
            return ticket
        changes = {"paid": True}
        if confirmation is not None:
            changes["number_of_tickets"] = confirmation.number_of_tickets
        self.tickets[reference.value] = ticket = replace(ticket, **changes)
        return ticket

    def confirm_shirt_order(self, ctx, reference):
        self.contexts.append(ctx)
        order = self.shirt_orders.get(reference.value)
        if order is None or order.paid:
            return order
        self.shirt_orders[reference.value] = order = replace(order, paid=True)
        return order


class InMemoryVerificationStore(VerificationStore):
    def __init__(self) -> None:
        self.records: list[VerificationRecord] = []
        self.contexts: list = []

    def add(self, code: str, username: str = "runner") -> VerificationRecord:
        record = VerificationRecord(
            id=str(uuid.uuid4()),
            code=code,
            user_id=UserId(uuid.uuid4()),
            username=username,
            created_at=datetime.now(timezone.utc),
        )
        self.records.append(record)
        return record

    def find_by_code(self, ctx, code):
        self.contexts.append(ctx)
        return [r for r in self.records if r.code == code]


@pytest.fixture
def issuance_store() -> InMemoryIssuanceStore:
    store = InMemoryIssuanceStore()
    store.events["asm2026"] = domain_event("asm2026")
    store.events["closed2026"] = domain_event("closed2026", accepting_tickets=False)
    return store


@pytest.fixture
def verification_store() -> InMemoryVerificationStore:
    return InMemoryVerificationStore()
