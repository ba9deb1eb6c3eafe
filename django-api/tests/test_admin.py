"""Tests for the back-office admin site.

Run with: pytest tests/test_admin.py -v
"""

import pytest
from django.test import RequestFactory

from marathon.admin import EventAdmin, RunInline, TicketAdmin, site
from marathon.models import Event, Run, Ticket


def admin_request(user):
    request = RequestFactory().get("/admin/")
    request.user = user
    return request


@pytest.mark.django_db
class TestAdminSite:
    """Entry requires staff status plus the content capability."""

    def test_content_manager_enters(self, make_user):
        user = make_user("mod", can_manage_content=True)
        user.is_staff = True
        assert site.has_permission(admin_request(user))

    def test_staff_without_capability_refused(self, make_user):
        user = make_user("staff")
        user.is_staff = True
        assert not site.has_permission(admin_request(user))

    def test_capability_without_staff_refused(self, make_user):
        assert not site.has_permission(admin_request(make_user("mod", can_manage_content=True)))

    def test_admin_login_page_redirects_anonymous(self, client):
        response = client.get("/admin/")
        assert response.status_code == 302


@pytest.mark.django_db
class TestIssuedResourceAdmin:
    @pytest.fixture
    def ticket_admin(self):
        return TicketAdmin(Ticket, site)

    def test_tickets_never_added_by_hand(self, ticket_admin, make_user):
        request = admin_request(make_user("mod", can_manage_content=True))
        assert not ticket_admin.has_add_permission(request)

    def test_paid_ticket_cannot_be_deleted(self, ticket_admin, make_user, make_event):
        manager = make_user("mod", can_manage_content=True)
        ticket = Ticket.objects.create(
            user=manager, event=make_event("asm2026"), method="stripe", payment_reference="pi_1", paid=True
        )
        request = admin_request(manager)
        assert ticket_admin.has_change_permission(request, ticket)
        assert not ticket_admin.has_delete_permission(request, ticket)

    def test_queryset_follows_policy(self, ticket_admin, make_user, make_event):
        """Without the capability the admin shows only the user's own tickets."""
        alice, bob = make_user("alice"), make_user("bob")
        event = make_event("asm2026")
        Ticket.objects.create(user=alice, event=event, method="stripe", payment_reference="a-1")
        Ticket.objects.create(user=bob, event=event, method="stripe", payment_reference="b-1")
        rows = ticket_admin.get_queryset(admin_request(alice))
        assert [row.payment_reference for row in rows] == ["a-1"]


@pytest.mark.django_db
class TestRunInline:
    """Runs edited from the event page follow the run policy."""

    @pytest.fixture
    def run_inline(self):
        return RunInline(Event, site)

    def test_event_manager_sees_and_adds_runs(self, run_inline, make_user):
        user = make_user("boss", admin=True, can_manage_content=True)
        user.is_staff = True
        request = admin_request(user)
        assert EventAdmin(Event, site).has_change_permission(request)
        assert run_inline.has_view_permission(request)
        assert run_inline.has_add_permission(request, None)
        assert run_inline.has_change_permission(request)

    def test_admin_without_content_capability_reads_only(self, run_inline, make_user):
        request = admin_request(make_user("boss", admin=True))
        assert not run_inline.has_add_permission(request, None)
        assert not run_inline.has_delete_permission(request)

    def test_inline_queryset_hides_unpublished_runs(self, run_inline, make_user, make_event):
        Run.objects.create(event=make_event("live"), game="Celeste", category="Any%")
        Run.objects.create(event=make_event("draft", published=False), game="Secret", category="Any%")
        rows = run_inline.get_queryset(admin_request(make_user("member")))
        assert [row.game for row in rows] == ["Celeste"]
