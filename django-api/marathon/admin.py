"""Back-office admin.

Entry requires the content-management capability. Inside, every model admin
derives its queryset and permissions from the access policy evaluator, so
the admin shows each manager exactly what the API would.
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from marathon import models
from marathon.context import SessionContext
from marathon.domain import Operation, RecordType
from marathon.stores.governed import scoped


class MarathonAdminSite(admin.AdminSite):
    site_header = "Marathon administration"

    def has_permission(self, request) -> bool:
        if not (request.user.is_active and request.user.is_staff):
            return False
        actor = SessionContext.for_user(request.user).actor
        return actor is not None and actor.can_manage_content


site = MarathonAdminSite(name="marathon_admin")


class GovernedPermissions:
    """Querysets and permissions taken from the access policy evaluator."""

    record_type: RecordType

    def _session(self, request) -> SessionContext:
        if not hasattr(request, "_marathon_session"):
            request._marathon_session = SessionContext.for_user(request.user)
        return request._marathon_session

    def _permits(self, request, operation: Operation, obj=None) -> bool:
        session = self._session(request)
        if obj is None:
            return session.decide(self.record_type, operation).permits
        return scoped(session, self.record_type, operation, self.model.objects.filter(pk=obj.pk)).exists()

    def get_queryset(self, request):
        return scoped(self._session(request), self.record_type, Operation.QUERY, super().get_queryset(request))


class GovernedAdmin(GovernedPermissions, admin.ModelAdmin):
    def has_module_permission(self, request) -> bool:
        return self._permits(request, Operation.QUERY)

    def has_view_permission(self, request, obj=None) -> bool:
        return self._permits(request, Operation.QUERY, obj)

    def has_add_permission(self, request) -> bool:
        return self._permits(request, Operation.CREATE)

    def has_change_permission(self, request, obj=None) -> bool:
        return self._permits(request, Operation.UPDATE, obj)

    def has_delete_permission(self, request, obj=None) -> bool:
        return self._permits(request, Operation.DELETE, obj)


class IssuedResourceAdmin(GovernedAdmin):
    """Issued resources are created by the issuance workflow, never by hand."""

    readonly_fields = ["user", "payment_reference", "paid", "created_at", "updated_at"]

    def has_add_permission(self, request) -> bool:
        return False

    def has_delete_permission(self, request, obj=None) -> bool:
        if obj is not None and obj.paid:
            return False
        return super().has_delete_permission(request, obj)


class GovernedInline(GovernedPermissions, admin.TabularInline):
    """Inline rows are checked per record type; `obj` here is the parent."""

    def has_view_permission(self, request, obj=None) -> bool:
        return self._permits(request, Operation.QUERY)

    def has_add_permission(self, request, obj=None) -> bool:
        return self._permits(request, Operation.CREATE)

    def has_change_permission(self, request, obj=None) -> bool:
        return self._permits(request, Operation.UPDATE)

    def has_delete_permission(self, request, obj=None) -> bool:
        return self._permits(request, Operation.DELETE)


class RunInline(GovernedInline):
    record_type = RecordType.RUN
    model = models.Run
    extra = 1


@admin.register(models.Event, site=site)
class EventAdmin(GovernedAdmin):
    record_type = RecordType.EVENT
    list_display = ["name", "shortname", "published", "start_date"]
    list_filter = ["published", "accepting_submissions", "accepting_tickets"]
    search_fields = ["name", "shortname"]
    inlines = [RunInline]


@admin.register(models.Run, site=site)
class RunAdmin(GovernedAdmin):
    record_type = RecordType.RUN
    list_display = ["game", "category", "event", "scheduled_time"]
    list_filter = ["event"]


@admin.register(models.Submission, site=site)
class SubmissionAdmin(GovernedAdmin):
    record_type = RecordType.SUBMISSION
    list_display = ["game", "category", "runner", "event", "status"]
    list_filter = ["event", "status"]
    search_fields = ["game", "runner__username"]


@admin.register(models.Volunteer, site=site)
class VolunteerAdmin(GovernedAdmin):
    record_type = RecordType.VOLUNTEER
    list_display = ["volunteer", "job_type", "event", "status"]
    list_filter = ["event", "job_type", "status"]


@admin.register(models.Ticket, site=site)
class TicketAdmin(IssuedResourceAdmin):
    record_type = RecordType.TICKET
    list_display = ["payment_reference", "user", "event", "number_of_tickets", "paid"]
    list_filter = ["event", "paid", "method"]
    search_fields = ["payment_reference", "user__username"]


@admin.register(models.ShirtOrder, site=site)
class ShirtOrderAdmin(IssuedResourceAdmin):
    record_type = RecordType.SHIRT_ORDER
    list_display = ["payment_reference", "user", "size", "colour", "paid"]
    list_filter = ["paid", "size", "colour"]
    search_fields = ["payment_reference", "user__username"]


@admin.register(models.Verification, site=site)
class VerificationAdmin(GovernedAdmin):
    record_type = RecordType.VERIFICATION
    list_display = ["code", "user", "created_at"]
    search_fields = ["code", "user__username"]


@admin.register(models.Role, site=site)
class RoleAdmin(GovernedAdmin):
    record_type = RecordType.ROLE
    list_display = ["name", "admin", "can_manage_users", "can_manage_content", "event"]


@admin.register(models.User, site=site)
class MarathonUserAdmin(GovernedAdmin, UserAdmin):
    record_type = RecordType.USER
    list_display = ["username", "email", "verified", "is_staff"]
    list_filter = ["verified", "is_staff", "roles"]
    fieldsets = UserAdmin.fieldsets + (("Platform", {"fields": ("verified", "date_of_birth", "roles")}),)
