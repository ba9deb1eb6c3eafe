"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
"""

import uuid

from django.contrib.auth.models import AbstractUser
from django.db import models
from django.db.models import Q

from marathon.domain.value_objects import (
    PAYMENT_REFERENCE_MAX_LENGTH,
    PaymentMethod,
    ReviewStatus,
    ShirtColour,
    ShirtSize,
)


def _choices(enum) -> list[tuple[str, str]]:
    return [(member.value, member.name.replace("_", " ").title()) for member in enum]


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    shortname = models.CharField(max_length=100, unique=True)
    published = models.BooleanField(default=False)
    accepting_submissions = models.BooleanField(default=False)
    accepting_tickets = models.BooleanField(default=False)
    schedule_released = models.BooleanField(default=False)
    accepting_volunteers = models.BooleanField(default=False)
    accepting_backups = models.BooleanField(default=False)
    accepting_shirts = models.BooleanField(default=False)
    event_timezone = models.CharField(max_length=64, blank=True, default="")
    start_date = models.DateTimeField(blank=True, null=True)
    end_date = models.DateTimeField(blank=True, null=True)
    raised = models.DecimalField(max_digits=12, decimal_places=2, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-start_date", "-created_at"]

    def __str__(self) -> str:
        return self.shortname


class Role(models.Model):
    """Bundle of capability flags, optionally scoped to one event."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    admin = models.BooleanField(default=False)
    can_manage_users = models.BooleanField(default=False)
    can_manage_content = models.BooleanField(default=False)
    runner = models.BooleanField(default=False)
    volunteer = models.BooleanField(default=False)
    event = models.ForeignKey(
        Event, on_delete=models.SET_NULL, blank=True, null=True, related_name="roles"
    )

    def __str__(self) -> str:
        return self.name


class User(AbstractUser):
    """Platform account. Capabilities come from the attached roles."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    verified = models.BooleanField(default=False)
    date_of_birth = models.DateField(blank=True, null=True)
    roles = models.ManyToManyField(Role, blank=True, related_name="users")


class Submission(models.Model):
    """A runner's request to run a game at an event."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    runner = models.ForeignKey(User, on_delete=models.CASCADE, related_name="submissions")
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="submissions")
    game = models.CharField(max_length=255)
    category = models.CharField(max_length=255)
    platform = models.CharField(max_length=100, blank=True, default="")
    estimate = models.CharField(max_length=20, blank=True, default="")
    status = models.CharField(
        max_length=20, choices=_choices(ReviewStatus), default=ReviewStatus.SUBMITTED.value
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["event", "status"], name="marathon_su_event_i_status_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.game} - {self.category}"


class Run(models.Model):
    """A scheduled run on an event's published schedule."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="runs")
    runners = models.ManyToManyField(User, blank=True, related_name="runs")
    game = models.CharField(max_length=255)
    category = models.CharField(max_length=255)
    platform = models.CharField(max_length=100, blank=True, default="")
    estimate = models.CharField(max_length=20, blank=True, default="")
    scheduled_time = models.DateTimeField(blank=True, null=True)

    class Meta:
        ordering = ["scheduled_time"]
        indexes = [
            models.Index(fields=["event", "scheduled_time"], name="marathon_ru_event_i_sched_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.game} - {self.category}"


class Volunteer(models.Model):
    """A volunteer application for an event."""

    class JobType(models.TextChoices):
        HOST = "host", "Host"
        SOCIAL = "social", "Social Media"
        RUN_MANAGEMENT = "runMgmt", "Runner Management"
        TECH = "tech", "Tech"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    volunteer = models.ForeignKey(
        User, on_delete=models.CASCADE, related_name="volunteer_applications"
    )
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="volunteers")
    job_type = models.CharField(max_length=20, choices=JobType.choices)
    status = models.CharField(
        max_length=20, choices=_choices(ReviewStatus), default=ReviewStatus.SUBMITTED.value
    )
    event_host_time = models.PositiveIntegerField(default=0)
    max_daily_host_time = models.PositiveIntegerField(default=0)
    day_times = models.JSONField(default=list, blank=True)
    experience = models.TextField(blank=True, default="")
    additional_info = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.volunteer} - {self.job_type}"


class Verification(models.Model):
    """One-time account verification code.

    `code` is indexed but deliberately not unique: lookups must notice when
    more than one row shares a code instead of the database hiding it.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    code = models.CharField(max_length=64, db_index=True)
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="verifications")
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return self.code


class Ticket(models.Model):
    """Event ticket, created unpaid and confirmed paid by payment reference."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(User, on_delete=models.PROTECT, related_name="tickets")
    event = models.ForeignKey(Event, on_delete=models.PROTECT, related_name="tickets")
    number_of_tickets = models.PositiveIntegerField(default=1)
    method = models.CharField(max_length=20, choices=_choices(PaymentMethod))
    payment_reference = models.CharField(max_length=PAYMENT_REFERENCE_MAX_LENGTH, unique=True)
    paid = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=Q(number_of_tickets__gt=0),
                name="marathon_ticket_count_gt_zero",
            ),
        ]

    def __str__(self) -> str:
        return self.payment_reference


class ShirtOrder(models.Model):
    """Merchandise order, created unpaid and confirmed paid by payment reference."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(User, on_delete=models.PROTECT, related_name="shirt_orders")
    size = models.CharField(max_length=8, choices=_choices(ShirtSize))
    colour = models.CharField(max_length=20, choices=_choices(ShirtColour))
    method = models.CharField(max_length=20, choices=_choices(PaymentMethod))
    payment_reference = models.CharField(max_length=PAYMENT_REFERENCE_MAX_LENGTH, unique=True)
    paid = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.payment_reference
