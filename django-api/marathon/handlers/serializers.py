"""Serializers for request validation and API responses.

Domain serializers read frozen domain models. Record serializers are plain
ModelSerializers for the self-service CRUD endpoints; owner and status are
never writable through them.
"""

from rest_framework import serializers

from marathon import models
from marathon.domain import (
    PaymentMethod,
    ShirtAttributes,
    ShirtColour,
    ShirtSize,
    TicketAttributes,
    TicketConfirmation,
    TicketCount,
)
from marathon.domain.value_objects import PAYMENT_REFERENCE_MAX_LENGTH


def _values(enum) -> list[str]:
    return [member.value for member in enum]


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    shortname = serializers.CharField()
    published = serializers.BooleanField()
    accepting_submissions = serializers.BooleanField()
    accepting_tickets = serializers.BooleanField()
    schedule_released = serializers.BooleanField()
    accepting_volunteers = serializers.BooleanField()
    accepting_backups = serializers.BooleanField()
    accepting_shirts = serializers.BooleanField()
    event_timezone = serializers.CharField()
    start_date = serializers.DateTimeField(allow_null=True)
    end_date = serializers.DateTimeField(allow_null=True)
    raised = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True)


class TicketSerializer(serializers.Serializer):
    """Serializer for Ticket domain model."""

    id = serializers.CharField()
    user_id = serializers.UUIDField(source="user_id.value")
    username = serializers.CharField()
    event = serializers.CharField()
    number_of_tickets = serializers.IntegerField(source="number_of_tickets.value")
    method = serializers.CharField(source="method.value")
    payment_reference = serializers.CharField(source="payment_reference.value")
    paid = serializers.BooleanField()
    created_at = serializers.DateTimeField()


class ShirtOrderSerializer(serializers.Serializer):
    """Serializer for ShirtOrder domain model."""

    id = serializers.CharField()
    user_id = serializers.UUIDField(source="user_id.value")
    username = serializers.CharField()
    size = serializers.CharField(source="size.value")
    colour = serializers.CharField(source="colour.value")
    method = serializers.CharField(source="method.value")
    payment_reference = serializers.CharField(source="payment_reference.value")
    paid = serializers.BooleanField()
    created_at = serializers.DateTimeField()


class VerificationSerializer(serializers.Serializer):
    """Serializer for VerificationRecord domain model."""

    id = serializers.CharField()
    code = serializers.CharField()
    user_id = serializers.UUIDField(source="user_id.value")
    username = serializers.CharField()
    created_at = serializers.DateTimeField()


class SharedSecretSerializer(serializers.Serializer):
    api_key = serializers.CharField(
        trim_whitespace=False, required=False, allow_blank=True, allow_null=True
    )


class GenerateTicketSerializer(SharedSecretSerializer):
    user_id = serializers.UUIDField()
    event = serializers.CharField(max_length=100)
    number_of_tickets = serializers.IntegerField(min_value=1)
    method = serializers.ChoiceField(choices=_values(PaymentMethod))
    payment_reference = serializers.CharField(
        required=False, allow_null=True, max_length=PAYMENT_REFERENCE_MAX_LENGTH
    )

    def attributes(self) -> TicketAttributes:
        data = self.validated_data
        return TicketAttributes(
            event=data["event"],
            number_of_tickets=TicketCount(data["number_of_tickets"]),
            method=PaymentMethod(data["method"]),
        )


class GenerateShirtSerializer(SharedSecretSerializer):
    user_id = serializers.UUIDField()
    size = serializers.ChoiceField(choices=_values(ShirtSize))
    colour = serializers.ChoiceField(choices=_values(ShirtColour))
    method = serializers.ChoiceField(choices=_values(PaymentMethod))
    payment_reference = serializers.CharField(
        required=False, allow_null=True, max_length=PAYMENT_REFERENCE_MAX_LENGTH
    )

    def attributes(self) -> ShirtAttributes:
        data = self.validated_data
        return ShirtAttributes(
            size=ShirtSize(data["size"]),
            colour=ShirtColour(data["colour"]),
            method=PaymentMethod(data["method"]),
        )


class ConfirmTicketSerializer(SharedSecretSerializer):
    payment_reference = serializers.CharField(max_length=PAYMENT_REFERENCE_MAX_LENGTH)
    number_of_tickets = serializers.IntegerField(min_value=1, required=False)

    def confirmation(self) -> TicketConfirmation | None:
        count = self.validated_data.get("number_of_tickets")
        if count is None:
            return None
        return TicketConfirmation(number_of_tickets=TicketCount(count))


class ConfirmShirtSerializer(SharedSecretSerializer):
    payment_reference = serializers.CharField(max_length=PAYMENT_REFERENCE_MAX_LENGTH)


class RunSerializer(serializers.ModelSerializer):
    event = serializers.SlugRelatedField(slug_field="shortname", read_only=True)
    runners = serializers.SlugRelatedField(slug_field="username", many=True, read_only=True)

    class Meta:
        model = models.Run
        fields = ["id", "event", "runners", "game", "category", "platform", "estimate", "scheduled_time"]


class SubmissionSerializer(serializers.ModelSerializer):
    runner = serializers.SlugRelatedField(slug_field="username", read_only=True)
    event = serializers.SlugRelatedField(slug_field="shortname", queryset=models.Event.objects.all())

    class Meta:
        model = models.Submission
        fields = ["id", "runner", "event", "game", "category", "platform", "estimate", "status", "created_at"]
        read_only_fields = ["status", "created_at"]

    def validate_event(self, event: models.Event) -> models.Event:
        if not event.accepting_submissions:
            raise serializers.ValidationError("This event is not accepting submissions.")
        return event


class VolunteerSerializer(serializers.ModelSerializer):
    volunteer = serializers.SlugRelatedField(slug_field="username", read_only=True)
    event = serializers.SlugRelatedField(slug_field="shortname", queryset=models.Event.objects.all())

    class Meta:
        model = models.Volunteer
        fields = [
            "id",
            "volunteer",
            "event",
            "job_type",
            "status",
            "event_host_time",
            "max_daily_host_time",
            "day_times",
            "experience",
            "additional_info",
            "created_at",
        ]
        read_only_fields = ["status", "created_at"]

    def validate_event(self, event: models.Event) -> models.Event:
        if not event.accepting_volunteers:
            raise serializers.ValidationError("This event is not accepting volunteers.")
        return event


class OwnTicketSerializer(serializers.ModelSerializer):
    event = serializers.SlugRelatedField(slug_field="shortname", read_only=True)
    user = serializers.SlugRelatedField(slug_field="username", read_only=True)

    class Meta:
        model = models.Ticket
        fields = ["id", "user", "event", "number_of_tickets", "method", "payment_reference", "paid", "created_at"]
        read_only_fields = fields


class OwnShirtOrderSerializer(serializers.ModelSerializer):
    user = serializers.SlugRelatedField(slug_field="username", read_only=True)

    class Meta:
        model = models.ShirtOrder
        fields = ["id", "user", "size", "colour", "method", "payment_reference", "paid", "created_at"]
        read_only_fields = fields
