"""Apply access policy decisions to Django querysets."""

from django.db.models import Model, QuerySet

from marathon import models
from marathon.context import AccessContext
from marathon.domain import Allow, FilteredAllow, Operation, RecordType
from marathon.domain.errors import AccessDeniedError, RecordNotFoundError

MODELS: dict[RecordType, type[Model]] = {
    RecordType.USER: models.User,
    RecordType.ROLE: models.Role,
    RecordType.EVENT: models.Event,
    RecordType.SUBMISSION: models.Submission,
    RecordType.RUN: models.Run,
    RecordType.VOLUNTEER: models.Volunteer,
    RecordType.VERIFICATION: models.Verification,
    RecordType.TICKET: models.Ticket,
    RecordType.SHIRT_ORDER: models.ShirtOrder,
}

_ACTIONS = {
    Operation.QUERY: "view",
    Operation.CREATE: "create",
    Operation.UPDATE: "update",
    Operation.DELETE: "delete",
}


def scoped(
    ctx: AccessContext,
    record_type: RecordType,
    operation: Operation,
    queryset: QuerySet | None = None,
) -> QuerySet:
    """Narrow `queryset` to the rows `ctx` may act on. Deny yields no rows."""
    if queryset is None:
        queryset = MODELS[record_type].objects.all()
    decision = ctx.decide(record_type, operation)
    if isinstance(decision, Allow):
        return queryset
    if isinstance(decision, FilteredAllow):
        return queryset.filter(**decision.lookups())
    return queryset.none()


def authorize(ctx: AccessContext, record_type: RecordType, operation: Operation) -> None:
    """Raise unless `ctx` may perform `operation` on some `record_type` rows."""
    if not ctx.decide(record_type, operation).permits:
        raise AccessDeniedError(_ACTIONS[operation])


def get_governed(
    ctx: AccessContext,
    record_type: RecordType,
    operation: Operation,
    pk,
    queryset: QuerySet | None = None,
) -> Model:
    """Fetch one row for `operation`.

    Rows hidden from the caller raise RecordNotFoundError. Rows the caller
    can see but not mutate raise AccessDeniedError.
    """
    row = scoped(ctx, record_type, operation, queryset).filter(pk=pk).first()
    if row is not None:
        return row
    if operation is not Operation.QUERY:
        if scoped(ctx, record_type, Operation.QUERY, queryset).filter(pk=pk).exists():
            raise AccessDeniedError(_ACTIONS[operation])
    raise RecordNotFoundError()
