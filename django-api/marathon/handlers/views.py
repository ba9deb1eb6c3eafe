"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Let the exception handler map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.conf import settings
from django.core.cache import cache
from rest_framework import generics, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from marathon import models
from marathon.cache import CATALOG_TIMEOUT, EVENT_LIST_KEY, event_detail_key
from marathon.context import SessionContext
from marathon.domain import Allow, Operation, RecordType, ResourceKind
from marathon.handlers.serializers import (
    ConfirmShirtSerializer,
    ConfirmTicketSerializer,
    EventSerializer,
    GenerateShirtSerializer,
    GenerateTicketSerializer,
    OwnShirtOrderSerializer,
    OwnTicketSerializer,
    RunSerializer,
    ShirtOrderSerializer,
    SubmissionSerializer,
    TicketSerializer,
    VerificationSerializer,
    VolunteerSerializer,
)
from marathon.services import EventService, IssuanceService, VerificationService
from marathon.stores import DjangoEventStore, DjangoIssuanceStore, DjangoVerificationStore
from marathon.stores.governed import authorize, get_governed, scoped

_OPERATIONS = {
    "GET": Operation.QUERY,
    "HEAD": Operation.QUERY,
    "OPTIONS": Operation.QUERY,
    "POST": Operation.CREATE,
    "PUT": Operation.UPDATE,
    "PATCH": Operation.UPDATE,
    "DELETE": Operation.DELETE,
}


def issuance_service() -> IssuanceService:
    return IssuanceService(DjangoIssuanceStore(), shared_secret=settings.ISSUANCE_API_KEY)


class SessionContextMixin:
    """Resolve the caller's SessionContext once, after DRF authentication."""

    session_context: SessionContext

    def initial(self, request: Request, *args, **kwargs) -> None:
        super().initial(request, *args, **kwargs)
        self.session_context = SessionContext.for_user(request.user)


class GovernedRecordMixin(SessionContextMixin):
    """Generic-view plumbing that routes every row access through the access policy."""

    record_type: RecordType
    base_queryset = None
    owner_field: str | None = None

    def get_queryset(self):
        return scoped(self.session_context, self.record_type, Operation.QUERY, self.base_queryset.all())

    def get_object(self):
        operation = _OPERATIONS[self.request.method]
        obj = get_governed(
            self.session_context,
            self.record_type,
            operation,
            self.kwargs["pk"],
            self.base_queryset.all(),
        )
        self.check_object_permissions(self.request, obj)
        return obj

    def perform_create(self, serializer) -> None:
        authorize(self.session_context, self.record_type, Operation.CREATE)
        serializer.save(**{self.owner_field: self.request.user})


class EventListView(SessionContextMixin, APIView):
    """Handler for GET /api/events"""

    def get(self, request: Request) -> Response:
        public = not isinstance(
            self.session_context.decide(RecordType.EVENT, Operation.QUERY), Allow
        )
        if public:
            cached = cache.get(EVENT_LIST_KEY)
            if cached is not None:
                return Response(cached)

        events = EventService(DjangoEventStore()).list_events(self.session_context)
        data = EventSerializer(events, many=True).data
        if public:
            cache.set(EVENT_LIST_KEY, data, CATALOG_TIMEOUT)
        return Response(data)


class EventDetailView(SessionContextMixin, APIView):
    """Handler for GET /api/events/{shortname}"""

    def get(self, request: Request, shortname: str) -> Response:
        public = not isinstance(
            self.session_context.decide(RecordType.EVENT, Operation.QUERY), Allow
        )
        key = event_detail_key(shortname)
        if public:
            cached = cache.get(key)
            if cached is not None:
                return Response(cached)

        event = EventService(DjangoEventStore()).get_event(self.session_context, shortname)
        data = EventSerializer(event).data
        if public:
            cache.set(key, data, CATALOG_TIMEOUT)
        return Response(data)


class RunListView(GovernedRecordMixin, generics.ListAPIView):
    """Handler for GET /api/runs"""

    record_type = RecordType.RUN
    base_queryset = models.Run.objects.select_related("event").prefetch_related("runners")
    serializer_class = RunSerializer


class SubmissionListView(GovernedRecordMixin, generics.ListCreateAPIView):
    """Handler for GET|POST /api/submissions"""

    record_type = RecordType.SUBMISSION
    base_queryset = models.Submission.objects.select_related("runner", "event")
    serializer_class = SubmissionSerializer
    owner_field = "runner"


class SubmissionDetailView(GovernedRecordMixin, generics.RetrieveUpdateDestroyAPIView):
    """Handler for GET|PATCH|DELETE /api/submissions/{id}"""

    record_type = RecordType.SUBMISSION
    base_queryset = models.Submission.objects.select_related("runner", "event")
    serializer_class = SubmissionSerializer


class VolunteerListView(GovernedRecordMixin, generics.ListCreateAPIView):
    """Handler for GET|POST /api/volunteers"""

    record_type = RecordType.VOLUNTEER
    base_queryset = models.Volunteer.objects.select_related("volunteer", "event")
    serializer_class = VolunteerSerializer
    owner_field = "volunteer"


class VolunteerDetailView(GovernedRecordMixin, generics.RetrieveUpdateDestroyAPIView):
    """Handler for GET|PATCH|DELETE /api/volunteers/{id}"""

    record_type = RecordType.VOLUNTEER
    base_queryset = models.Volunteer.objects.select_related("volunteer", "event")
    serializer_class = VolunteerSerializer


class TicketListView(GovernedRecordMixin, generics.ListAPIView):
    """Handler for GET /api/tickets"""

    record_type = RecordType.TICKET
    base_queryset = models.Ticket.objects.select_related("user", "event")
    serializer_class = OwnTicketSerializer


class ShirtOrderListView(GovernedRecordMixin, generics.ListAPIView):
    """Handler for GET /api/shirts"""

    record_type = RecordType.SHIRT_ORDER
    base_queryset = models.ShirtOrder.objects.select_related("user")
    serializer_class = OwnShirtOrderSerializer


class GenerateTicketView(SessionContextMixin, APIView):
    """Handler for POST /api/tickets/generate"""

    def post(self, request: Request) -> Response:
        serializer = GenerateTicketSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        ticket = issuance_service().generate(
            self.session_context,
            ResourceKind.TICKET,
            str(data["user_id"]),
            serializer.attributes(),
            data.get("api_key"),
            data.get("payment_reference"),
        )
        return Response(TicketSerializer(ticket).data, status=status.HTTP_201_CREATED)


class ConfirmTicketView(SessionContextMixin, APIView):
    """Handler for POST /api/tickets/confirm"""

    def post(self, request: Request) -> Response:
        serializer = ConfirmTicketSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        ticket = issuance_service().confirm(
            self.session_context,
            ResourceKind.TICKET,
            data["payment_reference"],
            serializer.confirmation(),
            data.get("api_key"),
        )
        return Response(TicketSerializer(ticket).data)


class GenerateShirtView(SessionContextMixin, APIView):
    """Handler for POST /api/shirts/generate"""

    def post(self, request: Request) -> Response:
        serializer = GenerateShirtSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        order = issuance_service().generate(
            self.session_context,
            ResourceKind.SHIRT_ORDER,
            str(data["user_id"]),
            serializer.attributes(),
            data.get("api_key"),
            data.get("payment_reference"),
        )
        return Response(ShirtOrderSerializer(order).data, status=status.HTTP_201_CREATED)


class ConfirmShirtView(SessionContextMixin, APIView):
    """Handler for POST /api/shirts/confirm"""

    def post(self, request: Request) -> Response:
        serializer = ConfirmShirtSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        order = issuance_service().confirm(
            self.session_context,
            ResourceKind.SHIRT_ORDER,
            data["payment_reference"],
            None,
            data.get("api_key"),
        )
        return Response(ShirtOrderSerializer(order).data)


class VerificationLookupView(SessionContextMixin, APIView):
    """Handler for GET /api/verification?code={code}"""

    def get(self, request: Request) -> Response:
        code = request.query_params.get("code", "")
        record = VerificationService(DjangoVerificationStore()).lookup(self.session_context, code)
        return Response(VerificationSerializer(record).data)
