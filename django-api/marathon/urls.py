from django.urls import path

from marathon.handlers import (
    ConfirmShirtView,
    ConfirmTicketView,
    EventDetailView,
    EventListView,
    GenerateShirtView,
    GenerateTicketView,
    RunListView,
    ShirtOrderListView,
    SubmissionDetailView,
    SubmissionListView,
    TicketListView,
    VerificationLookupView,
    VolunteerDetailView,
    VolunteerListView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:shortname>", EventDetailView.as_view(), name="event-detail"),
    path("runs", RunListView.as_view(), name="run-list"),
    path("submissions", SubmissionListView.as_view(), name="submission-list"),
    path("submissions/<uuid:pk>", SubmissionDetailView.as_view(), name="submission-detail"),
    path("volunteers", VolunteerListView.as_view(), name="volunteer-list"),
    path("volunteers/<uuid:pk>", VolunteerDetailView.as_view(), name="volunteer-detail"),
    path("tickets", TicketListView.as_view(), name="ticket-list"),
    path("tickets/generate", GenerateTicketView.as_view(), name="ticket-generate"),
    path("tickets/confirm", ConfirmTicketView.as_view(), name="ticket-confirm"),
    path("shirts", ShirtOrderListView.as_view(), name="shirt-list"),
    path("shirts/generate", GenerateShirtView.as_view(), name="shirt-generate"),
    path("shirts/confirm", ConfirmShirtView.as_view(), name="shirt-confirm"),
    path("verification", VerificationLookupView.as_view(), name="verification-lookup"),
]
