from marathon.handlers.views import (
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

__all__ = [
    "ConfirmShirtView",
    "ConfirmTicketView",
    "EventDetailView",
    "EventListView",
    "GenerateShirtView",
    "GenerateTicketView",
    "RunListView",
    "ShirtOrderListView",
    "SubmissionDetailView",
    "SubmissionListView",
    "TicketListView",
    "VerificationLookupView",
    "VolunteerDetailView",
    "VolunteerListView",
]
