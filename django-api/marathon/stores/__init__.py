from marathon.stores.django_store import (
    DjangoEventStore,
    DjangoIssuanceStore,
    DjangoVerificationStore,
)
from marathon.stores.interfaces import EventStore, IssuanceStore, VerificationStore

__all__ = [
    "EventStore",
    "IssuanceStore",
    "VerificationStore",
    "DjangoEventStore",
    "DjangoIssuanceStore",
    "DjangoVerificationStore",
]
