"""Event service - catalog reads.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from marathon.context import SessionContext
from marathon.domain.errors import EventNotFoundError
from marathon.domain.models import Event
from marathon.stores.interfaces import EventStore


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self, session: SessionContext) -> list[Event]:
        """Return the events visible to the session."""
        return self._store.list_events(session)

    def get_event(self, session: SessionContext, shortname: str) -> Event:
        """Return a visible event by shortname.

        Raises:
            EventNotFoundError: If the event does not exist or is unpublished
                and the session may not see it.
        """
        event = self._store.get_event(session, shortname)
        if event is None:
            raise EventNotFoundError()
        return event
