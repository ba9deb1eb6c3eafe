"""Cache keys for the public event catalog.

Only the view seen by callers without the admin capability is cached; it is
the same for every such caller.
"""

from django.core.cache import cache

CATALOG_TIMEOUT = 60 * 5

EVENT_LIST_KEY = "events:published"


def event_detail_key(shortname: str) -> str:
    return f"events:published:{shortname}"


def invalidate_event(*shortnames: str) -> None:
    cache.delete_many([EVENT_LIST_KEY, *(event_detail_key(name) for name in shortnames if name)])
