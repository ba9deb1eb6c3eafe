"""Shared-secret check for privileged callers (payment webhooks, back office)."""

import hmac
import logging

from marathon.domain.errors import AuthorizationError

logger = logging.getLogger(__name__)


def require_shared_secret(supplied: str | None, configured: str, operation: str) -> None:
    """Compare secrets byte-for-byte in constant time.

    An unconfigured secret rejects every caller.

    Raises:
        AuthorizationError: On any mismatch. The error carries no detail.
    """
    if not configured:
        logger.error("Shared secret is not configured; rejecting %s", operation)
        raise AuthorizationError()
    if supplied is None or not hmac.compare_digest(
        supplied.encode("utf-8"), configured.encode("utf-8")
    ):
        logger.warning("Shared secret mismatch on %s", operation)
        raise AuthorizationError()
