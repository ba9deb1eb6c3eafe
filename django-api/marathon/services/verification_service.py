"""Account verification code lookup."""

import logging

from marathon.context import SessionContext
from marathon.domain import VerificationRecord
from marathon.domain.errors import (
    AmbiguousVerificationCodeError,
    MissingVerificationCodeError,
    VerificationNotFoundError,
)
from marathon.stores.interfaces import VerificationStore

logger = logging.getLogger(__name__)


class VerificationService:
    def __init__(self, store: VerificationStore) -> None:
        self._store = store

    def lookup(self, session: SessionContext, code: str) -> VerificationRecord:
        """Return the single verification record for `code`.

        The code itself is the caller's credential, so the lookup runs
        elevated and never picks one of several matches.

        Raises:
            MissingVerificationCodeError: If `code` is empty.
            VerificationNotFoundError: If no record has the code.
            AmbiguousVerificationCodeError: If more than one record has it.
        """
        if not code:
            raise MissingVerificationCodeError()
        matches = self._store.find_by_code(session.elevate("verification code lookup"), code)
        if not matches:
            raise VerificationNotFoundError()
        if len(matches) > 1:
            logger.error(
                "Verification code shared by %d records", len(matches), extra={"matches": len(matches)}
            )
            raise AmbiguousVerificationCodeError()
        return matches[0]
