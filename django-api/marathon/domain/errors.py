"""Domain error codes for the marathon platform.

Errors fall into the categories callers are expected to branch on:
authorization (shared secret mismatch), eligibility (business precondition
unmet), conflict (uniqueness or multiplicity violated) and not-found.
Messages are user-safe; secret failures never say which credential failed.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    NOT_AUTHORIZED = "NOT_AUTHORIZED"
    ACCESS_DENIED = "ACCESS_DENIED"
    USER_NOT_ELIGIBLE = "USER_NOT_ELIGIBLE"
    EVENT_CLOSED = "EVENT_CLOSED"
    DUPLICATE_PAYMENT_REFERENCE = "DUPLICATE_PAYMENT_REFERENCE"
    AMBIGUOUS_VERIFICATION_CODE = "AMBIGUOUS_VERIFICATION_CODE"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    VERIFICATION_NOT_FOUND = "VERIFICATION_NOT_FOUND"
    RECORD_NOT_FOUND = "RECORD_NOT_FOUND"
    INVALID_ID = "INVALID_ID"
    INVALID_PAYMENT_REFERENCE = "INVALID_PAYMENT_REFERENCE"
    INVALID_PAYMENT_TRANSITION = "INVALID_PAYMENT_TRANSITION"
    MISSING_CODE = "MISSING_CODE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class AuthorizationError(DomainError):
    """Raised when a privileged call presents the wrong shared secret."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.NOT_AUTHORIZED, message="Not authorized")


class AccessDeniedError(DomainError):
    """Raised when the access policy refuses a mutation."""

    def __init__(self, action: str = "modify") -> None:
        super().__init__(
            code=ErrorCode.ACCESS_DENIED,
            message=f"You cannot {action} that record - it may not exist",
        )


class EligibilityError(DomainError):
    """A business precondition for issuance is not met."""


class UnverifiedUserError(EligibilityError):
    """Raised when issuance targets a missing or unverified user."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.USER_NOT_ELIGIBLE, message="Unverified user")


class EventClosedError(EligibilityError):
    """Raised when an event is not accepting tickets."""

    def __init__(self, shortname: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_CLOSED,
            message=f"Event {shortname} is not accepting tickets",
        )


class ConflictError(DomainError):
    """A uniqueness or multiplicity rule was violated."""


class DuplicatePaymentReferenceError(ConflictError):
    """Raised when a payment reference is already bound to a resource."""

    def __init__(self, kind: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_PAYMENT_REFERENCE,
            message=f"A {kind} with this payment reference already exists",
        )


class AmbiguousVerificationCodeError(ConflictError):
    """Raised when a verification code matches more than one record."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.AMBIGUOUS_VERIFICATION_CODE,
            message="Verification code matched more than one record",
        )


class NotFoundError(DomainError):
    """No record matched the request."""


class EventNotFoundError(NotFoundError):
    """Raised when an event is not found."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.EVENT_NOT_FOUND, message="Event not found")


class ResourceNotFoundError(NotFoundError):
    """Raised when no ticket or shirt order carries a payment reference."""

    def __init__(self, kind: str) -> None:
        super().__init__(
            code=ErrorCode.RESOURCE_NOT_FOUND,
            message=f"No {kind} found for this payment reference",
        )


class VerificationNotFoundError(NotFoundError):
    """Raised when a verification code matches nothing."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.VERIFICATION_NOT_FOUND,
            message="Verification code not found",
        )


class RecordNotFoundError(NotFoundError):
    """Raised when a governed record is outside the caller's visible set."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.RECORD_NOT_FOUND, message="Record not found")


class InvalidIdentifierError(DomainError):
    """Raised when an identifier is not a valid UUID."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INVALID_ID, message="Invalid identifier format")


class InvalidPaymentTransitionError(DomainError):
    """Raised when a save would unpay a resource or change its owner."""

    def __init__(self, detail: str) -> None:
        super().__init__(code=ErrorCode.INVALID_PAYMENT_TRANSITION, message=detail)


class InvalidPaymentReferenceError(DomainError):
    """Raised when a payment reference is blank or too long."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PAYMENT_REFERENCE,
            message="Invalid payment reference",
        )


class MissingVerificationCodeError(DomainError):
    """Raised when a verification lookup carries no code."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.MISSING_CODE, message="Missing code query")
