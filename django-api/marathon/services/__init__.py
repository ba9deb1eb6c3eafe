from marathon.services.event_service import EventService
from marathon.services.issuance_service import IssuanceService
from marathon.services.verification_service import VerificationService

__all__ = ["EventService", "IssuanceService", "VerificationService"]
