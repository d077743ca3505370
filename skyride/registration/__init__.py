"""Registration dialog: slot validators and the flow state machine."""

from skyride.registration.flow import FlowResult, RegistrationFlow
from skyride.registration.validation import (
    Accepted,
    AgeValidator,
    DateValidator,
    Rejected,
    RejectionReason,
    ValidationOutcome,
    validate_name,
)

__all__ = [
    "Accepted",
    "AgeValidator",
    "DateValidator",
    "FlowResult",
    "Rejected",
    "RegistrationFlow",
    "RejectionReason",
    "ValidationOutcome",
    "validate_name",
]
