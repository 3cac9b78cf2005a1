"""Enumerations for the Saferpay transaction domain model."""

from enum import Enum


class Action(str, Enum):
    """Operations accepted by the PayCompleteV2 call."""

    SETTLEMENT = "Settlement"
    CANCEL = "Cancel"
    CLOSE = "Close"

    @property
    def requires_credential(self) -> bool:
        return self is not Action.SETTLEMENT


class TransactionState(str, Enum):
    """Lifecycle states for a single transaction driver."""

    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"


class ErrorKind(str, Enum):
    """Categorized reasons a phase can fail."""

    TRANSPORT_NOT_CONFIGURED = "transport_not_configured"
    TRANSPORT_ERROR = "transport_error"
    PROVIDER_ERROR = "provider_error"
    INVALID_RESPONSE_FORMAT = "invalid_response_format"
    CONFIRM_REQUIRED = "confirm_required"
    CREDENTIAL_REQUIRED = "credential_required"
