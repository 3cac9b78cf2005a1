"""Client for the three-phase Saferpay hosting protocol (PayInit → PayConfirm → PayCompleteV2)."""

from saferpay.engine.driver import TransactionDriver
from saferpay.engine.errors import (
    ConfirmRequiredError,
    CredentialRequiredError,
    InvalidResponseFormat,
    ProviderError,
    SaferpayError,
    TransportError,
    TransportNotConfiguredError,
)
from saferpay.engine.gateway import SaferpayGateway
from saferpay.engine.outcome import PhaseOutcome, run_phase
from saferpay.models import (
    Action,
    ErrorKind,
    ParameterCollection,
    TransactionState,
    new_complete_params,
    new_complete_response,
    new_confirm_params,
    new_init_params,
)

__all__ = [
    "TransactionDriver",
    "SaferpayGateway",
    "PhaseOutcome",
    "run_phase",
    "Action",
    "ErrorKind",
    "TransactionState",
    "ParameterCollection",
    "new_init_params",
    "new_confirm_params",
    "new_complete_params",
    "new_complete_response",
    "SaferpayError",
    "TransportNotConfiguredError",
    "TransportError",
    "ProviderError",
    "InvalidResponseFormat",
    "ConfirmRequiredError",
    "CredentialRequiredError",
]
