from saferpay.models.enums import Action, ErrorKind, TransactionState
from saferpay.models.parameters import (
    ParameterCollection,
    encode_form,
    new_complete_params,
    new_complete_response,
    new_confirm_params,
    new_init_params,
)

__all__ = [
    "Action",
    "ErrorKind",
    "TransactionState",
    "ParameterCollection",
    "encode_form",
    "new_init_params",
    "new_confirm_params",
    "new_complete_params",
    "new_complete_response",
]
