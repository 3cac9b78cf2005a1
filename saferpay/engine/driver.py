"""
Transaction driver: runs the three Saferpay hosting phases.

  1. initialize: CreatePayInit, returns the payment page URL for the payer
  2. confirm:    read the signed PayConfirm message handed back after
                 payment and have Saferpay verify its signature
  3. complete:   PayCompleteV2 with the carried ID/AMOUNT/ACCOUNTID and an
                 action (Settlement unless told otherwise)

Guarantees:
  - complete never touches the network when the confirmation carries no ID
  - privileged actions (anything but Settlement) are never sent without a
    credential
  - the credential travels in the request body only; no collection keeps it

One driver instance tracks one transaction. The gateway and logger it
holds can be shared between drivers; the driver itself keeps no state
beyond ``state`` and the collections passed through it.
"""

from typing import Optional, Union

from saferpay.audit.logger import LoggerLike, resolve_logger
from saferpay.engine.errors import (
    ConfirmRequiredError,
    CredentialRequiredError,
    InvalidResponseFormat,
)
from saferpay.engine.gateway import SaferpayGateway
from saferpay.engine.xml_extractor import fill_from_xml
from saferpay.models.enums import Action, TransactionState
from saferpay.models.parameters import (
    ACTION,
    CARRIED_FIELDS,
    DATA,
    ID,
    SIGNATURE,
    SP_PASSWORD,
    ParameterCollection,
    encode_form,
    new_complete_params,
    new_complete_response,
    new_confirm_params,
)

# Length of the non-XML status prefix ("OK:") in front of a PayCompleteV2 answer.
COMPLETE_RESPONSE_PREFIX_LENGTH = 3


class TransactionDriver:
    """
    Drives a single transaction through initialize → confirm → complete.

    Args:
        gateway: Gateway used for every round trip.
        logger: Logging sink. Defaults to a private NullLogger.
    """

    def __init__(self, gateway: SaferpayGateway, logger: Optional[LoggerLike] = None):
        self._gateway = gateway
        self._logger = resolve_logger(logger)
        self._state = TransactionState.UNINITIALIZED

    @property
    def state(self) -> TransactionState:
        return self._state

    @property
    def gateway(self) -> SaferpayGateway:
        return self._gateway

    def _advance(self, state: TransactionState) -> None:
        self._logger.debug("Transaction %s -> %s", self._state.value, state.value)
        self._state = state

    def _fill_from_xml(self, collection: ParameterCollection, xml: str) -> None:
        try:
            fill_from_xml(collection, xml)
        except InvalidResponseFormat:
            self._logger.critical("Saferpay: Invalid xml received from saferpay", extra={"content": xml})
            raise

    # ─── Phase 1 ───────────────────────────────────────────────────────

    def initialize(self, init_params: ParameterCollection) -> str:
        """
        Send a PayInit request.

        Returns:
            The raw response content: the URL the payer is redirected to.
        """
        content = self._gateway.send(init_params.request_path, init_params.serialize())
        self._advance(TransactionState.INITIALIZED)
        return content

    # ─── Phase 2 ───────────────────────────────────────────────────────

    def confirm(
        self,
        xml: str,
        signature: str,
        confirm_params: Optional[ParameterCollection] = None,
    ) -> ParameterCollection:
        """
        Verify a PayConfirm message and return its attributes.

        The attributes are read from ``xml`` itself; the verification call
        only has to succeed. If it fails the error propagates; a
        caller-supplied collection is already filled at that point and must
        not be treated as confirmed.

        Args:
            xml: The DATA value posted back by Saferpay.
            signature: The SIGNATURE value posted back by Saferpay.
            confirm_params: Collection to fill. A fresh one when omitted.
        """
        if confirm_params is None:
            confirm_params = new_confirm_params()

        self._fill_from_xml(confirm_params, xml)
        self._gateway.send(
            confirm_params.request_path,
            encode_form({DATA: xml, SIGNATURE: signature}),
        )

        self._advance(TransactionState.CONFIRMED)
        return confirm_params

    # ─── Phase 3 ───────────────────────────────────────────────────────

    def complete(
        self,
        confirm_params: ParameterCollection,
        action: Union[Action, str] = Action.SETTLEMENT,
        credential: Optional[str] = None,
        complete_params: Optional[ParameterCollection] = None,
        complete_response: Optional[ParameterCollection] = None,
    ) -> ParameterCollection:
        """
        Finish a verified transaction with PayCompleteV2.

        Args:
            confirm_params: Result of ``confirm``; must carry an ID.
            action: Settlement (default), Cancel or Close.
            credential: spPassword; required for anything but Settlement.
            complete_params: Request collection to fill. Fresh when omitted.
            complete_response: Collection receiving the answer's attributes.
                Fresh when omitted.

        Raises:
            ConfirmRequiredError: ``confirm_params`` has no ID.
            CredentialRequiredError: Non-settlement action without credential.
            ValueError: ``action`` is not a known action.
        """
        if confirm_params.get(ID) is None:
            self._logger.critical("Saferpay: call confirm before complete!")
            raise ConfirmRequiredError()

        action = Action(action)

        if complete_params is None:
            complete_params = new_complete_params()

        for name in CARRIED_FIELDS:
            complete_params.set(name, confirm_params.get(name))
        complete_params.set(ACTION, action.value)

        if action.requires_credential and not credential:
            self._logger.critical(
                "Saferpay: action %s requires a password!", action.value,
                extra={"action": action.value},
            )
            raise CredentialRequiredError(action.value)

        request_data = complete_params.data()
        if credential is not None:
            request_data[SP_PASSWORD] = credential

        content = self._gateway.send(complete_params.request_path, encode_form(request_data))

        if complete_response is None:
            complete_response = new_complete_response()

        self._fill_from_xml(complete_response, content[COMPLETE_RESPONSE_PREFIX_LENGTH:])

        self._advance(TransactionState.COMPLETED)
        return complete_response
