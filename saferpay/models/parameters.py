"""
Parameter collections exchanged with the Saferpay hosting endpoints.

Each phase of a transaction (PayInit, PayConfirm, PayComplete) accepts an
overlapping but non-identical set of fields, so a collection is an open
name → value bag rather than a fixed record. What distinguishes the phases
is the endpoint they are posted to: every collection carries the request
path of its phase, pre-set by the phase constructors below.

Field names are case-sensitive and sent exactly as stored.
"""

from typing import Iterator, Mapping, Optional
from urllib.parse import urlencode

# ─── Well-known field names ────────────────────────────────────────────
ACCOUNTID = "ACCOUNTID"
AMOUNT = "AMOUNT"
CURRENCY = "CURRENCY"
DESCRIPTION = "DESCRIPTION"
ORDERID = "ORDERID"
SUCCESSLINK = "SUCCESSLINK"
FAILLINK = "FAILLINK"
BACKLINK = "BACKLINK"
NOTIFYURL = "NOTIFYURL"
ID = "ID"
ACTION = "ACTION"
DATA = "DATA"
SIGNATURE = "SIGNATURE"
SP_PASSWORD = "spPassword"

# Fields handed from a verified confirmation to the completion request.
CARRIED_FIELDS = (ID, AMOUNT, ACCOUNTID)

# ─── Endpoint paths (relative to the hosting base URL) ─────────────────
PAY_INIT_PATH = "CreatePayInit.asp"
PAY_CONFIRM_PATH = "VerifyPayConfirm.asp"
PAY_COMPLETE_PATH = "PayCompleteV2.asp"


def encode_form(data: Mapping[str, Optional[str]]) -> str:
    """
    Encode a mapping as an application/x-www-form-urlencoded body.

    Entries whose value is None are left out; the remaining pairs keep the
    mapping's iteration order.
    """
    return urlencode([(name, value) for name, value in data.items() if value is not None])


class ParameterCollection:
    """
    Ordered bag of named fields bound to one Saferpay endpoint.

    ``get`` never raises on an unknown name; it returns None, which is also
    how an absent field is represented.
    """

    def __init__(self, request_path: str = "", fields: Optional[Mapping[str, Optional[str]]] = None):
        self._request_path = request_path
        self._fields: dict[str, Optional[str]] = {}
        if fields:
            self.update(fields)

    @property
    def request_path(self) -> str:
        """Endpoint path this collection is posted to."""
        return self._request_path

    def set(self, name: str, value: Optional[str]) -> "ParameterCollection":
        self._fields[name] = value
        return self

    def get(self, name: str) -> Optional[str]:
        return self._fields.get(name)

    def update(self, fields: Mapping[str, Optional[str]]) -> "ParameterCollection":
        for name, value in fields.items():
            self.set(name, value)
        return self

    def data(self) -> dict[str, str]:
        """Present fields, in insertion order."""
        return {name: value for name, value in self._fields.items() if value is not None}

    def serialize(self) -> str:
        return encode_form(self._fields)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._fields.get(name) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self.data())

    def __len__(self) -> int:
        return len(self.data())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterCollection):
            return NotImplemented
        return self._request_path == other._request_path and self.data() == other.data()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(request_path={self._request_path!r}, fields={self.data()!r})"


def new_init_params(**fields: Optional[str]) -> ParameterCollection:
    """PayInit collection; keyword arguments become fields (e.g. ACCOUNTID="...")."""
    return ParameterCollection(PAY_INIT_PATH, fields)


def new_confirm_params() -> ParameterCollection:
    return ParameterCollection(PAY_CONFIRM_PATH)


def new_complete_params() -> ParameterCollection:
    return ParameterCollection(PAY_COMPLETE_PATH)


def new_complete_response() -> ParameterCollection:
    """Holds the attributes of a PayCompleteV2 answer; it is never posted anywhere."""
    return ParameterCollection()
