"""
Exceptions raised by the Saferpay transaction phases.

Every failure a phase can surface derives from SaferpayError and carries an
ErrorKind, so callers can either catch specific classes or branch on
``error.kind``. Nothing here is retried internally: each error reaches the
caller of the phase that produced it.
"""

from typing import Optional

from saferpay.models.enums import ErrorKind


class SaferpayError(Exception):
    """Base exception for Saferpay client errors."""

    kind: ErrorKind

    def __init__(self, message: str, kind: ErrorKind):
        super().__init__(message)
        self.message = message
        self.kind = kind


class TransportNotConfiguredError(SaferpayError):
    """No transport is bound to the gateway."""

    def __init__(self, message: str = "Saferpay: no transport configured for the gateway"):
        super().__init__(message, ErrorKind.TRANSPORT_NOT_CONFIGURED)


class TransportError(SaferpayError):
    """
    The HTTP exchange failed.

    status_code is the response status when one was received, or None when
    the request never completed (connection refused, timeout, TLS error).
    """

    def __init__(self, status_code: Optional[int], message: Optional[str] = None):
        if message is None:
            message = f"Saferpay: request failed with status code {status_code}"
        super().__init__(message, ErrorKind.TRANSPORT_ERROR)
        self.status_code = status_code


class ProviderError(SaferpayError):
    """Saferpay answered 200 but reported an error in the body."""

    def __init__(self, body: str):
        super().__init__(f"Saferpay: request failed: {body}", ErrorKind.PROVIDER_ERROR)
        self.body = body


class InvalidResponseFormat(SaferpayError):
    """The content could not be parsed as a single-root XML fragment."""

    def __init__(self, content: str, detail: str = ""):
        message = "Saferpay: invalid xml received"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message, ErrorKind.INVALID_RESPONSE_FORMAT)
        self.content = content


class ConfirmRequiredError(SaferpayError):
    """Complete was called with a confirmation that carries no transaction ID."""

    def __init__(self):
        super().__init__("Saferpay: call confirm before complete", ErrorKind.CONFIRM_REQUIRED)


class CredentialRequiredError(SaferpayError):
    """A non-settlement action was requested without a credential."""

    def __init__(self, action: str):
        super().__init__(
            f"Saferpay: action {action!r} requires a credential (spPassword)",
            ErrorKind.CREDENTIAL_REQUIRED,
        )
        self.action = action
