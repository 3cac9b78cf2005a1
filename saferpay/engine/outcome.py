"""
Tagged results for callers that would rather branch than catch.

    outcome = run_phase(driver.complete, confirmed, Action.CANCEL)
    if not outcome.ok and outcome.error_kind == ErrorKind.CREDENTIAL_REQUIRED:
        ...

Only SaferpayError subclasses are converted; anything else is a bug and
propagates unchanged.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from saferpay.engine.errors import SaferpayError
from saferpay.models.enums import ErrorKind

T = TypeVar("T")


@dataclass
class PhaseOutcome(Generic[T]):
    """Result of running a transaction phase."""

    ok: bool
    value: Optional[T] = None
    error_kind: Optional[ErrorKind] = None
    message: str = ""
    error: Optional[SaferpayError] = None


def run_phase(func: Callable[..., T], *args: Any, **kwargs: Any) -> PhaseOutcome[T]:
    """Call a phase and wrap its return value or its SaferpayError."""
    try:
        value = func(*args, **kwargs)
    except SaferpayError as e:
        return PhaseOutcome(ok=False, error_kind=e.kind, message=e.message, error=e)
    return PhaseOutcome(ok=True, value=value)
