"""Provider failure classification — decides whether the fallback chain may advance."""

from enum import StrEnum

RATE_LIMIT_STATUS = 429


class FailureClass(StrEnum):
    TRANSIENT = "transient"
    NON_TRANSIENT = "non_transient"


def classify_status(status: int | None) -> FailureClass:
    """Classify an HTTP-like provider status.

    Rate limiting (429) and server-side errors (5xx) are transient; everything
    else, including a missing status, is not.
    """
    if status is None:
        return FailureClass.NON_TRANSIENT
    if status == RATE_LIMIT_STATUS or 500 <= status <= 599:
        return FailureClass.TRANSIENT
    return FailureClass.NON_TRANSIENT
