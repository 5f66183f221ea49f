"""Invocation policy configuration model."""

from pydantic import BaseModel, Field


class InvocationConfig(BaseModel, frozen=True):
    """Cooldown between fallback attempts and the optional per-attempt timeout.

    attempt_timeout_seconds=None leaves each attempt bounded only by the
    transport's own default.
    """

    cooldown_seconds: float = Field(default=1.0, ge=0.0)
    attempt_timeout_seconds: float | None = Field(default=None, gt=0.0)
