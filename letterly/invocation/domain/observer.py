"""InvocationObserver port — domain events emitted while walking a fallback chain."""

from typing import Protocol


class InvocationObserver(Protocol):
    """Observer port for invocation domain events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def invocation_started(self, agent_id: str, models: list[str]) -> None: ...

    def invocation_attempt_started(
        self, agent_id: str, model: str, attempt: int
    ) -> None: ...

    def invocation_attempt_failed(
        self,
        agent_id: str,
        model: str,
        attempt: int,
        status: int | None,
        code: str | None,
        transient: bool,
        reason: str,
    ) -> None: ...

    def invocation_cooldown_started(
        self, agent_id: str, model: str, cooldown_seconds: float
    ) -> None: ...

    def invocation_completed(
        self, agent_id: str, used_model: str, attempts: int, duration_ms: int
    ) -> None: ...

    def invocation_aborted(self, agent_id: str, model: str, reason: str) -> None: ...

    def invocation_exhausted(
        self, agent_id: str, models: list[str], reason: str
    ) -> None: ...
