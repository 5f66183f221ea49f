"""Structlog implementation of the InvocationObserver port."""

import structlog


class StructlogInvocationObserver:
    """Delegates invocation domain events to structlog.

    Satisfies the InvocationObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def invocation_started(self, agent_id: str, models: list[str]) -> None:
        self._log.info("invocation.started", agent_id=agent_id, models=models)

    def invocation_attempt_started(
        self, agent_id: str, model: str, attempt: int
    ) -> None:
        self._log.debug(
            "invocation.attempt_started",
            agent_id=agent_id,
            model=model,
            attempt=attempt,
        )

    def invocation_attempt_failed(
        self,
        agent_id: str,
        model: str,
        attempt: int,
        status: int | None,
        code: str | None,
        transient: bool,
        reason: str,
    ) -> None:
        self._log.warning(
            "invocation.attempt_failed",
            agent_id=agent_id,
            model=model,
            attempt=attempt,
            status=status,
            code=code,
            transient=transient,
            reason=reason,
        )

    def invocation_cooldown_started(
        self, agent_id: str, model: str, cooldown_seconds: float
    ) -> None:
        self._log.info(
            "invocation.cooldown_started",
            agent_id=agent_id,
            model=model,
            cooldown_seconds=cooldown_seconds,
        )

    def invocation_completed(
        self, agent_id: str, used_model: str, attempts: int, duration_ms: int
    ) -> None:
        self._log.info(
            "invocation.completed",
            agent_id=agent_id,
            used_model=used_model,
            attempts=attempts,
            duration_ms=duration_ms,
        )

    def invocation_aborted(self, agent_id: str, model: str, reason: str) -> None:
        self._log.error(
            "invocation.aborted",
            agent_id=agent_id,
            model=model,
            reason=reason,
        )

    def invocation_exhausted(
        self, agent_id: str, models: list[str], reason: str
    ) -> None:
        self._log.error(
            "invocation.exhausted",
            agent_id=agent_id,
            models=models,
            reason=reason,
        )
