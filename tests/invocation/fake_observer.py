"""FakeInvocationObserver — records invocation domain events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class InvocationStartedEvent:
    agent_id: str
    models: list[str]


@dataclass(frozen=True)
class AttemptStartedEvent:
    agent_id: str
    model: str
    attempt: int


@dataclass(frozen=True)
class AttemptFailedEvent:
    agent_id: str
    model: str
    attempt: int
    status: int | None
    code: str | None
    transient: bool
    reason: str


@dataclass(frozen=True)
class CooldownStartedEvent:
    agent_id: str
    model: str
    cooldown_seconds: float


@dataclass(frozen=True)
class InvocationCompletedEvent:
    agent_id: str
    used_model: str
    attempts: int
    duration_ms: int


@dataclass(frozen=True)
class InvocationAbortedEvent:
    agent_id: str
    model: str
    reason: str


@dataclass(frozen=True)
class InvocationExhaustedEvent:
    agent_id: str
    models: list[str]
    reason: str


class FakeInvocationObserver:
    """Records all emitted invocation events as typed frozen dataclasses.

    Use in tests to assert which events were emitted and with what data,
    without mocking or patching.
    """

    def __init__(self) -> None:
        self.started: list[InvocationStartedEvent] = []
        self.attempts: list[AttemptStartedEvent] = []
        self.failures: list[AttemptFailedEvent] = []
        self.cooldowns: list[CooldownStartedEvent] = []
        self.completed: list[InvocationCompletedEvent] = []
        self.aborted: list[InvocationAbortedEvent] = []
        self.exhausted: list[InvocationExhaustedEvent] = []

    def invocation_started(self, agent_id: str, models: list[str]) -> None:
        self.started.append(InvocationStartedEvent(agent_id=agent_id, models=models))

    def invocation_attempt_started(
        self, agent_id: str, model: str, attempt: int
    ) -> None:
        self.attempts.append(
            AttemptStartedEvent(agent_id=agent_id, model=model, attempt=attempt)
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
        self.failures.append(
            AttemptFailedEvent(
                agent_id=agent_id,
                model=model,
                attempt=attempt,
                status=status,
                code=code,
                transient=transient,
                reason=reason,
            )
        )

    def invocation_cooldown_started(
        self, agent_id: str, model: str, cooldown_seconds: float
    ) -> None:
        self.cooldowns.append(
            CooldownStartedEvent(
                agent_id=agent_id, model=model, cooldown_seconds=cooldown_seconds
            )
        )

    def invocation_completed(
        self, agent_id: str, used_model: str, attempts: int, duration_ms: int
    ) -> None:
        self.completed.append(
            InvocationCompletedEvent(
                agent_id=agent_id,
                used_model=used_model,
                attempts=attempts,
                duration_ms=duration_ms,
            )
        )

    def invocation_aborted(self, agent_id: str, model: str, reason: str) -> None:
        self.aborted.append(
            InvocationAbortedEvent(agent_id=agent_id, model=model, reason=reason)
        )

    def invocation_exhausted(
        self, agent_id: str, models: list[str], reason: str
    ) -> None:
        self.exhausted.append(
            InvocationExhaustedEvent(agent_id=agent_id, models=models, reason=reason)
        )
