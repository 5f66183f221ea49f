"""ResilientInvoker — walks an agent's model chain until one model answers."""

import asyncio
import time
from collections.abc import Sequence

from letterly.agent.domain.agent import AgentConfig
from letterly.invocation.domain.client import CompletionClient, ResponseFormat
from letterly.invocation.domain.message import ChatMessage
from letterly.invocation.domain.observer import InvocationObserver
from letterly.invocation.domain.result import InvocationResult
from letterly.invocation.infrastructure.errors import (
    AgentKindNotSupportedError,
    AllModelsExhaustedError,
    EmptyMessagesError,
    NoModelsAvailableError,
    NonTransientProviderError,
    TransientProviderError,
)

DEFAULT_COOLDOWN_SECONDS = 1.0


class ResilientInvoker:
    """Runs one generation request against an agent's attempt sequence.

    Models are tried strictly in order, one request each. A transient failure
    waits out the cooldown and moves to the next model; a non-transient failure
    ends the invocation with that same error. Nothing is kept between calls, so
    one invoker may serve any number of concurrent invocations.
    """

    def __init__(
        self,
        client: CompletionClient,
        observer: InvocationObserver,
        cooldown_seconds: float = DEFAULT_COOLDOWN_SECONDS,
        attempt_timeout_seconds: float | None = None,
    ) -> None:
        self._client = client
        self._observer = observer
        self._cooldown_seconds = cooldown_seconds
        self._attempt_timeout_seconds = attempt_timeout_seconds

    async def invoke(
        self,
        messages: Sequence[ChatMessage],
        agent: AgentConfig,
        response_format: ResponseFormat | None = None,
    ) -> InvocationResult:
        """Return the first successful completion along the agent's model chain.

        response_format is forwarded untouched to every attempt; the returned
        text is never parsed here.

        Raises:
            AgentKindNotSupportedError: if agent is not a chat agent.
            EmptyMessagesError: if messages is empty.
            NonTransientProviderError: as raised by the first model that fails
                non-transiently; later models are not called.
            AllModelsExhaustedError: if every model failed transiently.
            NoModelsAvailableError: if the attempt sequence is empty.
        """
        if agent.kind != "chat":
            raise AgentKindNotSupportedError(agent_id=agent.id, kind=agent.kind)
        if not messages:
            raise EmptyMessagesError(agent_id=agent.id)

        sequence = agent.attempt_sequence()
        if not sequence:
            raise NoModelsAvailableError(agent_id=agent.id)

        self._observer.invocation_started(agent_id=agent.id, models=list(sequence))
        started_at = time.monotonic()
        last_error: TransientProviderError | None = None

        for attempt, model in enumerate(sequence, start=1):
            self._observer.invocation_attempt_started(
                agent_id=agent.id, model=model, attempt=attempt
            )
            try:
                text = await self._attempt(
                    model=model, messages=messages, response_format=response_format
                )
            except TransientProviderError as exc:
                last_error = exc
                self._observer.invocation_attempt_failed(
                    agent_id=agent.id,
                    model=model,
                    attempt=attempt,
                    status=exc.status,
                    code=exc.code,
                    transient=True,
                    reason=exc.reason,
                )
                self._observer.invocation_cooldown_started(
                    agent_id=agent.id,
                    model=model,
                    cooldown_seconds=self._cooldown_seconds,
                )
                await asyncio.sleep(self._cooldown_seconds)
                continue
            except NonTransientProviderError as exc:
                self._observer.invocation_attempt_failed(
                    agent_id=agent.id,
                    model=model,
                    attempt=attempt,
                    status=exc.status,
                    code=exc.code,
                    transient=False,
                    reason=exc.reason,
                )
                self._observer.invocation_aborted(
                    agent_id=agent.id, model=model, reason=exc.reason
                )
                raise

            self._observer.invocation_completed(
                agent_id=agent.id,
                used_model=model,
                attempts=attempt,
                duration_ms=int((time.monotonic() - started_at) * 1000),
            )
            return InvocationResult(text=text, used_model=model)

        # Every model failed transiently, so last_error is always set here.
        assert last_error is not None
        self._observer.invocation_exhausted(
            agent_id=agent.id, models=list(sequence), reason=last_error.reason
        )
        raise AllModelsExhaustedError(
            agent_id=agent.id,
            attempted_models=sequence,
            last_error=last_error,
        ) from last_error

    async def _attempt(
        self,
        model: str,
        messages: Sequence[ChatMessage],
        response_format: ResponseFormat | None,
    ) -> str:
        """Issue one request, converting an attempt timeout into a transient failure."""
        if self._attempt_timeout_seconds is None:
            return await self._client.create_completion(
                model=model, messages=messages, response_format=response_format
            )

        try:
            async with asyncio.timeout(self._attempt_timeout_seconds):
                return await self._client.create_completion(
                    model=model, messages=messages, response_format=response_format
                )
        except TimeoutError as exc:
            raise TransientProviderError(
                model=model,
                reason=f"no response within {self._attempt_timeout_seconds}s",
                code="attempt_timeout",
            ) from exc
