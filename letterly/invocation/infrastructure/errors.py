"""Error types raised while invoking models."""

from collections.abc import Sequence

from letterly.core.errors import LetterlyError
from letterly.invocation.domain.failure import FailureClass, classify_status


class ProviderError(LetterlyError):
    """Raised when a single provider call fails.

    Carries the model that failed plus whatever status and code the provider
    reported, so callers never have to inspect the original exception.
    """

    failure_class: FailureClass = FailureClass.NON_TRANSIENT

    def __init__(
        self,
        model: str,
        reason: str,
        status: int | None = None,
        code: str | None = None,
    ) -> None:
        self.model = model
        self.reason = reason
        self.status = status
        self.code = code
        super().__init__(
            f"Failed to call model '{model}': {reason}",
            retriable=self.failure_class is FailureClass.TRANSIENT,
        )


class TransientProviderError(ProviderError):
    """Rate limit or server-side failure; the next model in the chain may succeed."""

    failure_class = FailureClass.TRANSIENT


class NonTransientProviderError(ProviderError):
    """Client-side failure that would repeat against every model in the chain."""

    failure_class = FailureClass.NON_TRANSIENT


def classify_provider_failure(
    model: str,
    reason: str,
    status: int | None = None,
    code: str | None = None,
) -> ProviderError:
    """Build the typed error for a raw provider failure."""
    if classify_status(status) is FailureClass.TRANSIENT:
        return TransientProviderError(
            model=model, reason=reason, status=status, code=code
        )
    return NonTransientProviderError(
        model=model, reason=reason, status=status, code=code
    )


class AllModelsExhaustedError(LetterlyError):
    """Raised when every model in the chain failed transiently."""

    def __init__(
        self,
        agent_id: str,
        attempted_models: Sequence[str],
        last_error: ProviderError,
    ) -> None:
        self.agent_id = agent_id
        self.attempted_models = tuple(attempted_models)
        self.last_error = last_error
        models = ", ".join(self.attempted_models)
        super().__init__(
            f"Failed to invoke agent '{agent_id}': all models failed ({models});"
            f" last error: {last_error.reason}",
            retriable=True,
        )


class NoModelsAvailableError(LetterlyError):
    """Raised when an agent yields an empty attempt sequence."""

    def __init__(self, agent_id: str) -> None:
        super().__init__(f"Failed to invoke agent '{agent_id}': no models available")


class AgentKindNotSupportedError(LetterlyError):
    """Raised when a non-chat agent is handed to the chat invoker."""

    def __init__(self, agent_id: str, kind: str) -> None:
        super().__init__(
            f"Failed to invoke agent '{agent_id}': {kind} agents cannot be dispatched"
            f" to chat models"
        )


class EmptyMessagesError(LetterlyError):
    """Raised when an invocation is attempted with no messages."""

    def __init__(self, agent_id: str) -> None:
        super().__init__(f"Failed to invoke agent '{agent_id}': messages are empty")
