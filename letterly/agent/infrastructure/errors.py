"""Error types raised by the agent registry."""

from letterly.agent.domain.agent import AgentKind
from letterly.core.errors import LetterlyError


class UnknownAgentError(LetterlyError):
    """Raised when an agent id is not registered."""

    def __init__(self, agent_id: str) -> None:
        self.agent_id = agent_id
        super().__init__(f"Failed to resolve agent: unknown agent id '{agent_id}'")


class ModelKindMismatchError(LetterlyError):
    """Raised when a model override belongs to a different kind than the agent."""

    def __init__(
        self, agent_id: str, model: str, agent_kind: AgentKind, model_kind: AgentKind
    ) -> None:
        super().__init__(
            f"Failed to resolve agent: agent '{agent_id}' is {agent_kind} but model"
            f" '{model}' is {model_kind}"
        )


class CatalogValidationError(LetterlyError):
    """Raised when the agent or model catalog is internally inconsistent."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate catalog: {reason}")
