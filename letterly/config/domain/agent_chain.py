"""Per-agent model chain override, applied once at startup."""

from pydantic import BaseModel

from letterly.agent.domain.agent import ModelId


class AgentModelChain(BaseModel, frozen=True):
    primary_model: ModelId
    fallback_models: tuple[ModelId, ...] = ()
