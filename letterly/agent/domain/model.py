"""ModelDescriptor value object — one entry in the model catalog."""

from pydantic import BaseModel, Field

from letterly.agent.domain.agent import AgentKind


class ModelDescriptor(BaseModel, frozen=True):
    id: str = Field(min_length=1)
    display_name: str = Field(min_length=1)
    kind: AgentKind
