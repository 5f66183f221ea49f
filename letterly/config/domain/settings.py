"""Top-level LetterlySettings aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from letterly.config.domain.agent_chain import AgentModelChain
from letterly.config.domain.invocation import InvocationConfig
from letterly.config.domain.provider import ProviderConfig

type AgentKey = str


class LetterlySettings(BaseModel, frozen=True):
    """Root configuration aggregate for the letterly backend."""

    provider: ProviderConfig
    invocation: InvocationConfig = Field(default_factory=InvocationConfig)
    agents: dict[AgentKey, AgentModelChain] = Field(default_factory=dict)
