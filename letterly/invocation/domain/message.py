"""ChatMessage value object and the conventional message layout for an agent."""

from collections.abc import Sequence
from typing import Literal

from pydantic import BaseModel

from letterly.agent.domain.agent import AgentConfig

ChatRole = Literal["system", "user", "assistant"]


class ChatMessage(BaseModel, frozen=True):
    """One role-tagged entry in the conversation sent to a model."""

    role: ChatRole
    content: str


def build_messages(
    agent: AgentConfig,
    user_content: str,
    history: Sequence[ChatMessage] = (),
) -> list[ChatMessage]:
    """Return [system(instruction), *history, user(user_content)].

    The system message always carries the instruction of the given agent, so an
    overridden agent produces an overridden system message.
    """
    return [
        ChatMessage(role="system", content=agent.instruction),
        *history,
        ChatMessage(role="user", content=user_content),
    ]
