"""AgentConfig value object — one configured task role and its model chain."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

type AgentId = str

AgentKind = Literal["chat", "embedding", "image"]

ModelId = Annotated[str, Field(min_length=1)]


class AgentConfig(BaseModel, frozen=True):
    """Immutable configuration for one agent role.

    Catalog entries are shared across concurrent requests, so per-request
    customization always goes through with_overrides(), which returns a new value.
    """

    id: AgentId = Field(min_length=1)
    display_name: str = Field(min_length=1)
    description: str = ""
    kind: AgentKind
    primary_model: ModelId
    fallback_models: tuple[ModelId, ...] = ()
    instruction: str = Field(min_length=1)
    hidden: bool = False

    def attempt_sequence(self) -> tuple[str, ...]:
        """Return the models to try, primary first, each model at most once."""
        sequence: list[str] = []
        for model in (self.primary_model, *self.fallback_models):
            if model not in sequence:
                sequence.append(model)
        return tuple(sequence)

    def with_overrides(
        self,
        primary_model: str | None = None,
        instruction: str | None = None,
    ) -> "AgentConfig":
        """Return a copy with primary_model and/or instruction replaced.

        None leaves a field as-is. The receiver is never modified.
        """
        update: dict[str, str] = {}
        if primary_model is not None:
            update["primary_model"] = primary_model
        if instruction is not None:
            update["instruction"] = instruction
        if not update:
            return self
        return AgentConfig.model_validate({**self.model_dump(), **update})

    def with_model_chain(
        self, primary_model: str, fallback_models: tuple[str, ...]
    ) -> "AgentConfig":
        """Return a copy whose whole model chain is replaced."""
        return AgentConfig.model_validate(
            {
                **self.model_dump(),
                "primary_model": primary_model,
                "fallback_models": fallback_models,
            }
        )


def normalize_agent_id(raw: str) -> AgentId:
    """Map route-style spellings ("detect-tone-request") to the catalog key form."""
    return raw.strip().upper().replace("-", "_")
