"""AgentRegistry — read-only lookup over the agent and model catalogs."""

from collections.abc import Iterable, Mapping

from letterly.agent.domain.agent import AgentConfig, AgentKind, normalize_agent_id
from letterly.agent.domain.catalog import DEFAULT_AGENTS, DEFAULT_MODELS
from letterly.agent.domain.model import ModelDescriptor
from letterly.agent.infrastructure.errors import (
    CatalogValidationError,
    ModelKindMismatchError,
    UnknownAgentError,
)
from letterly.config.domain.agent_chain import AgentModelChain


class AgentRegistry:
    """Fixed catalog of agent roles and the models they may be dispatched to.

    The registry never changes after construction. Per-request customization
    goes through resolve_agent(), which hands back a new AgentConfig and leaves
    the stored default untouched.
    """

    def __init__(
        self,
        agents: Iterable[AgentConfig] = DEFAULT_AGENTS,
        models: Iterable[ModelDescriptor] = DEFAULT_MODELS,
    ) -> None:
        agent_list = tuple(agents)
        model_list = tuple(models)
        _validate_catalog(agents=agent_list, models=model_list)
        self._agents: dict[str, AgentConfig] = {a.id: a for a in agent_list}
        self._models: tuple[ModelDescriptor, ...] = model_list
        self._model_kinds: dict[str, AgentKind] = {m.id: m.kind for m in model_list}

    def get_agent(self, agent_id: str) -> AgentConfig:
        """Return the stored AgentConfig for agent_id.

        Raises:
            UnknownAgentError: if agent_id is not registered.
        """
        key = normalize_agent_id(agent_id)
        try:
            return self._agents[key]
        except KeyError:
            raise UnknownAgentError(agent_id=agent_id) from None

    def resolve_agent(
        self,
        agent_id: str,
        primary_model: str | None = None,
        instruction: str | None = None,
    ) -> AgentConfig:
        """Return the agent with per-request overrides applied.

        Blank override strings count as absent. Models missing from the catalog
        are passed through unchecked.

        Raises:
            UnknownAgentError: if agent_id is not registered.
            ModelKindMismatchError: if primary_model is a catalog model of
                another kind.
        """
        agent = self.get_agent(agent_id)
        model = _blank_to_none(primary_model)
        if model is not None:
            model = model.strip()
            model_kind = self._model_kinds.get(model)
            if model_kind is not None and model_kind != agent.kind:
                raise ModelKindMismatchError(
                    agent_id=agent.id,
                    model=model,
                    agent_kind=agent.kind,
                    model_kind=model_kind,
                )
        return agent.with_overrides(
            primary_model=model,
            instruction=_blank_to_none(instruction),
        )

    def list_models(self, kind: AgentKind) -> tuple[ModelDescriptor, ...]:
        return tuple(m for m in self._models if m.kind == kind)

    def list_agents(self, include_hidden: bool = False) -> tuple[AgentConfig, ...]:
        return tuple(
            a for a in self._agents.values() if include_hidden or not a.hidden
        )

    def with_model_chains(
        self, chains: Mapping[str, AgentModelChain]
    ) -> "AgentRegistry":
        """Return a new registry with model chains replaced for the given agents.

        Raises:
            UnknownAgentError: if a key does not name a registered agent.
            CatalogValidationError: if a replacement chain mixes model kinds.
        """
        replaced = dict(self._agents)
        for raw_id, chain in chains.items():
            agent = self.get_agent(raw_id)
            replaced[agent.id] = agent.with_model_chain(
                primary_model=chain.primary_model,
                fallback_models=chain.fallback_models,
            )
        return AgentRegistry(agents=replaced.values(), models=self._models)


def _validate_catalog(
    agents: tuple[AgentConfig, ...], models: tuple[ModelDescriptor, ...]
) -> None:
    """Raise CatalogValidationError listing every problem found."""
    problems: list[str] = []
    problems.extend(
        f"duplicate agent id '{agent_id}'"
        for agent_id in _duplicates(a.id for a in agents)
    )
    problems.extend(
        f"duplicate model id '{model_id}'"
        for model_id in _duplicates(m.id for m in models)
    )

    model_kinds = {m.id: m.kind for m in models}
    for agent in agents:
        for model in agent.attempt_sequence():
            kind = model_kinds.get(model)
            if kind is not None and kind != agent.kind:
                problems.append(
                    f"agent '{agent.id}' ({agent.kind}) references {kind} model"
                    f" '{model}'"
                )

    if problems:
        raise CatalogValidationError("; ".join(problems))


def _duplicates(ids: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    dupes: list[str] = []
    for item in ids:
        if item in seen and item not in dupes:
            dupes.append(item)
        seen.add(item)
    return dupes


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value
