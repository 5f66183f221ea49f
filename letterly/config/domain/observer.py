"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, source: str, agent_overrides: int) -> None: ...

    def config_attempt_timeout_disabled(self) -> None: ...
