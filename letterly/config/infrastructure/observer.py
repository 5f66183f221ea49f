"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, source: str, agent_overrides: int) -> None:
        self._log.info(
            "config.loaded", source=source, agent_overrides=agent_overrides
        )

    def config_attempt_timeout_disabled(self) -> None:
        self._log.warning(
            "config.attempt_timeout_disabled",
            message="No per-attempt timeout; a hung model stalls its fallback chain",
        )
