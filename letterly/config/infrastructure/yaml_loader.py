"""YAML settings loader — parses, interpolates env vars, validates, and emits observer events."""

import os
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from letterly.agent.domain.agent import normalize_agent_id
from letterly.agent.domain.catalog import DEFAULT_AGENTS
from letterly.config.domain.observer import ConfigObserver
from letterly.config.domain.provider import ProviderConfig
from letterly.config.domain.settings import LetterlySettings
from letterly.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from letterly.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)

API_KEY_ENV_VAR = "OPENROUTER_API_KEY"
_DEFAULT_SITE_URL = "http://localhost:3000"


class YamlSettingsLoader:
    """Loads, interpolates, validates, and returns LetterlySettings from a YAML file."""

    def __init__(
        self,
        observer: ConfigObserver,
        known_agent_ids: Iterable[str] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._observer = observer
        self._known_agent_ids = frozenset(
            known_agent_ids
            if known_agent_ids is not None
            else (a.id for a in DEFAULT_AGENTS)
        )
        self._environ = os.environ if environ is None else environ

    def load(self, path: Path) -> LetterlySettings:
        """
        Load, interpolate, validate, and return LetterlySettings from a YAML file.

        Raises:
            ConfigLoadError: if the file does not exist.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the YAML is malformed, an agent key is unknown,
                or the schema is violated.
        """
        if not path.is_file():
            raise ConfigLoadError(path=path)
        raw = _parse_yaml(path=path)
        missing = collect_missing_vars(raw, self._environ)
        if missing:
            raise MissingEnvVarsError(missing)
        interpolated = interpolate(raw, self._environ)
        resolved = _normalize_agent_keys(
            interpolated=interpolated, known_ids=self._known_agent_ids
        )
        settings = _build_settings(resolved=resolved)
        _emit_warnings(settings=settings, observer=self._observer)
        self._observer.config_loaded(
            source=str(path), agent_overrides=len(settings.agents)
        )
        return settings


def settings_from_env(
    observer: ConfigObserver, environ: Mapping[str, str] | None = None
) -> LetterlySettings:
    """Build settings from environment variables alone, for runs without a file.

    The referer falls back from NEXT_PUBLIC_SITE_URL to https://$VERCEL_URL to
    the local development address.

    Raises:
        MissingEnvVarsError: if OPENROUTER_API_KEY is not set.
    """
    env = os.environ if environ is None else environ
    api_key = env.get(API_KEY_ENV_VAR, "")
    if not api_key:
        raise MissingEnvVarsError([API_KEY_ENV_VAR])

    site_url = env.get("NEXT_PUBLIC_SITE_URL") or (
        f"https://{env['VERCEL_URL']}" if env.get("VERCEL_URL") else _DEFAULT_SITE_URL
    )
    settings = LetterlySettings(
        provider=ProviderConfig(api_key=api_key, site_url=site_url)
    )
    _emit_warnings(settings=settings, observer=observer)
    observer.config_loaded(source="environment", agent_overrides=0)
    return settings


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"invalid YAML in {path}: {exc}") from exc
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigValidationError("top-level YAML value must be a mapping")
    return raw


def _normalize_agent_keys(interpolated: Any, known_ids: frozenset[str]) -> Any:
    """
    Rewrite ``agents:`` keys into catalog form and reject unknown agents.

    Raises:
        ConfigValidationError: listing ALL unknown agent keys before raising.
    """
    agents_raw: dict[str, Any] = interpolated.get("agents", {}) or {}
    if not isinstance(agents_raw, dict):
        raise ConfigValidationError("'agents' must be a mapping of agent id to chain")

    unknown = [key for key in agents_raw if normalize_agent_id(str(key)) not in known_ids]
    if unknown:
        detail = ", ".join(f"'{key}'" for key in unknown)
        raise ConfigValidationError(f"unknown agent ids under 'agents': {detail}")

    normalized = {normalize_agent_id(str(key)): value for key, value in agents_raw.items()}
    return {**interpolated, "agents": normalized}


def _build_settings(resolved: Any) -> LetterlySettings:
    try:
        return LetterlySettings.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _emit_warnings(settings: LetterlySettings, observer: ConfigObserver) -> None:
    if settings.invocation.attempt_timeout_seconds is None:
        observer.config_attempt_timeout_disabled()
