"""CLI entrypoint for letterly — typer app for inspecting and invoking agents."""

import asyncio
import json
import logging
import sys
from pathlib import Path

import structlog
import typer
from rich.console import Console
from rich.table import Table

from letterly.agent.domain.agent import AgentKind
from letterly.agent.infrastructure.registry import AgentRegistry
from letterly.config.domain.settings import LetterlySettings
from letterly.config.infrastructure.observer import StructlogConfigObserver
from letterly.config.infrastructure.yaml_loader import (
    YamlSettingsLoader,
    settings_from_env,
)
from letterly.core.errors import LetterlyError
from letterly.invocation.application.invoker import ResilientInvoker
from letterly.invocation.domain.message import build_messages
from letterly.invocation.domain.result import InvocationResult
from letterly.invocation.infrastructure.litellm import LiteLLMCompletionClient
from letterly.invocation.infrastructure.observer import StructlogInvocationObserver

app = typer.Typer(add_completion=False)

_KINDS: tuple[AgentKind, ...] = ("chat", "embedding", "image")
_JSON_RESPONSE_FORMAT = {"type": "json_object"}


def _configure_structlog(log_format: str, log_level: str) -> None:
    """Configure structlog to write to stderr in the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    level = logging.getLevelNamesMapping().get(log_level.upper())
    if level is None:
        typer.echo(f"Invalid log level: {log_level!r}.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_settings(config_path: Path | None) -> LetterlySettings:
    observer = StructlogConfigObserver()
    if config_path is None:
        return settings_from_env(observer=observer)
    return YamlSettingsLoader(observer=observer).load(path=config_path)


def _read_text(text: str | None) -> str:
    if text is not None:
        return text
    return typer.get_text_stream("stdin").read()


async def _invoke(
    settings: LetterlySettings,
    agent_id: str,
    text: str,
    model: str | None,
    instruction: str | None,
    expect_json: bool,
) -> InvocationResult:
    registry = AgentRegistry().with_model_chains(settings.agents)
    agent = registry.resolve_agent(
        agent_id=agent_id, primary_model=model, instruction=instruction
    )
    invoker = ResilientInvoker(
        client=LiteLLMCompletionClient(config=settings.provider),
        observer=StructlogInvocationObserver(),
        cooldown_seconds=settings.invocation.cooldown_seconds,
        attempt_timeout_seconds=settings.invocation.attempt_timeout_seconds,
    )
    return await invoker.invoke(
        messages=build_messages(agent=agent, user_content=text),
        agent=agent,
        response_format=_JSON_RESPONSE_FORMAT if expect_json else None,
    )


@app.command()
def agents(
    show_all: bool = typer.Option(
        False, "--all", help="Include agents hidden from end users"
    ),
) -> None:
    """List configured agents and their model chains."""
    table = Table(title="Agents")
    table.add_column("ID", no_wrap=True)
    table.add_column("Name")
    table.add_column("Kind")
    table.add_column("Primary model")
    table.add_column("Fallbacks")
    for agent in AgentRegistry().list_agents(include_hidden=show_all):
        table.add_row(
            agent.id,
            agent.display_name,
            agent.kind,
            agent.primary_model,
            ", ".join(agent.fallback_models) or "-",
        )
    Console().print(table)


@app.command()
def models(
    kind: str | None = typer.Option(
        None, "--kind", help="Only list models of this kind: chat, embedding, image"
    ),
) -> None:
    """List catalog models, optionally filtered by kind."""
    if kind is not None and kind not in _KINDS:
        typer.echo(f"Invalid kind: {kind!r}. Must be one of {', '.join(_KINDS)}.")
        raise typer.Exit(code=1)

    registry = AgentRegistry()
    table = Table(title="Models")
    table.add_column("ID", no_wrap=True)
    table.add_column("Name")
    table.add_column("Kind")
    for model_kind in _KINDS:
        if kind is not None and model_kind != kind:
            continue
        for model in registry.list_models(kind=model_kind):
            table.add_row(model.id, model.display_name, model.kind)
    Console().print(table)


@app.command()
def invoke(
    agent_id: str = typer.Argument(..., help="Agent id, e.g. GENERATE or detect-tone-request"),
    text: str | None = typer.Option(
        None, "--text", "-t", help="User message; read from stdin when omitted"
    ),
    model: str | None = typer.Option(
        None, "--model", "-m", help="Override the agent's primary model"
    ),
    instruction: str | None = typer.Option(
        None, "--instruction", "-i", help="Override the agent's system instruction"
    ),
    expect_json: bool = typer.Option(
        False, "--json", help="Ask the model for a JSON object response"
    ),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to settings YAML"
    ),
    log_format: str = typer.Option(
        "console", "--log-format", help="Log format: 'console' or 'json'"
    ),
    log_level: str = typer.Option("info", "--log-level", help="Minimum log level"),
) -> None:
    """Invoke one agent through its fallback chain and print {text, usedModel}."""
    _configure_structlog(log_format=log_format, log_level=log_level)
    try:
        settings = _load_settings(config_path=config_path)
        result = asyncio.run(
            _invoke(
                settings=settings,
                agent_id=agent_id,
                text=_read_text(text),
                model=model,
                instruction=instruction,
                expect_json=expect_json,
            )
        )
    except KeyboardInterrupt:
        typer.echo("Invocation interrupted.")
        sys.exit(1)
    except LetterlyError as exc:
        typer.echo(str(exc))
        sys.exit(1)

    typer.echo(json.dumps(result.to_payload()))


if __name__ == "__main__":
    app()
