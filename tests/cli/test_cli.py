"""Tests for the letterly typer CLI."""

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import structlog
from typer.testing import CliRunner

from letterly.cli.main import app

_ACOMPLETION = "letterly.invocation.infrastructure.litellm.litellm.acompletion"
_SLEEP = "letterly.invocation.application.invoker.asyncio.sleep"

# Wide enough that rich never truncates catalog ids.
_ENV = {"COLUMNS": "250"}

runner = CliRunner()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _response(content: str) -> MagicMock:
    message = MagicMock()
    message.content = content
    choice = MagicMock()
    choice.message = message
    response = MagicMock()
    response.choices = [choice]
    return response


class _StatusError(Exception):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"provider said {status_code}")
        self.status_code = status_code


def _last_payload(output: str) -> dict[str, Any]:
    return json.loads(output.strip().splitlines()[-1])


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


@pytest.fixture
def api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENROUTER_API_KEY", "sk-test")
    monkeypatch.delenv("NEXT_PUBLIC_SITE_URL", raising=False)
    monkeypatch.delenv("VERCEL_URL", raising=False)


# ---------------------------------------------------------------------------
# agents / models
# ---------------------------------------------------------------------------


class TestAgentsCommand:
    def test_lists_visible_agents(self) -> None:
        result = runner.invoke(app, ["agents"], env=_ENV)

        assert result.exit_code == 0
        assert "GENERATE" in result.output
        assert "DETECT_TONE_REQUEST" not in result.output

    def test_all_includes_hidden_agents(self) -> None:
        result = runner.invoke(app, ["agents", "--all"], env=_ENV)

        assert result.exit_code == 0
        assert "DETECT_TONE_REQUEST" in result.output
        assert "MATCH_SUGGESTIONS_SCORER" in result.output


class TestModelsCommand:
    def test_filters_by_kind(self) -> None:
        result = runner.invoke(app, ["models", "--kind", "image"], env=_ENV)

        assert result.exit_code == 0
        assert "gemini-2.5-flash-image" in result.output
        assert "openai/gpt-oss-120b" not in result.output

    def test_invalid_kind_exits_non_zero(self) -> None:
        result = runner.invoke(app, ["models", "--kind", "audio"], env=_ENV)

        assert result.exit_code == 1
        assert "Invalid kind" in result.output


# ---------------------------------------------------------------------------
# invoke
# ---------------------------------------------------------------------------


class TestInvokeCommand:
    def test_prints_text_and_used_model(self, api_key: None) -> None:
        mock = AsyncMock(return_value=_response("Dear Sam, thank you."))

        with patch(_ACOMPLETION, new=mock):
            result = runner.invoke(
                app, ["invoke", "generate", "--text", "- thank Sam"], env=_ENV
            )

        assert result.exit_code == 0
        assert _last_payload(result.output) == {
            "text": "Dear Sam, thank you.",
            "usedModel": "openai/gpt-oss-120b:free",
        }

    def test_reads_text_from_stdin(self, api_key: None) -> None:
        mock = AsyncMock(return_value=_response("ok"))

        with patch(_ACOMPLETION, new=mock):
            result = runner.invoke(
                app, ["invoke", "GENERATE"], input="- thank Sam\n", env=_ENV
            )

        assert result.exit_code == 0
        messages = mock.call_args.kwargs["messages"]
        assert messages[-1] == {"role": "user", "content": "- thank Sam\n"}

    def test_falls_back_after_rate_limit(self, api_key: None) -> None:
        async def _fake(**kwargs: Any) -> MagicMock:
            if kwargs["model"] == "openrouter/openai/gpt-oss-120b:free":
                raise _StatusError(429)
            return _response("fallback letter")

        with patch(_ACOMPLETION, new=_fake), patch(_SLEEP, new_callable=AsyncMock):
            result = runner.invoke(
                app, ["invoke", "GENERATE", "--text", "- thank Sam"], env=_ENV
            )

        assert result.exit_code == 0
        assert _last_payload(result.output)["usedModel"] == "openai/gpt-oss-120b"

    def test_model_and_instruction_overrides(self, api_key: None) -> None:
        mock = AsyncMock(return_value=_response("ok"))

        with patch(_ACOMPLETION, new=mock):
            result = runner.invoke(
                app,
                [
                    "invoke",
                    "GENERATE",
                    "-t",
                    "hi",
                    "-m",
                    "openai/gpt-oss-20b",
                    "-i",
                    "Write briefly.",
                ],
                env=_ENV,
            )

        assert result.exit_code == 0
        assert mock.call_args.kwargs["model"] == "openrouter/openai/gpt-oss-20b"
        assert mock.call_args.kwargs["messages"][0] == {
            "role": "system",
            "content": "Write briefly.",
        }

    def test_json_flag_requests_json_object(self, api_key: None) -> None:
        mock = AsyncMock(return_value=_response('{"tone": "warm"}'))

        with patch(_ACOMPLETION, new=mock):
            result = runner.invoke(
                app,
                ["invoke", "DETECT_TONE_REQUEST", "--text", "make it warm", "--json"],
                env=_ENV,
            )

        assert result.exit_code == 0
        assert mock.call_args.kwargs["response_format"] == {"type": "json_object"}

    def test_unknown_agent_exits_non_zero(self, api_key: None) -> None:
        result = runner.invoke(app, ["invoke", "TRANSLATE", "--text", "hi"], env=_ENV)

        assert result.exit_code == 1
        assert "unknown agent id 'TRANSLATE'" in result.output

    def test_non_transient_failure_exits_non_zero(self, api_key: None) -> None:
        mock = AsyncMock(side_effect=_StatusError(401))

        with patch(_ACOMPLETION, new=mock):
            result = runner.invoke(
                app, ["invoke", "GENERATE", "--text", "hi"], env=_ENV
            )

        assert result.exit_code == 1
        assert mock.await_count == 1

    def test_missing_api_key_exits_non_zero(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("OPENROUTER_API_KEY", raising=False)

        result = runner.invoke(app, ["invoke", "GENERATE", "--text", "hi"], env=_ENV)

        assert result.exit_code == 1
        assert "OPENROUTER_API_KEY" in result.output

    def test_config_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LETTERLY_CLI_KEY", "sk-file")
        config = tmp_path / "settings.yaml"
        config.write_text(
            "provider:\n"
            "  api_key: ${LETTERLY_CLI_KEY}\n"
            "agents:\n"
            "  generate:\n"
            "    primary_model: openai/gpt-oss-20b\n",
            encoding="utf-8",
        )
        mock = AsyncMock(return_value=_response("ok"))

        with patch(_ACOMPLETION, new=mock):
            result = runner.invoke(
                app,
                ["invoke", "GENERATE", "--text", "hi", "--config", str(config)],
                env=_ENV,
            )

        assert result.exit_code == 0
        assert mock.call_args.kwargs["api_key"] == "sk-file"
        assert _last_payload(result.output)["usedModel"] == "openai/gpt-oss-20b"

    def test_invalid_log_format_exits_non_zero(self, api_key: None) -> None:
        result = runner.invoke(
            app, ["invoke", "GENERATE", "--text", "hi", "--log-format", "xml"], env=_ENV
        )

        assert result.exit_code == 1
        assert "Invalid log format" in result.output
