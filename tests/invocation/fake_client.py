"""FakeCompletionClient — scripted CompletionClient for use in tests."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from letterly.invocation.domain.client import ResponseFormat
from letterly.invocation.domain.message import ChatMessage


@dataclass(frozen=True)
class CompletionCall:
    model: str
    messages: tuple[ChatMessage, ...]
    response_format: ResponseFormat | None


class FakeCompletionClient:
    """Satisfies the CompletionClient protocol with per-model scripted outcomes.

    Each model maps to a list of outcomes popped from the front on every call:
    - If the item is an Exception, it is raised.
    - If the item is a str, it is returned as the completion text.
    Once a model's list is exhausted, default_text is returned.

    When an events list is given, each called model name is appended to it, so
    tests can interleave other recorded events (such as cooldown sleeps).
    """

    def __init__(
        self,
        outcomes: Mapping[str, Sequence[str | Exception]] | None = None,
        default_text: str = "ok",
        events: list[str] | None = None,
    ) -> None:
        self._outcomes: dict[str, list[str | Exception]] = {
            model: list(items) for model, items in (outcomes or {}).items()
        }
        self._default_text = default_text
        self.calls: list[CompletionCall] = []
        self._events = events

    async def create_completion(
        self,
        model: str,
        messages: Sequence[ChatMessage],
        response_format: ResponseFormat | None = None,
    ) -> str:
        self.calls.append(
            CompletionCall(
                model=model,
                messages=tuple(messages),
                response_format=response_format,
            )
        )
        if self._events is not None:
            self._events.append(model)
        queue = self._outcomes.get(model)
        if queue:
            effect = queue.pop(0)
            if isinstance(effect, Exception):
                raise effect
            return effect
        return self._default_text

    def calls_for(self, model: str) -> list[CompletionCall]:
        return [c for c in self.calls if c.model == model]
