"""CompletionClient Protocol — the single provider call the invoker depends on."""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from letterly.invocation.domain.message import ChatMessage

type ResponseFormat = Mapping[str, Any]


class CompletionClient(Protocol):
    """Structural interface satisfied by any chat-completion provider.

    Implementations classify failures where they catch them and raise only
    TransientProviderError or NonTransientProviderError.
    """

    async def create_completion(
        self,
        model: str,
        messages: Sequence[ChatMessage],
        response_format: ResponseFormat | None = None,
    ) -> str: ...
