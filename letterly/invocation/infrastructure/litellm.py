"""LiteLLMCompletionClient — OpenRouter chat completions through LiteLLM."""

from collections.abc import Sequence

import litellm

from letterly.config.domain.provider import ProviderConfig
from letterly.invocation.domain.client import ResponseFormat
from letterly.invocation.domain.message import ChatMessage
from letterly.invocation.infrastructure.errors import classify_provider_failure

_OPENROUTER_PREFIX = "openrouter/"

# litellm stamps a synthetic status_code on these even though no HTTP response
# was received.
_TRANSPORT_ERRORS: tuple[type[Exception], ...] = (
    litellm.APIConnectionError,
    litellm.Timeout,
)


class LiteLLMCompletionClient:
    """CompletionClient implementation that routes every model through OpenRouter.

    Raw provider exceptions are turned into TransientProviderError or
    NonTransientProviderError here and nowhere else.
    """

    def __init__(self, config: ProviderConfig) -> None:
        litellm.suppress_debug_info = True
        self._config = config

    async def create_completion(
        self,
        model: str,
        messages: Sequence[ChatMessage],
        response_format: ResponseFormat | None = None,
    ) -> str:
        """Send one chat completion request and return the message content.

        Raises:
            TransientProviderError: on rate limiting or a 5xx response.
            NonTransientProviderError: on any other failure, including a
                refused connection or a transport timeout.
        """
        kwargs: dict[str, object] = {}
        if response_format is not None:
            kwargs["response_format"] = dict(response_format)

        try:
            response = await litellm.acompletion(
                model=_routed_model(model),
                messages=[m.model_dump() for m in messages],
                api_base=self._config.api_base,
                api_key=self._config.api_key,
                extra_headers={
                    "HTTP-Referer": self._config.site_url,
                    "X-Title": self._config.app_title,
                },
                **kwargs,
            )
        except Exception as exc:
            raise classify_provider_failure(
                model=model,
                reason=str(exc) or type(exc).__name__,
                status=_status_of(exc),
                code=_code_of(exc),
            ) from exc

        content: str | None = response.choices[0].message.content
        return content or ""


def _routed_model(model: str) -> str:
    if model.startswith(_OPENROUTER_PREFIX):
        return model
    return f"{_OPENROUTER_PREFIX}{model}"


def _status_of(exc: Exception) -> int | None:
    if isinstance(exc, _TRANSPORT_ERRORS):
        return None
    status = getattr(exc, "status_code", None)
    if status is None:
        status = getattr(exc, "status", None)
    if isinstance(status, bool) or not isinstance(status, int):
        return None
    return status


def _code_of(exc: Exception) -> str | None:
    code = getattr(exc, "code", None)
    if code is None:
        return None
    return str(code)
