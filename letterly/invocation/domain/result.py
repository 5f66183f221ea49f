"""InvocationResult value object — the outcome of one resilient invocation."""

from pydantic import BaseModel


class InvocationResult(BaseModel, frozen=True):
    """Generated text and the model that actually produced it.

    text may be empty; deciding what an empty completion means is up to the caller.
    """

    text: str
    used_model: str

    def to_payload(self) -> dict[str, str]:
        """Serialize to the response shape the HTTP layer returns."""
        return {"text": self.text, "usedModel": self.used_model}
