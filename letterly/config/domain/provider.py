"""Provider connection configuration model."""

from pydantic import BaseModel, Field

OPENROUTER_API_BASE = "https://openrouter.ai/api/v1"


class ProviderConfig(BaseModel, frozen=True):
    api_key: str = Field(min_length=1)
    api_base: str = Field(default=OPENROUTER_API_BASE, min_length=1)
    site_url: str = Field(default="http://localhost:3000", min_length=1)
    app_title: str = Field(default="Letterly", min_length=1)
