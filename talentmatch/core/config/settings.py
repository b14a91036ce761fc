"""Typed settings resolved once from the merged configuration."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_OLLAMA_URL = "http://localhost:11434"
DEFAULT_OLLAMA_MODEL = "llama3.2:3b"


class GatewaySettings(BaseModel):
    """Where the text-generation server lives and which model to ask."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(DEFAULT_OLLAMA_URL, description="Ollama server base URL")
    model: str = Field(DEFAULT_OLLAMA_MODEL, description="Model identifier")

    @classmethod
    def from_config(cls, config: dict[str, Any] | None = None) -> "GatewaySettings":
        ollama = (config or {}).get("ollama", {}) or {}
        return cls(
            base_url=str(ollama.get("url") or DEFAULT_OLLAMA_URL).rstrip("/"),
            model=str(ollama.get("model") or DEFAULT_OLLAMA_MODEL),
        )
