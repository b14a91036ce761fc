"""Ollama text-generation client.

One prompt, one request: no retries, no streaming. Callers decide what a
failed generation means for them.
"""

from typing import Any

import httpx

from ..core.config.settings import GatewaySettings
from ..observability.logger import get_logger

logger = get_logger(__name__)

GENERATE_PATH = "/api/generate"
REQUEST_TIMEOUT_SECONDS = 30.0

# Fixed sampling for every call
TEMPERATURE = 0.6
TOP_P = 0.9


class GatewayError(Exception):
    """The generation server could not be reached or did not answer properly."""


class OllamaClient:
    """Async client for a locally hosted Ollama server."""

    def __init__(
        self,
        settings: GatewaySettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize Ollama client.

        Args:
            settings: Server URL and model, resolved once (defaults to built-in defaults)
            http_client: Optional shared httpx client (tests inject a MockTransport here)
        """
        self.settings = settings or GatewaySettings()
        self.base_url = self.settings.base_url.rstrip("/")
        self.model = self.settings.model
        self._http_client = http_client

        logger.info("ollama_client_initialized", base_url=self.base_url, model=self.model)

    def _build_payload(self, prompt: str, model: str) -> dict[str, Any]:
        return {
            "model": model,
            "prompt": prompt,
            "stream": False,
            "options": {
                "temperature": TEMPERATURE,
                "top_p": TOP_P,
            },
        }

    async def generate(self, prompt: str, model: str | None = None) -> str:
        """Run one completion and return its text.

        Args:
            prompt: Prompt text
            model: Model override (defaults to the configured model)

        Returns:
            The ``response`` text, or an empty string when the payload has none

        Raises:
            GatewayError: On timeout, connection failure, HTTP error status or
                a body that is not JSON
        """
        model = model or self.model
        url = f"{self.base_url}{GENERATE_PATH}"
        payload = self._build_payload(prompt, model)

        logger.debug("ollama_generate_start", model=model, prompt_length=len(prompt))

        try:
            if self._http_client is not None:
                response = await self._http_client.post(
                    url, json=payload, timeout=REQUEST_TIMEOUT_SECONDS
                )
            else:
                async with httpx.AsyncClient(timeout=REQUEST_TIMEOUT_SECONDS) as client:
                    response = await client.post(url, json=payload)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(
                "ollama_generate_failed",
                url=url,
                model=model,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise GatewayError(f"Ollama request failed: {e}") from e

        text = data.get("response") if isinstance(data, dict) else None
        if not isinstance(text, str):
            logger.warning("ollama_empty_response", model=model)
            return ""

        logger.debug("ollama_generate_complete", model=model, response_length=len(text))
        return text
