"""
OpenAI LLM Provider

Calls the Chat Completions endpoint over plain HTTP (httpx).
``base_url`` can point at any service that speaks the same API.
"""

from typing import Any, Dict

from ..config import get_logger
from .normalize import extract_text
from .provider import LLMProvider, ProcessOptions

logger = get_logger(__name__)


class OpenAIProvider(LLMProvider):
    """
    OpenAI chat completions provider.

    Auth: bearer token in the Authorization header, plus an optional
    OpenAI-Organization header when ``organization`` is configured.
    """

    name = "openai"
    display_name = "OpenAI"
    default_model = "gpt-4o"
    default_base_url = "https://api.openai.com/v1"

    def _headers(self) -> Dict[str, str]:
        headers = {"Authorization": f"Bearer {self.config.api_key}"}
        organization = self.config.extra.get("organization")
        if organization:
            headers["OpenAI-Organization"] = str(organization)
        return headers

    async def process(self, prompt: str, options: ProcessOptions) -> Any:
        model = self.resolve_model(options)
        payload = {
            "model": model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self.resolve_temperature(options),
            "max_tokens": self.resolve_max_tokens(options),
        }

        logger.debug("OpenAI request: model=%s", model)
        data = await self._post_json(
            f"{self.base_url}/chat/completions", payload, headers=self._headers()
        )

        content = extract_text(data, "choices", 0, "message", "content")
        return self._normalize(content)
