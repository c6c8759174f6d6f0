"""
Anthropic Claude LLM Provider

Calls the Messages API over plain HTTP (httpx) so all backends share
one transport and one error path.
"""

from typing import Any

from ..config import get_logger
from .normalize import extract_text
from .provider import LLMProvider, ProcessOptions

logger = get_logger(__name__)

DEFAULT_API_VERSION = "2023-06-01"


class AnthropicProvider(LLMProvider):
    """
    Anthropic Claude API provider.

    Auth: dedicated ``x-api-key`` header. Every request also carries the
    required ``anthropic-version`` header (override with ``anthropic_version``
    in the provider config).
    """

    name = "anthropic"
    display_name = "Anthropic"
    default_model = "claude-sonnet-4-5-20250929"
    default_base_url = "https://api.anthropic.com/v1"

    @property
    def api_version(self) -> str:
        return str(self.config.extra.get("anthropic_version") or DEFAULT_API_VERSION)

    async def process(self, prompt: str, options: ProcessOptions) -> Any:
        model = self.resolve_model(options)
        payload = {
            "model": model,
            "max_tokens": self.resolve_max_tokens(options),
            "temperature": self.resolve_temperature(options),
            "messages": [{"role": "user", "content": prompt}],
        }
        headers = {
            "x-api-key": self.config.api_key,
            "anthropic-version": self.api_version,
        }

        logger.debug("Anthropic request: model=%s", model)
        data = await self._post_json(f"{self.base_url}/messages", payload, headers=headers)

        # Reply text lives in the first content block
        content = extract_text(data, "content", 0, "text")
        return self._normalize(content)
