"""
Google Gemini LLM Provider

Calls ``models/{model}:generateContent`` on the Generative Language API.
"""

from typing import Any

from ..config import get_logger
from .normalize import extract_text
from .provider import LLMProvider, ProcessOptions

logger = get_logger(__name__)


class GeminiProvider(LLMProvider):
    """
    Gemini API provider.

    Auth: API key as the ``key`` query parameter; the model is part of
    the endpoint path rather than the body.
    """

    name = "gemini"
    display_name = "Gemini"
    default_model = "gemini-2.5-pro"
    default_base_url = "https://generativelanguage.googleapis.com/v1beta"

    async def process(self, prompt: str, options: ProcessOptions) -> Any:
        model = self.resolve_model(options)
        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.resolve_temperature(options),
                "maxOutputTokens": self.resolve_max_tokens(options),
            },
        }

        logger.debug("Gemini request: model=%s", model)
        data = await self._post_json(
            f"{self.base_url}/models/{model}:generateContent",
            payload,
            params={"key": self.config.api_key},
        )

        content = extract_text(data, "candidates", 0, "content", "parts", 0, "text")
        return self._normalize(content)
