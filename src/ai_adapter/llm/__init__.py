"""
LLM Provider Abstraction

Supports multiple LLM providers through a unified interface:
- OpenAI (chat completions)
- Anthropic Claude (messages)
- Google Gemini (generateContent)
"""

from .provider import LLMProvider, ProviderConfig, ProcessOptions
from .normalize import ParseOutcome, try_parse_json, normalize_text
from .openai_provider import OpenAIProvider
from .anthropic_provider import AnthropicProvider
from .gemini_provider import GeminiProvider
from .factory import PROVIDER_CLASSES, create_provider, load_adapter_config_from_env

__all__ = [
    "LLMProvider",
    "ProviderConfig",
    "ProcessOptions",
    "ParseOutcome",
    "try_parse_json",
    "normalize_text",
    "OpenAIProvider",
    "AnthropicProvider",
    "GeminiProvider",
    "PROVIDER_CLASSES",
    "create_provider",
    "load_adapter_config_from_env",
]
