"""
LLM Provider Factory

Maps canonical provider names to implementations and builds adapter
configuration from environment variables.
"""

import os
from typing import Any, Dict, Mapping, Optional, Type, Union

import httpx
from dotenv import load_dotenv

from ..errors import ProviderUnavailable
from .anthropic_provider import AnthropicProvider
from .gemini_provider import GeminiProvider
from .openai_provider import OpenAIProvider
from .provider import LLMProvider, ProviderConfig

# Registration order is the order providers are built in
PROVIDER_CLASSES: Dict[str, Type[LLMProvider]] = {
    OpenAIProvider.name: OpenAIProvider,
    AnthropicProvider.name: AnthropicProvider,
    GeminiProvider.name: GeminiProvider,
}

AdapterConfig = Mapping[str, Union[ProviderConfig, Mapping[str, Any]]]

# provider name -> (api key vars, base url var)
_ENV_VARS = {
    "openai": (("OPENAI_API_KEY",), "OPENAI_BASE_URL"),
    "anthropic": (("ANTHROPIC_API_KEY",), "ANTHROPIC_BASE_URL"),
    "gemini": (("GEMINI_API_KEY", "GOOGLE_API_KEY"), "GEMINI_BASE_URL"),
}


def create_provider(
    name: str,
    config: Union[ProviderConfig, Mapping[str, Any]],
    client: Optional[httpx.AsyncClient] = None,
) -> LLMProvider:
    """
    Create a provider by canonical name.

    Args:
        name: "openai", "anthropic" or "gemini"
        config: ProviderConfig or mapping with at least ``apiKey``
        client: Shared HTTP client (the provider creates its own if None)

    Raises:
        ProviderUnavailable: Unknown name or missing API key
    """
    provider_cls = PROVIDER_CLASSES.get(name)
    provider_config = ProviderConfig.from_mapping(config)
    if provider_cls is None or not provider_config.has_credential:
        raise ProviderUnavailable(name)
    return provider_cls(provider_config, client=client)


def load_adapter_config_from_env(dotenv_path: Optional[str] = None) -> Dict[str, Dict[str, Any]]:
    """
    Build an adapter config from environment variables.

    Loads a .env file first (existing environment wins). Reads:
    - OPENAI_API_KEY, OPENAI_BASE_URL, OPENAI_ORGANIZATION
    - ANTHROPIC_API_KEY, ANTHROPIC_BASE_URL
    - GEMINI_API_KEY (or GOOGLE_API_KEY), GEMINI_BASE_URL

    Returns:
        Mapping of provider name to config; providers without a key are omitted

    Example:
        >>> adapter = AIAdapter(load_adapter_config_from_env())
    """
    load_dotenv(dotenv_path)

    config: Dict[str, Dict[str, Any]] = {}
    for name, (key_vars, base_url_var) in _ENV_VARS.items():
        api_key = next((os.getenv(var) for var in key_vars if os.getenv(var)), None)
        if not api_key:
            continue

        entry: Dict[str, Any] = {"apiKey": api_key}
        base_url = os.getenv(base_url_var)
        if base_url:
            entry["baseUrl"] = base_url
        config[name] = entry

    organization = os.getenv("OPENAI_ORGANIZATION")
    if organization and "openai" in config:
        config["openai"]["organization"] = organization

    return config
