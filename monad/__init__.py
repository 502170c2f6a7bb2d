"""
Monad - a thin facade over third-party AI completion clients.

Supports two access modes:
- **direct**: use ``monad.client``, the provider SDK client itself, untouched
- **managed**: use ``await monad.complete(prompt)``, one request with
  pre/post logging and errors re-raised unchanged

Providers:
- **openai**: ``OpenAIMonad`` over ``openai.AsyncOpenAI``
- **gemini**: ``GeminiMonad`` over ``google.genai.Client``
"""

import logging
import os
from typing import Any

from .clients import DEFAULT_MODELS, CompletionClient, GeminiMonad, OpenAIMonad

logger = logging.getLogger(__name__)

# provider -> (config key, environment variable)
API_KEY_SOURCES = {
    "openai": ("openai_api_key", "OPENAI_API_KEY"),
    "gemini": ("gemini_api_key", "GOOGLE_API_KEY"),
}


def create_monad(config: dict[str, Any] | None = None, provider: str | None = None) -> CompletionClient:
    """
    Build a facade for the configured provider.

    The credential comes from the config dict, falling back to the
    provider's environment variable. This is the only place the
    environment is read.

    Args:
        config: Optional settings (provider, openai_api_key, gemini_api_key, default_model)
        provider: Provider name, overrides config["provider"]

    Returns:
        An OpenAIMonad or GeminiMonad

    Raises:
        ValueError: Unknown provider or no API key available
    """
    config = config or {}
    provider = provider or config.get("provider", "openai")

    if provider not in API_KEY_SOURCES:
        raise ValueError(f"Unknown provider: {provider}. Supported: {', '.join(API_KEY_SOURCES)}")

    config_key, env_var = API_KEY_SOURCES[provider]
    api_key = config.get(config_key) or os.getenv(env_var)
    if not api_key:
        raise ValueError(f"{env_var} environment variable not set. Set it or provide {config_key} in config.")

    default_model = config.get("default_model") or DEFAULT_MODELS[provider]

    if provider == "gemini":
        monad = GeminiMonad(api_key=api_key, default_model=default_model)
    else:
        monad = OpenAIMonad(api_key=api_key, default_model=default_model)

    logger.debug(f"Created {provider} facade (default model: {default_model})")
    return monad


__all__ = [
    "API_KEY_SOURCES",
    "DEFAULT_MODELS",
    "CompletionClient",
    "GeminiMonad",
    "OpenAIMonad",
    "create_monad",
]
