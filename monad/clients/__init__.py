"""Provider facades for Monad."""

from .base import DEFAULT_MODELS, CompletionClient
from .gemini import GeminiMonad
from .openai import OpenAIMonad

__all__ = ["DEFAULT_MODELS", "CompletionClient", "GeminiMonad", "OpenAIMonad"]
