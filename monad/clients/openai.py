"""OpenAI facade for Monad."""

import logging

from openai import AsyncOpenAI

from .base import DEFAULT_MODELS

logger = logging.getLogger(__name__)


class OpenAIMonad:
    """Facade over the OpenAI async client."""

    def __init__(self, api_key: str, default_model: str = DEFAULT_MODELS["openai"]):
        """Initialize the facade and the OpenAI client it holds."""
        self._client = AsyncOpenAI(api_key=api_key)
        self.default_model = default_model

    @property
    def client(self) -> AsyncOpenAI:
        """The underlying AsyncOpenAI instance, unwrapped."""
        return self._client

    async def complete(
        self,
        prompt: str,
        model: str | None = None,
        max_tokens: int = 150,
        system_prompt: str | None = None,
    ) -> str:
        """
        Send a chat completion request to OpenAI.

        Args:
            prompt: The user prompt
            model: OpenAI model name (default: the facade's default_model)
            max_tokens: Maximum output tokens (default: 150)
            system_prompt: Optional system instructions

        Returns:
            The first choice's message text
        """
        model = model or self.default_model
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        logger.info(f"Sending OpenAI completion request (model: {model}, max_tokens: {max_tokens})")
        try:
            response = await self._client.chat.completions.create(
                model=model,
                messages=messages,
                max_tokens=max_tokens,
            )
            text = response.choices[0].message.content or ""
        except Exception as e:
            logger.error(f"OpenAI completion failed: {e}")
            raise
        logger.info(f"Received OpenAI completion ({len(text)} chars)")
        return text
