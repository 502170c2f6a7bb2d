"""Google Gemini facade for Monad."""

import logging

from google import genai
from google.genai import types

from .base import DEFAULT_MODELS

logger = logging.getLogger(__name__)


class GeminiMonad:
    """Facade over the Google GenAI client."""

    def __init__(self, api_key: str, default_model: str = DEFAULT_MODELS["gemini"]):
        """Initialize the facade and the GenAI client it holds."""
        self._client = genai.Client(api_key=api_key)
        self.default_model = default_model

    @property
    def client(self) -> genai.Client:
        """The underlying genai.Client instance, unwrapped."""
        return self._client

    async def complete(
        self,
        prompt: str,
        model: str | None = None,
        max_tokens: int = 150,
        system_prompt: str | None = None,
    ) -> str:
        """
        Send a generate_content request to Gemini.

        Args:
            prompt: The user prompt
            model: Gemini model name (default: the facade's default_model)
            max_tokens: Maximum output tokens (default: 150)
            system_prompt: Optional system instructions

        Returns:
            The response text
        """
        model = model or self.default_model

        logger.info(f"Sending Gemini generation request (model: {model}, max_tokens: {max_tokens})")
        try:
            response = await self._client.aio.models.generate_content(
                model=model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    max_output_tokens=max_tokens,
                    system_instruction=system_prompt,
                ),
            )
            text = response.text or ""
        except Exception as e:
            logger.error(f"Gemini generation failed: {e}")
            raise
        logger.info(f"Received Gemini generation ({len(text)} chars)")
        return text
