"""Base protocol and shared defaults for Monad facades."""

from typing import Any, Protocol, runtime_checkable

DEFAULT_MODELS = {
    "openai": "gpt-4o",
    "gemini": "gemini-2.0-flash",
}


@runtime_checkable
class CompletionClient(Protocol):
    """Protocol for a facade over an external AI client."""

    @property
    def client(self) -> Any:
        """The held external client, for direct access."""
        ...

    async def complete(
        self,
        prompt: str,
        model: str | None,
        max_tokens: int,
        system_prompt: str | None,
    ) -> str:
        """
        Send one completion request through the held client.

        Args:
            prompt: The user prompt to send
            model: Model identifier to use
            max_tokens: Maximum tokens in response
            system_prompt: Optional system instructions for the model

        Returns:
            The text of the first result
        """
        ...
