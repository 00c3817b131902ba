"""LLM protocol for dependency injection."""
from typing import AsyncIterator, Protocol, runtime_checkable


@runtime_checkable
class LLMProtocol(Protocol):
    """Protocol for LLM client."""

    def generate_stream(self, prompt: str) -> AsyncIterator[str]:
        """Stream a completion for prompt.

        Args:
            prompt: Full prompt text.

        Yields:
            Response fragments in arrival order.

        Raises:
            ChatAdapterError: If no readable response is available.
        """
        ...

    async def generate(self, prompt: str) -> str:
        """Generate a completion and return it as one string."""
        ...

    async def close(self) -> None:
        """Release the underlying connection pool."""
        ...
