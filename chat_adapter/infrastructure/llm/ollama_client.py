import logging
from typing import Any, AsyncIterator, Optional

import httpx

from ...core.exceptions import EmptyResponseError, EndpointError
from ...core.streaming.ndjson import iter_fragments

logger = logging.getLogger(__name__)

GENERATE_PATH = "/api/generate"


class OllamaClient:
    """LLM client for the Ollama native generate API."""

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:11434",
        model: str = "tinyllama",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize Ollama client.

        Args:
            base_url: Ollama API URL.
            model: Model name.
            transport: Custom httpx transport (used by tests).
        """
        # Generation runs as long as the model needs; no request timeout.
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=None,
            transport=transport,
        )
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    def _payload(self, prompt: str) -> dict[str, Any]:
        return {"model": self._model, "prompt": prompt, "stream": True}

    async def generate_stream(self, prompt: str) -> AsyncIterator[str]:
        """Stream generated text.

        Args:
            prompt: Full prompt text.

        Yields:
            Response fragments in the order the daemon produced them.

        Raises:
            EmptyResponseError: If the response has no readable body.
            EndpointError: If the request fails or returns an error status.
        """
        logger.info(
            f"[generate] model={self._model}, prompt={len(prompt)} chars"
        )

        try:
            async with self._client.stream(
                "POST", GENERATE_PATH, json=self._payload(prompt)
            ) as response:
                if response.status_code >= 400:
                    await response.aread()
                    raise EndpointError(
                        f"HTTP {response.status_code}: {response.text[:200]}"
                    )
                if response.status_code == 204:
                    raise EmptyResponseError()

                received = 0

                async def body() -> AsyncIterator[bytes]:
                    nonlocal received
                    async for data in response.aiter_bytes():
                        received += len(data)
                        yield data

                count = 0
                async for fragment in iter_fragments(body()):
                    count += 1
                    yield fragment

                if not received:
                    raise EmptyResponseError()

                logger.info(f"[generate] done: {count} fragments, {received} bytes")
        except httpx.HTTPError as e:
            logger.error(f"[generate] Request failed: {e}")
            raise EndpointError(str(e)) from e

    async def generate(self, prompt: str) -> str:
        """Generate text and return it once the stream is finished."""
        return "".join([fragment async for fragment in self.generate_stream(prompt)])

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "OllamaClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
