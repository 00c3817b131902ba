"""Pytest configuration and shared fixtures."""
import json

import httpx
import pytest


def ndjson(*responses: str, done: bool = True) -> bytes:
    """Encode responses the way /api/generate streams them."""
    lines = [
        json.dumps(
            {
                "model": "tinyllama",
                "created_at": "2024-05-01T12:00:00Z",
                "response": r,
                "done": False,
            },
            ensure_ascii=False,
        )
        for r in responses
    ]
    if done:
        lines.append(json.dumps({"model": "tinyllama", "response": "", "done": True}))
    return ("\n".join(lines) + "\n").encode("utf-8")


class ChunkedStream(httpx.AsyncByteStream):
    """Response body delivered in the given chunks."""

    def __init__(self, chunks: list[bytes]):
        self._chunks = chunks

    async def __aiter__(self):
        for chunk in self._chunks:
            yield chunk


class FakeLLM:
    """LLM double that replays fixed fragments and records prompts."""

    def __init__(self, fragments: list[str] | None = None, error: Exception | None = None):
        self.fragments = fragments or []
        self.error = error
        self.prompts: list[str] = []
        self.closed = False

    async def generate_stream(self, prompt: str):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        for fragment in self.fragments:
            yield fragment

    async def generate(self, prompt: str) -> str:
        return "".join([f async for f in self.generate_stream(prompt)])

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_llm():
    """Return a FakeLLM replaying a two-fragment reply."""
    return FakeLLM(["Hello", " world"])


@pytest.fixture
def recorded_requests():
    """Collect requests seen by mock transports."""
    return []


@pytest.fixture
def make_transport(recorded_requests):
    """Build a mock transport answering every request with the given response."""

    def _make(status_code: int = 200, chunks: list[bytes] | None = None, error=None):
        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            if error is not None:
                raise error
            return httpx.Response(status_code, stream=ChunkedStream(chunks or []))

        return httpx.MockTransport(handler)

    return _make
