"""Incremental decoder for newline-delimited JSON generate streams.

The daemon streams one JSON object per line, but the transport hands us
byte buffers whose boundaries fall anywhere: inside a line, inside a
multi-byte character, or right on a newline. ``feed`` turns one buffer
into the fragments of every line it completes and keeps the rest in
``DecoderState`` for the next call.
"""
import codecs
import json
import logging
from dataclasses import dataclass
from typing import AsyncIterable, AsyncIterator, Optional

from ..models.stream import StreamChunk

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


@dataclass(frozen=True)
class DecoderState:
    """Pending input of one decode session."""
    tail: str = ""  # unterminated text after the last newline
    pending: bytes = b""  # incomplete multi-byte character


def _decode(state: DecoderState, data: bytes, final: bool = False) -> tuple[str, bytes]:
    decoder = codecs.getincrementaldecoder(ENCODING)(errors="replace")
    decoder.setstate((state.pending, 0))
    text = decoder.decode(data, final=final)
    pending, _ = decoder.getstate()
    return text, pending


def parse_line(line: str) -> Optional[str]:
    """Parse one complete line and return its ``response`` text.

    Blank lines and lines that fail to parse return None. Failures are
    logged and never raised.
    """
    if not line.strip():
        return None

    try:
        payload = json.loads(line)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError, oversized integers and deep nesting
        logger.warning(f"Skipping malformed stream line: {e} ({line[:80]!r})")
        return None

    if not isinstance(payload, dict):
        logger.warning(f"Skipping non-object stream line: {line[:80]!r}")
        return None

    if "error" in payload:
        logger.error(f"Endpoint reported error in stream: {payload['error']}")
        return None

    try:
        chunk = StreamChunk.from_dict(payload)
    except ValueError as e:
        logger.warning(f"Skipping stream line: {e} ({line[:80]!r})")
        return None

    return chunk.response


def feed(state: DecoderState, data: bytes) -> tuple[DecoderState, list[str]]:
    """Consume one byte buffer.

    Args:
        state: State returned by the previous call (or a fresh one).
        data: Next buffer from the transport.

    Returns:
        The new state and the fragments of every line completed by data.
    """
    text, pending = _decode(state, data)
    *lines, tail = (state.tail + text).split("\n")

    fragments = []
    for line in lines:
        fragment = parse_line(line)
        if fragment is not None:
            fragments.append(fragment)

    return DecoderState(tail=tail, pending=pending), fragments


def finish(state: DecoderState) -> list[str]:
    """Flush the state at end of stream.

    A non-blank remainder gets one best-effort parse as a final line.
    """
    text, _ = _decode(state, b"", final=True)
    fragment = parse_line(state.tail + text)
    return [] if fragment is None else [fragment]


async def iter_fragments(stream: AsyncIterable[bytes]) -> AsyncIterator[str]:
    """Yield fragments as their lines complete."""
    state = DecoderState()
    async for data in stream:
        state, fragments = feed(state, data)
        for fragment in fragments:
            yield fragment

    for fragment in finish(state):
        yield fragment


async def collect_text(stream: AsyncIterable[bytes]) -> str:
    """Decode the whole stream into one string."""
    return "".join([fragment async for fragment in iter_fragments(stream)])
