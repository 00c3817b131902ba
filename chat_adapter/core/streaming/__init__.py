"""Stream decoding for the generate endpoint."""
from .ndjson import DecoderState, collect_text, feed, finish, iter_fragments, parse_line

__all__ = [
    "DecoderState",
    "collect_text",
    "feed",
    "finish",
    "iter_fragments",
    "parse_line",
]
