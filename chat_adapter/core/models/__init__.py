"""Domain models."""
from .chat import ChatMessage, ConversationHistory
from .stream import StreamChunk

__all__ = [
    "ChatMessage",
    "ConversationHistory",
    "StreamChunk",
]
