"""Chat domain models."""
from dataclasses import dataclass, field
from typing import Any, Optional

ROLES = ("user", "assistant")


@dataclass(frozen=True)
class ChatMessage:
    """Chat message."""
    role: str  # "user" | "assistant"
    content: str
    display: Optional[Any] = None

    def __post_init__(self) -> None:
        if self.role not in ROLES:
            raise ValueError(f"Unknown message role: {self.role!r}")


@dataclass(frozen=True)
class ConversationHistory:
    """Append-only conversation history.

    Appending returns a new history, so a failed exchange never leaves
    a half-extended history behind.
    """
    messages: tuple[ChatMessage, ...] = field(default_factory=tuple)

    def append(self, message: ChatMessage) -> "ConversationHistory":
        """Return a new history with message added at the end."""
        return ConversationHistory(messages=(*self.messages, message))

    def add_user(self, content: str) -> "ConversationHistory":
        """Return a new history with a user message added."""
        return self.append(ChatMessage(role="user", content=content))

    def add_assistant(self, content: str) -> "ConversationHistory":
        """Return a new history with an assistant reply added."""
        return self.append(
            ChatMessage(role="assistant", content=content, display=content)
        )

    def contents(self) -> list[str]:
        return [m.content for m in self.messages]

    def to_list(self) -> list[dict]:
        """Convert to list of dicts for LLM."""
        return [{"role": m.role, "content": m.content} for m in self.messages]

    def __len__(self) -> int:
        return len(self.messages)
