"""Wire records produced by the inference daemon."""
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class StreamChunk:
    """One line of a streamed /api/generate response."""
    response: str
    model: str = ""
    created_at: str = ""
    done: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StreamChunk":
        """Build a chunk from a parsed JSON object.

        Raises:
            ValueError: If the object has no string ``response`` field.
        """
        response = data.get("response")
        if not isinstance(response, str):
            raise ValueError("missing or non-string 'response' field")
        return cls(
            response=response,
            model=str(data.get("model", "")),
            created_at=str(data.get("created_at", "")),
            done=bool(data.get("done", False)),
        )
