"""Unit tests for domain models."""
import dataclasses

import pytest

from chat_adapter.core.models import ChatMessage, ConversationHistory, StreamChunk


class TestChatMessage:
    """Tests for ChatMessage."""

    def test_message_is_immutable(self):
        message = ChatMessage(role="user", content="hi")

        with pytest.raises(dataclasses.FrozenInstanceError):
            message.content = "bye"  # type: ignore

    def test_unknown_role_fails(self):
        with pytest.raises(ValueError, match="Unknown message role"):
            ChatMessage(role="system", content="hi")

    def test_display_defaults_to_none(self):
        assert ChatMessage(role="assistant", content="hi").display is None


class TestConversationHistory:
    """Tests for ConversationHistory."""

    def test_append_returns_new_history(self):
        empty = ConversationHistory()
        history = empty.add_user("hi")

        assert len(empty) == 0
        assert len(history) == 1
        assert history.messages[0].role == "user"

    def test_add_assistant_sets_display(self):
        history = ConversationHistory().add_assistant("hello")

        assert history.messages[0] == ChatMessage(
            role="assistant", content="hello", display="hello"
        )

    def test_to_list_and_contents(self):
        history = ConversationHistory().add_user("hi").add_assistant("hello")

        assert history.contents() == ["hi", "hello"]
        assert history.to_list() == [
            {"role": "user", "content": "hi"},
            {"role": "assistant", "content": "hello"},
        ]


class TestStreamChunk:
    """Tests for StreamChunk."""

    def test_from_full_record(self):
        chunk = StreamChunk.from_dict(
            {
                "model": "tinyllama",
                "created_at": "2024-05-01T12:00:00Z",
                "response": "Hi",
                "done": False,
            }
        )

        assert chunk == StreamChunk(
            response="Hi",
            model="tinyllama",
            created_at="2024-05-01T12:00:00Z",
            done=False,
        )

    def test_from_minimal_record(self):
        chunk = StreamChunk.from_dict({"response": ""})

        assert chunk.response == ""
        assert chunk.done is False

    @pytest.mark.parametrize("data", [{}, {"response": None}, {"response": 1}])
    def test_missing_response_fails(self, data):
        with pytest.raises(ValueError):
            StreamChunk.from_dict(data)
