"""Chat service - turns a conversation history into one generate request."""

import logging
from typing import AsyncIterator

from ..models.chat import ConversationHistory
from ..prompts import DEFAULT_SYSTEM_PROMPT
from ..protocols.llm import LLMProtocol

logger = logging.getLogger(__name__)


class ChatService:
    """Chat service that runs one exchange against the LLM."""

    def __init__(
        self,
        llm: LLMProtocol,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
    ):
        """Initialize chat service.

        Args:
            llm: LLM client.
            system_prompt: Text placed before the conversation in every
                prompt. Empty string disables it.
        """
        self._llm = llm
        self._system_prompt = system_prompt

    @property
    def system_prompt(self) -> str:
        return self._system_prompt

    def build_prompt(self, history: ConversationHistory) -> str:
        """Join the system prompt and all message contents, one per line."""
        parts = history.contents()
        if self._system_prompt:
            parts = [self._system_prompt, *parts]
        return "\n".join(parts)

    def stream_reply(self, history: ConversationHistory) -> AsyncIterator[str]:
        """Stream the assistant reply for progressive display.

        Yields:
            Response fragments as they arrive.
        """
        prompt = self.build_prompt(history)
        logger.info(f"Exchange started: {len(history)} messages in history")
        return self._llm.generate_stream(prompt)

    async def continue_text_conversation(self, history: ConversationHistory) -> str:
        """Run one exchange and return the finished reply as plain text."""
        fragments = [fragment async for fragment in self.stream_reply(history)]
        return "".join(fragments)

    async def continue_conversation(
        self, history: ConversationHistory
    ) -> ConversationHistory:
        """Run one exchange and return the history extended by the reply.

        The input history is left untouched; if the exchange fails the
        error propagates and nothing is appended.
        """
        text = await self.continue_text_conversation(history)
        logger.info(f"Exchange finished: reply of {len(text)} chars")
        return history.add_assistant(text)

    async def check_availability(self) -> bool:
        """Report whether the assistant can be used.

        The daemon is local and needs no API key, so this is always True
        and never touches the network.
        """
        return True
