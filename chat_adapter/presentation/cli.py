import asyncio
import logging
import subprocess
import sys
from pathlib import Path

from chat_adapter.config.settings import settings
from chat_adapter.container import configure_container, container
from chat_adapter.core.exceptions import ChatAdapterError
from chat_adapter.core.models.chat import ConversationHistory
from chat_adapter.core.services.chat_service import ChatService

logger = logging.getLogger(__name__)

CHAINLIT_APP = Path(__file__).parent / "chainlit_app.py"


async def run_chat() -> None:
    """Terminal chat: print fragments as they arrive."""
    chat_service = container.resolve(ChatService)
    history = ConversationHistory()

    print(f"Chatting with {settings.llm_model}. Empty line or Ctrl-D to quit.")
    try:
        while True:
            try:
                user_input = input("> ").strip()
            except EOFError:
                break
            if not user_input:
                break

            history = await exchange(chat_service, history, user_input)
    finally:
        await container.aclose()


async def exchange(
    chat_service: ChatService, history: ConversationHistory, user_input: str
) -> ConversationHistory:
    """Run one turn; a failed reply leaves history as it was."""
    try:
        return await _print_reply(chat_service, history.add_user(user_input))
    except ChatAdapterError as e:
        print()
        logger.error(f"Exchange failed: {e}")
        return history


async def _print_reply(
    chat_service: ChatService, history: ConversationHistory
) -> ConversationHistory:
    fragments: list[str] = []
    async for fragment in chat_service.stream_reply(history):
        fragments.append(fragment)
        print(fragment, end="", flush=True)
    print()
    return history.add_assistant("".join(fragments))


def cmd_chat():
    """Chat command - interactive terminal chat."""
    configure_container(settings)
    asyncio.run(run_chat())


def cmd_ui():
    """UI command - run the Chainlit app."""
    logger.info("Starting Chainlit...")
    subprocess.run(
        [
            sys.executable,
            "-m",
            "chainlit",
            "run",
            str(CHAINLIT_APP),
            "--host",
            "0.0.0.0",
            "--port",
            "8000",
        ]
    )


COMMANDS = {
    "chat": cmd_chat,
    "ui": cmd_ui,
}


def main(argv: list[str] | None = None):
    """CLI entry point."""
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=settings.log_level, format="%(message)s")

    if not argv:
        print("Usage: chat-adapter <command>")
        print("Commands: chat, ui")
        sys.exit(1)

    command = COMMANDS.get(argv[0])
    if command is None:
        print(f"Unknown command: {argv[0]}")
        sys.exit(1)

    command()


if __name__ == "__main__":
    main()
