import chainlit as cl

from chat_adapter.config.settings import settings
from chat_adapter.container import configure_container, container
from chat_adapter.core.exceptions import ChatAdapterError
from chat_adapter.core.models.chat import ConversationHistory
from chat_adapter.core.services.chat_service import ChatService

configure_container(settings)


@cl.on_chat_start
async def start():
    cl.user_session.set("history", ConversationHistory())

    chat_service = container.resolve(ChatService)
    if not await chat_service.check_availability():
        await cl.Message(content="The assistant is not available right now.").send()
        return

    await cl.Message(
        content=f"Hi! I'm running **{settings.llm_model}** locally. Ask me anything."
    ).send()


@cl.on_message
async def main(message: cl.Message):
    chat_service = container.resolve(ChatService)
    history: ConversationHistory | None = cl.user_session.get("history")
    if history is None:
        history = ConversationHistory()

    # Committed to the session only once the reply succeeds
    history = history.add_user(message.content)

    msg = cl.Message(content="")
    await msg.send()

    full_response = ""
    try:
        async for token in chat_service.stream_reply(history):
            if token:
                full_response += token
                await msg.stream_token(token)
    except ChatAdapterError as e:
        await msg.stream_token(f"\n\nError while generating a reply: {e}")
        await msg.update()
        return

    await msg.update()

    cl.user_session.set(
        "history",
        history.add_assistant(full_response),
    )
