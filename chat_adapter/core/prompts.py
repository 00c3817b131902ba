"""Prompt text shared by configuration and services."""

DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful assistant. Answer the user's latest message "
    "clearly and concisely, using the conversation above as context."
)
