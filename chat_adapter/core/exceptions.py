"""Errors surfaced to callers of a conversation exchange."""


class ChatAdapterError(Exception):
    """Base class for fatal exchange errors."""


class EmptyResponseError(ChatAdapterError):
    """The endpoint returned no readable response body."""

    def __init__(self, message: str = "Response body is empty"):
        super().__init__(message)


class EndpointError(ChatAdapterError):
    """The request to the inference endpoint failed."""

    def __init__(self, message: str):
        super().__init__(f"Endpoint error: {message}")
