"""Client error types."""

NOT_CONNECTED_MESSAGE = (
    "The graph client is not connected to the server. "
    "Call the Connect method first."
)


class GraphClientError(Exception):
    """Base exception for graph client errors."""

    pass


class NotConnectedError(GraphClientError):
    """Connection-dependent state was read before a successful connect."""

    def __init__(self, message: str = NOT_CONNECTED_MESSAGE):
        super().__init__(message)


class DecodeError(GraphClientError):
    """The server's root document could not be decoded."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause
