"""Exception hierarchy for the file-system, transport and client layers."""

from __future__ import annotations


class VfsError(Exception):
    """Base class for virtual file system failures."""


class VfsOperationError(VfsError):
    """A file-system operation failed on a given path."""

    def __init__(self, operation: str, path: str, error_message: str) -> None:
        self.operation = operation
        self.path = path
        self.error_message = error_message
        super().__init__(
            f"Virtual file system error during {operation} on '{path}': {error_message}"
        )


class TransportError(Exception):
    """Base class for failures in the protocol transport."""


class InvalidResponse(TransportError):
    """The server answered with a message of an unexpected type."""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Invalid response: expected {expected}, got {actual}")


class InvalidProtocolArrayLength(TransportError):
    """A protocol message was not a three-element array."""

    def __init__(self, actual: int) -> None:
        self.actual = actual
        super().__init__(
            f"Invalid protocol message array length: expected 3, got {actual}"
        )


class InvalidMessageType(TransportError):
    """A protocol message carried an unknown message type."""

    def __init__(self, message_type: int) -> None:
        self.message_type = message_type
        super().__init__(
            f"Invalid message type: {message_type} is not a valid MessageType"
        )


class InvalidProtocolUtf8(TransportError):
    """A field of a protocol message was not valid UTF-8."""

    def __init__(self, field: str, error_message: str) -> None:
        self.field = field
        self.error_message = error_message
        super().__init__(f"Invalid UTF-8 in protocol message {field}: {error_message}")


class TransportProcessStartFailed(TransportError):
    """The server process could not be started."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Transport process failed to start: {reason}")


class TransportProcessHandleUnavailable(TransportError):
    """A pipe of the server process is not available."""

    def __init__(self, handle_type: str) -> None:
        self.handle_type = handle_type
        super().__init__(f"Transport process handle unavailable: {handle_type}")


class TransportConnectionClosed(TransportError):
    """The connection to the server closed unexpectedly."""

    def __init__(self) -> None:
        super().__init__("Transport connection closed unexpectedly")


class ServerError(TransportError):
    """The server answered a request with an error."""

    def __init__(self, server_message: str) -> None:
        self.server_message = server_message
        super().__init__(f"Server returned error response: {server_message}")


class UnknownCallback(TransportError):
    """The server called a callback that was never registered."""

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Unknown callback method: {method}")


class CallbackExecutionFailed(TransportError):
    """A registered callback raised while handling a server call."""

    def __init__(self, method: str, reason: str) -> None:
        self.method = method
        self.reason = reason
        super().__init__(f"Callback execution failed for method '{method}': {reason}")


class InvalidBinaryPayload(TransportError):
    """A binary request payload could not be interpreted."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid binary payload: {reason}")


class IncompleteMessage(TransportError):
    """The buffer ended before a whole message was read."""

    def __init__(self) -> None:
        super().__init__("Message decode incomplete: expected more data")


def _describe(cause: BaseException) -> str:
    if isinstance(cause, TransportError):
        return "Transport error"
    if isinstance(cause, VfsError):
        return "Virtual file system error"
    if isinstance(cause, OSError):
        return "IO error"
    if isinstance(cause, (ValueError, TypeError)):
        return "JSON error"
    raise TypeError(f"unsupported client error cause: {type(cause).__name__}")


class ClientError(Exception):
    """A client call failed; ``cause`` holds the underlying error."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"{_describe(cause)}: {cause}")
        self.__cause__ = cause