"""Error taxonomy shared by the dispatcher, the handlers and the transport.

``ToolError`` subclasses are *protocol* errors: they reach the client as
JSON-RPC error responses.  ``WriteError`` is a handler-level failure that the
handlers turn into a flagged ``ToolResult`` instead.
"""

from __future__ import annotations

from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND, ErrorData


class ToolError(Exception):
    """Base class for errors reported to the caller as JSON-RPC errors."""

    code: int = INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_error_data(self) -> ErrorData:
        """Return the wire representation of this error."""
        return ErrorData(code=self.code, message=self.message)


class InvalidParamsError(ToolError):
    """Raised when invocation arguments are malformed or incomplete."""

    code = INVALID_PARAMS


class MethodNotFoundError(ToolError):
    """Raised when an invocation names a tool that is not registered."""

    code = METHOD_NOT_FOUND


class InternalToolError(ToolError):
    """Raised for unexpected failures outside of a handler."""

    code = INTERNAL_ERROR


class WriteError(Exception):
    """Raised when a directory or file cannot be written."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(message)
