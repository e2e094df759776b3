# errors.py - exception taxonomy shared by the client, validator and dispatcher
from typing import Optional


class FulcrumMCPError(Exception):
    """Base class for every error raised inside the server."""


class ValidationError(FulcrumMCPError):
    """Unknown tool name or an argument that does not fit the tool schema."""


class GatewayError(FulcrumMCPError):
    """Failure while talking to the Fulcrum API."""


class TransportError(GatewayError):
    """The Fulcrum host could not be reached (DNS, refused connection, timeout)."""


class RemoteAPIError(GatewayError):
    def __init__(self, message: str, status_code: int, body: Optional[str] = None, url: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.url = url


class FormattingError(FulcrumMCPError):
    """The Fulcrum API answered with a shape the tool cannot read."""


class ToolExecutionError(FulcrumMCPError):
    """Raised by a tool handler; the message starts with the failing operation."""
