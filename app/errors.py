"""Errors raised while forwarding an alert.

Every failure is terminal for the invocation that hit it. Nothing here is
retried; the delivery runtime decides whether the event is redelivered.
"""


class ForwarderError(Exception):
    """Base class for all alert forwarding failures."""


class DecodeError(ForwarderError):
    """The event envelope does not have the expected structure."""


class ParseError(ForwarderError):
    """The incident payload is not valid JSON for the incident structure."""


class TransportError(ForwarderError):
    """The webhook request could not be sent."""


class ReadError(ForwarderError):
    """The webhook response body could not be read."""


class ResponseParseError(ForwarderError):
    """The webhook answered with something that is not JSON."""

    def __init__(self, message: str, body: str):
        super().__init__(f"{message}, received: {body}")
        self.body = body


class RemoteError(ForwarderError):
    """The webhook reported an application-level error."""

    def __init__(self, code: int, message: str, status: str):
        super().__init__(
            "received an error response from Google Chat: "
            f"code={code} message={message!r} status={status!r}"
        )
        self.code = code
        self.message = message
        self.status = status


class ConfigurationError(ForwarderError):
    """The destination channel is not configured."""
