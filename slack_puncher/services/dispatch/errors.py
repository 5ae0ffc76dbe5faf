from __future__ import annotations


class SlackError(RuntimeError):
    """Base class for errors raised by the Slack client."""


class TransportError(SlackError):
    """Raised when the HTTP request could not be completed."""

    def __init__(self, message: str, *, method_name: str, url: str) -> None:
        super().__init__(message)
        self.method_name = method_name
        self.url = url


class UsageError(SlackError, TypeError):
    """Raised when a call leaves a required option unfilled."""


class UnknownEndpointError(SlackError, LookupError):
    """Raised when no descriptor is registered for a Slack method."""
