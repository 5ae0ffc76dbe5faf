"""Async client for the Slack Web API."""

from slack_puncher.services.dispatch import (
    DescriptorRegistry,
    EndpointDescriptor,
    RequestDispatcher,
    SlackError,
    TransportError,
    UnknownEndpointError,
    UsageError,
)
from slack_puncher.services.slack import SlackClient

__version__ = "1.0.0"

__all__ = [
    "DescriptorRegistry",
    "EndpointDescriptor",
    "RequestDispatcher",
    "SlackClient",
    "SlackError",
    "TransportError",
    "UnknownEndpointError",
    "UsageError",
]
