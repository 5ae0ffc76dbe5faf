"""Generic request dispatch for Slack Web API methods."""

from .dispatcher import RequestDispatcher
from .errors import SlackError, TransportError, UnknownEndpointError, UsageError
from .registry import DescriptorRegistry, EndpointDescriptor

__all__ = [
    "DescriptorRegistry",
    "EndpointDescriptor",
    "RequestDispatcher",
    "SlackError",
    "TransportError",
    "UnknownEndpointError",
    "UsageError",
]
