"""Slack Web API method families and the client that bundles them."""

from slack_puncher.services.dispatch.errors import SlackError, TransportError, UsageError

from .client import SlackClient

__all__ = ["SlackClient", "SlackError", "TransportError", "UsageError"]
