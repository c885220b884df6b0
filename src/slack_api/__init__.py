"""
slack-api: Slack web API methods as plain function calls.

Every API function takes a request sender (see ``slack_api.transport``) so the
HTTP backend can be swapped without touching the endpoint code.
"""

__version__ = "0.1.0"

from . import api
from . import transport
from .api import SlackApiError, channels, chat, conversations, get_slack_url_for_method
from .config import SlackConfig, default_async_client, default_client
from .transport import (
    AsyncSlackWebRequestSender,
    InvalidMethodURLError,
    SlackRequestError,
    SlackWebRequestSender,
    TransportError,
)

__all__ = [
    "api",
    "transport",
    "channels",
    "chat",
    "conversations",
    "get_slack_url_for_method",
    "SlackConfig",
    "default_client",
    "default_async_client",
    "AsyncSlackWebRequestSender",
    "SlackWebRequestSender",
    "SlackRequestError",
    "InvalidMethodURLError",
    "TransportError",
    "SlackApiError",
]
