"""Slack web API methods built on top of a request sender."""

from . import channels, chat, conversations
from .common import (
    MalformedResponseError,
    SlackApiError,
    build_params,
    get_slack_url_for_method,
    parse_response,
)

__all__ = [
    "channels",
    "chat",
    "conversations",
    "MalformedResponseError",
    "SlackApiError",
    "build_params",
    "get_slack_url_for_method",
    "parse_response",
]
