"""HTTP transports for the Slack web API."""

from .base import (
    AsyncSlackWebRequestSender,
    Headers,
    InvalidMethodURLError,
    Params,
    PreparedRequest,
    SlackRequestError,
    SlackWebRequestSender,
    TransportError,
    build_get_request,
    build_post_request,
    split_token,
    validate_method_url,
)
from .httpx_sender import AsyncHttpxSender, HttpxSender
from .mock_sender import AsyncMockSender, MockSender
from .urllib_sender import UrllibSender

__all__ = [
    "AsyncHttpxSender",
    "AsyncMockSender",
    "AsyncSlackWebRequestSender",
    "Headers",
    "HttpxSender",
    "InvalidMethodURLError",
    "MockSender",
    "Params",
    "PreparedRequest",
    "SlackRequestError",
    "SlackWebRequestSender",
    "TransportError",
    "UrllibSender",
    "build_get_request",
    "build_post_request",
    "split_token",
    "validate_method_url",
]
