from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..config import DEFAULT_BASE_URL
from ..transport import SlackWebRequestSender
from .common import build_params, get_slack_url_for_method, parse_response

__all__ = ["PostMessageRequest", "PostMessageResponse", "post_message"]


@dataclass
class PostMessageRequest:
    channel: str
    text: str
    thread_ts: Optional[str] = None
    username: Optional[str] = None
    icon_emoji: Optional[str] = None
    unfurl_links: Optional[bool] = None


@dataclass
class PostMessageResponse:
    ok: bool
    channel: Optional[str] = None
    ts: Optional[str] = None
    message: Optional[Dict[str, Any]] = None


def post_message(
    client: SlackWebRequestSender,
    token: str,
    request: PostMessageRequest,
    base_url: str = DEFAULT_BASE_URL,
) -> PostMessageResponse:
    """
    Post a message with ``chat.postMessage``.

    The message fields travel as a form body; the token is sent as a bearer
    header rather than a form field.
    """
    if not request.channel:
        raise ValueError("channel is required")

    form = build_params(
        None,
        [
            ("channel", request.channel),
            ("text", request.text),
            ("thread_ts", request.thread_ts),
            ("username", request.username),
            ("icon_emoji", request.icon_emoji),
            ("unfurl_links", request.unfurl_links),
        ],
    )
    headers = [("Authorization", f"Bearer {token}")] if token else []
    text = client.post(get_slack_url_for_method("chat.postMessage", base_url), form, headers)
    payload = parse_response(text)
    return PostMessageResponse(
        ok=True,
        channel=payload.get("channel"),
        ts=payload.get("ts"),
        message=payload.get("message"),
    )
