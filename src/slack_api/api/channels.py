from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..config import DEFAULT_BASE_URL
from ..transport import SlackWebRequestSender
from .common import build_params, get_slack_url_for_method, parse_response

__all__ = ["HistoryRequest", "HistoryResponse", "history"]

logger = logging.getLogger(__name__)


@dataclass
class HistoryRequest:
    channel: str
    latest: Optional[str] = None
    oldest: Optional[str] = None
    inclusive: Optional[bool] = None
    count: Optional[int] = None
    unreads: Optional[bool] = None


@dataclass
class HistoryResponse:
    ok: bool
    messages: List[Dict[str, Any]] = field(default_factory=list)
    has_more: bool = False
    latest: Optional[str] = None
    unread_count_display: Optional[int] = None


def history(
    client: SlackWebRequestSender,
    token: str,
    request: HistoryRequest,
    base_url: str = DEFAULT_BASE_URL,
) -> HistoryResponse:
    """
    Fetch a page of messages from a channel (``channels.history``).

    Raises:
        SlackApiError: If Slack rejects the call.
        TransportError: If the request cannot be sent.
    """
    if not request.channel:
        raise ValueError("channel is required")

    params = build_params(
        token,
        [
            ("channel", request.channel),
            ("latest", request.latest),
            ("oldest", request.oldest),
            ("inclusive", request.inclusive),
            ("count", request.count),
            ("unreads", request.unreads),
        ],
    )
    url = get_slack_url_for_method("channels.history", base_url)
    logger.debug("channels.history channel=%s", request.channel)
    payload = parse_response(client.get(url, params))
    return HistoryResponse(
        ok=True,
        messages=payload.get("messages") or [],
        has_more=bool(payload.get("has_more", False)),
        latest=payload.get("latest"),
        unread_count_display=payload.get("unread_count_display"),
    )
