from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..config import DEFAULT_BASE_URL
from ..transport import SlackWebRequestSender
from .common import build_params, get_slack_url_for_method, parse_response

__all__ = ["ListRequest", "ListResponse", "list", "list_conversations"]


@dataclass
class ListRequest:
    cursor: Optional[str] = None
    exclude_archived: Optional[bool] = None
    limit: Optional[int] = None
    types: Optional[List[str]] = None


@dataclass
class ListResponse:
    ok: bool
    channels: List[Dict[str, Any]] = field(default_factory=list)
    next_cursor: Optional[str] = None


def list_conversations(
    client: SlackWebRequestSender,
    token: str,
    request: Optional[ListRequest] = None,
    base_url: str = DEFAULT_BASE_URL,
) -> ListResponse:
    """Return one page of ``conversations.list``; follow ``next_cursor`` yourself."""
    request = request or ListRequest()
    params = build_params(
        token,
        [
            ("cursor", request.cursor),
            ("exclude_archived", request.exclude_archived),
            ("limit", request.limit),
            ("types", request.types),
        ],
    )
    payload = parse_response(client.get(get_slack_url_for_method("conversations.list", base_url), params))
    metadata = payload.get("response_metadata") or {}
    return ListResponse(
        ok=True,
        channels=payload.get("channels") or [],
        next_cursor=metadata.get("next_cursor") or None,
    )


# Slack's method name. Bound last so the builtin stays usable above.
list = list_conversations  # noqa: A001
