"""
Helpers shared by the endpoint modules: method URLs, parameter rendering and
decoding of Slack's ``{"ok": ..., "error": ...}`` envelope.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..config import DEFAULT_BASE_URL
from ..transport import SlackRequestError

__all__ = [
    "SlackApiError",
    "MalformedResponseError",
    "get_slack_url_for_method",
    "build_params",
    "parse_response",
]


class SlackApiError(SlackRequestError):
    """Raised when Slack answers with ``ok: false``."""

    def __init__(self, error: str, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(f"Slack API error: {error}")
        self.error = error
        self.payload = payload or {}


class MalformedResponseError(SlackRequestError):
    """Raised when a response body is not a JSON object."""


def get_slack_url_for_method(method: str, base_url: str = DEFAULT_BASE_URL) -> str:
    """Return the full URL for a Slack method name such as ``channels.history``."""
    if not method:
        raise ValueError("method is required")
    return f"{base_url.rstrip('/')}/{method.lstrip('/')}"


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    return str(value)


def build_params(token: Optional[str], fields: Iterable[Tuple[str, Any]]) -> List[Tuple[str, str]]:
    """
    Render request fields as string pairs, skipping unset (None) values.

    The token, when given, is emitted as a ``token`` pair so the transport can
    move it into the Authorization header.
    """
    params: List[Tuple[str, str]] = []
    if token:
        params.append(("token", token))
    for key, value in fields:
        if value is None:
            continue
        params.append((key, _render(value)))
    return params


def parse_response(text: str) -> Dict[str, Any]:
    """
    Decode a Slack response body and check its envelope.

    Raises:
        MalformedResponseError: If the body is not a JSON object.
        SlackApiError: If the envelope reports ``ok: false``.
    """
    try:
        payload = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise MalformedResponseError(f"Slack response is not valid JSON: {text[:200]!r}") from exc
    if not isinstance(payload, dict):
        raise MalformedResponseError(f"Slack response is not a JSON object: {text[:200]!r}")
    if not payload.get("ok", False):
        raise SlackApiError(str(payload.get("error") or "unknown_error"), payload)
    return payload
