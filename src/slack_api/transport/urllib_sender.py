from __future__ import annotations

import codecs
import logging
from email.message import Message
from http.client import HTTPException
from typing import Dict, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from .base import (
    Headers,
    Params,
    PreparedRequest,
    TransportError,
    build_get_request,
    build_post_request,
)

__all__ = ["UrllibSender"]

logger = logging.getLogger(__name__)


def _resolve_charset(headers: Optional[Message]) -> str:
    # Unknown or missing charsets decode as UTF-8.
    charset = headers.get_content_charset() if headers is not None else None
    if not charset:
        return "utf-8"
    try:
        return codecs.lookup(charset).name
    except LookupError:
        return "utf-8"


def _fold_headers(prepared: PreparedRequest) -> Dict[str, str]:
    # urllib keeps one value per header name; repeated names are joined.
    folded: Dict[str, str] = {}
    names: Dict[str, str] = {}
    for name, value in prepared.headers:
        key = name.lower()
        if key in folded:
            folded[key] = f"{folded[key]}, {value}"
        else:
            names[key] = name
            folded[key] = value
    return {names[key]: value for key, value in folded.items()}


class UrllibSender:
    """Blocking Slack request sender built on ``urllib.request``."""

    def __init__(self, timeout: float = 10.0, user_agent: Optional[str] = None) -> None:
        if timeout <= 0:
            raise ValueError("timeout must be a positive number")

        self.timeout = timeout
        self.user_agent = user_agent

    def get(self, method_url: str, params: Params) -> str:
        """Send a GET request and return the response body as text."""
        return self._send(build_get_request(method_url, params))

    def post(self, method_url: str, form: Params, headers: Headers) -> str:
        """Send a form-encoded POST request and return the response body as text."""
        return self._send(build_post_request(method_url, form, headers))

    def _send(self, prepared: PreparedRequest) -> str:
        headers = _fold_headers(prepared)
        if self.user_agent and not any(name.lower() == "user-agent" for name in headers):
            headers["User-Agent"] = self.user_agent
        request = Request(
            prepared.url,
            data=prepared.body,
            headers=headers,
            method=prepared.method,
        )

        try:
            with urlopen(request, timeout=self.timeout) as response:
                status = getattr(response, "status", response.getcode())
                charset = _resolve_charset(response.headers)
                content = response.read().decode(charset, errors="replace")
        except HTTPError as exc:
            # Error statuses are still answers; the caller interprets the body.
            logger.debug("%s %s -> HTTP %s", prepared.method, prepared.url, exc.code)
            try:
                return self._read_error_body(exc)
            finally:
                exc.close()
        except URLError as exc:
            logger.warning("%s %s failed: %s", prepared.method, prepared.url, exc.reason)
            raise TransportError(f"Slack request failed: {exc.reason}") from exc
        except (OSError, HTTPException) as exc:
            # Timeouts and connection resets surface as plain OSError subclasses.
            logger.warning("%s %s failed: %s", prepared.method, prepared.url, exc)
            raise TransportError(f"Slack request failed: {exc}") from exc

        logger.debug("%s %s -> HTTP %s", prepared.method, prepared.url, status)
        return content

    @staticmethod
    def _read_error_body(exc: HTTPError) -> str:
        charset = _resolve_charset(exc.headers)
        try:
            raw = exc.read() if exc.fp is not None else b""
        except (OSError, HTTPException) as read_exc:
            raise TransportError(f"Failed to read Slack response body: {read_exc}") from read_exc
        return raw.decode(charset, errors="replace")
