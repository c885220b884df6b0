"""
Transport capability shared by every HTTP backend.

A sender turns a Slack method URL plus parameters into raw response text.
Request construction lives here so that each backend only executes a
``PreparedRequest`` and the token handling is decided in one place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

__all__ = [
    "FORM_CONTENT_TYPE",
    "Headers",
    "Params",
    "PreparedRequest",
    "SlackRequestError",
    "InvalidMethodURLError",
    "TransportError",
    "SlackWebRequestSender",
    "AsyncSlackWebRequestSender",
    "validate_method_url",
    "split_token",
    "build_get_request",
    "build_post_request",
]

Params = Sequence[Tuple[str, str]]
Headers = Sequence[Tuple[str, str]]

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
TOKEN_KEY = "token"


class SlackRequestError(RuntimeError):
    """Base class for errors raised while talking to Slack."""


class InvalidMethodURLError(SlackRequestError, ValueError):
    """Raised when a method URL is not an absolute http(s) URL."""


class TransportError(SlackRequestError):
    """Raised when a request cannot be sent or its response cannot be read."""


@dataclass
class PreparedRequest:
    method: str
    url: str
    headers: List[Tuple[str, str]] = field(default_factory=list)
    body: Optional[bytes] = None

    def header_values(self, name: str) -> List[str]:
        """Return every value sent for ``name`` (case-insensitive), in order."""
        lowered = name.lower()
        return [value for key, value in self.headers if key.lower() == lowered]


class SlackWebRequestSender(Protocol):
    """Anything that can send Slack web API requests and return body text."""

    def get(self, method_url: str, params: Params) -> str: ...

    def post(self, method_url: str, form: Params, headers: Headers) -> str: ...


class AsyncSlackWebRequestSender(Protocol):
    """Coroutine flavour of :class:`SlackWebRequestSender`."""

    async def get(self, method_url: str, params: Params) -> str: ...

    async def post(self, method_url: str, form: Params, headers: Headers) -> str: ...


def validate_method_url(method_url: str) -> str:
    """
    Check that ``method_url`` is an absolute http(s) URL without a ``token``
    in its query string.

    Raises:
        InvalidMethodURLError: If the URL cannot be used for a request.
    """
    if not isinstance(method_url, str) or not method_url.strip():
        raise InvalidMethodURLError(f"Invalid method URL: {method_url!r}")
    try:
        parts = urlsplit(method_url)
        # Accessing port validates it; urlsplit alone does not.
        _ = parts.port
    except ValueError as exc:
        raise InvalidMethodURLError(f"Invalid method URL: {method_url!r}") from exc
    if parts.scheme not in ("http", "https") or not parts.hostname:
        raise InvalidMethodURLError(f"Invalid method URL: {method_url!r}")
    if any(key == TOKEN_KEY for key, _ in parse_qsl(parts.query, keep_blank_values=True)):
        # The URL is not echoed back since it carries the credential.
        raise InvalidMethodURLError("Method URL must not carry a token; pass it as a parameter")
    return method_url


def split_token(params: Params) -> Tuple[Optional[str], List[Tuple[str, str]]]:
    """
    Separate ``token`` entries from the other parameters.

    When several token entries are supplied the last one wins and the others
    are dropped. The remaining parameters keep their relative order.
    """
    token: Optional[str] = None
    rest: List[Tuple[str, str]] = []
    for key, value in params:
        if key == TOKEN_KEY:
            token = value
        else:
            rest.append((key, value))
    return token, rest


def build_get_request(method_url: str, params: Params) -> PreparedRequest:
    """
    Build a GET request with the token promoted to a bearer header.

    Non-token parameters are appended to whatever query the URL already has.
    """
    validate_method_url(method_url)
    token, rest = split_token(params)

    parts = urlsplit(method_url)
    query = parts.query
    if rest:
        encoded = urlencode(rest)
        query = f"{query}&{encoded}" if query else encoded
    url = urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))

    headers: List[Tuple[str, str]] = []
    if token is not None:
        headers.append(("Authorization", f"Bearer {token}"))
    return PreparedRequest(method="GET", url=url, headers=headers)


def build_post_request(method_url: str, form: Params, headers: Headers) -> PreparedRequest:
    """Build a form-encoded POST request; ``headers`` are appended verbatim."""
    validate_method_url(method_url)
    body = urlencode(list(form)).encode("ascii")
    request_headers: List[Tuple[str, str]] = [("Content-Type", FORM_CONTENT_TYPE)]
    request_headers.extend((name, value) for name, value in headers)
    return PreparedRequest(method="POST", url=method_url, headers=request_headers, body=body)
