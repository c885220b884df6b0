"""In-memory senders for tests and offline development."""

from __future__ import annotations

from typing import Callable, List, Union

from .base import (
    Headers,
    Params,
    PreparedRequest,
    build_get_request,
    build_post_request,
)

__all__ = ["MockSender", "AsyncMockSender"]

Responder = Union[str, Callable[[PreparedRequest], str]]


class MockSender:
    """
    Records every request it is asked to send and answers with canned text.

    Args:
        response: Body returned for every call, or a callable that receives the
            ``PreparedRequest`` and returns the body.
    """

    def __init__(self, response: Responder = '{"ok": true}') -> None:
        self.response = response
        self.sent: List[PreparedRequest] = []

    @property
    def last_request(self) -> PreparedRequest:
        if not self.sent:
            raise LookupError("no request has been sent")
        return self.sent[-1]

    def get(self, method_url: str, params: Params) -> str:
        return self._answer(build_get_request(method_url, params))

    def post(self, method_url: str, form: Params, headers: Headers) -> str:
        return self._answer(build_post_request(method_url, form, headers))

    def _answer(self, prepared: PreparedRequest) -> str:
        self.sent.append(prepared)
        if callable(self.response):
            return self.response(prepared)
        return self.response


class AsyncMockSender(MockSender):
    """Coroutine flavour of :class:`MockSender`."""

    async def get(self, method_url: str, params: Params) -> str:  # type: ignore[override]
        return self._answer(build_get_request(method_url, params))

    async def post(self, method_url: str, form: Params, headers: Headers) -> str:  # type: ignore[override]
        return self._answer(build_post_request(method_url, form, headers))
