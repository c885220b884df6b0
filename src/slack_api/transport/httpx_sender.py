from __future__ import annotations

import logging
from typing import Optional

import httpx

from .base import (
    Headers,
    Params,
    PreparedRequest,
    TransportError,
    build_get_request,
    build_post_request,
)

__all__ = ["HttpxSender", "AsyncHttpxSender"]

logger = logging.getLogger(__name__)


def _client_headers(user_agent: Optional[str]) -> dict:
    return {"User-Agent": user_agent} if user_agent else {}


def _to_httpx_request(client, prepared: PreparedRequest) -> httpx.Request:
    return client.build_request(
        prepared.method,
        prepared.url,
        headers=prepared.headers,
        content=prepared.body,
    )


class HttpxSender:
    """Blocking sender backed by a pooled ``httpx.Client``."""

    def __init__(
        self,
        *,
        timeout: float = 10.0,
        user_agent: Optional[str] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        if timeout <= 0:
            raise ValueError("timeout must be a positive number")
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout, headers=_client_headers(user_agent))

    def get(self, method_url: str, params: Params) -> str:
        return self._send(build_get_request(method_url, params))

    def post(self, method_url: str, form: Params, headers: Headers) -> str:
        return self._send(build_post_request(method_url, form, headers))

    def _send(self, prepared: PreparedRequest) -> str:
        try:
            response = self._client.send(_to_httpx_request(self._client, prepared))
            text = response.text
        except httpx.TimeoutException as exc:
            logger.warning("%s %s timed out", prepared.method, prepared.url)
            raise TransportError(f"Slack request timed out: {exc}") from exc
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", prepared.method, prepared.url, exc)
            raise TransportError(f"Slack request failed: {exc}") from exc
        logger.debug("%s %s -> HTTP %s", prepared.method, prepared.url, response.status_code)
        return text

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpxSender":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class AsyncHttpxSender:
    """Non-blocking sender backed by ``httpx.AsyncClient``."""

    def __init__(
        self,
        *,
        timeout: float = 10.0,
        user_agent: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        if timeout <= 0:
            raise ValueError("timeout must be a positive number")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout, headers=_client_headers(user_agent)
        )

    async def get(self, method_url: str, params: Params) -> str:
        return await self._send(build_get_request(method_url, params))

    async def post(self, method_url: str, form: Params, headers: Headers) -> str:
        return await self._send(build_post_request(method_url, form, headers))

    async def _send(self, prepared: PreparedRequest) -> str:
        try:
            response = await self._client.send(_to_httpx_request(self._client, prepared))
            text = response.text
        except httpx.TimeoutException as exc:
            logger.warning("%s %s timed out", prepared.method, prepared.url)
            raise TransportError(f"Slack request timed out: {exc}") from exc
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", prepared.method, prepared.url, exc)
            raise TransportError(f"Slack request failed: {exc}") from exc
        logger.debug("%s %s -> HTTP %s", prepared.method, prepared.url, response.status_code)
        return text

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncHttpxSender":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
