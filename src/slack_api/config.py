"""
Configuration and sender factories.

Senders are created explicitly and passed to the API functions; nothing here
keeps a process-wide client.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .transport import AsyncHttpxSender, HttpxSender, SlackWebRequestSender, UrllibSender

__all__ = ["SlackConfig", "default_client", "default_async_client"]

DEFAULT_BASE_URL = "https://slack.com/api/"
BACKENDS = ("urllib", "httpx")


@dataclass
class SlackConfig:
    token: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0
    backend: str = "urllib"
    user_agent: Optional[str] = None

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError("timeout must be a positive number")
        if self.backend not in BACKENDS:
            raise ValueError(f"Unknown backend {self.backend!r}; expected one of {BACKENDS}")
        if not self.base_url:
            raise ValueError("base_url is required")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SlackConfig":
        """
        Build a config from environment variables.

        Reads SLACK_API_TOKEN, SLACK_API_BASE_URL, SLACK_HTTP_TIMEOUT and
        SLACK_HTTP_BACKEND. Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        timeout_raw = env.get("SLACK_HTTP_TIMEOUT")
        try:
            timeout = float(timeout_raw) if timeout_raw else 10.0
        except ValueError as exc:
            raise ValueError(f"SLACK_HTTP_TIMEOUT must be a number, got {timeout_raw!r}") from exc
        return cls(
            token=env.get("SLACK_API_TOKEN") or None,
            base_url=env.get("SLACK_API_BASE_URL") or DEFAULT_BASE_URL,
            timeout=timeout,
            backend=(env.get("SLACK_HTTP_BACKEND") or "urllib").lower(),
        )


def default_client(config: Optional[SlackConfig] = None) -> SlackWebRequestSender:
    """Return a ready-to-use blocking sender for ``config.backend``."""
    config = config or SlackConfig()
    if config.backend == "httpx":
        return HttpxSender(timeout=config.timeout, user_agent=config.user_agent)
    return UrllibSender(timeout=config.timeout, user_agent=config.user_agent)


def default_async_client(config: Optional[SlackConfig] = None) -> AsyncHttpxSender:
    """Return a non-blocking sender; always httpx based."""
    config = config or SlackConfig()
    return AsyncHttpxSender(timeout=config.timeout, user_agent=config.user_agent)
