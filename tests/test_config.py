"""Tests for SlackConfig and the sender factories."""

import asyncio

import pytest

from slack_api.config import SlackConfig, default_async_client, default_client
from slack_api.transport import AsyncHttpxSender, HttpxSender, UrllibSender


def test_defaults():
    config = SlackConfig()
    assert config.base_url == "https://slack.com/api/"
    assert config.backend == "urllib"
    assert config.timeout == 10.0
    assert config.token is None


def test_from_env_reads_variables():
    config = SlackConfig.from_env(
        {
            "SLACK_API_TOKEN": "xoxb-env",
            "SLACK_API_BASE_URL": "https://example.test/api/",
            "SLACK_HTTP_TIMEOUT": "2.5",
            "SLACK_HTTP_BACKEND": "HTTPX",
        }
    )
    assert config.token == "xoxb-env"
    assert config.base_url == "https://example.test/api/"
    assert config.timeout == 2.5
    assert config.backend == "httpx"


def test_from_env_with_empty_environment_uses_defaults():
    assert SlackConfig.from_env({}) == SlackConfig()


def test_from_env_rejects_bad_timeout():
    with pytest.raises(ValueError):
        SlackConfig.from_env({"SLACK_HTTP_TIMEOUT": "soon"})


def test_invalid_values_are_rejected():
    with pytest.raises(ValueError):
        SlackConfig(backend="curl")
    with pytest.raises(ValueError):
        SlackConfig(timeout=0)


def test_default_client_picks_backend():
    assert isinstance(default_client(), UrllibSender)
    sender = default_client(SlackConfig(backend="httpx", timeout=3))
    assert isinstance(sender, HttpxSender)
    sender.close()


def test_default_async_client():
    sender = default_async_client(SlackConfig(timeout=2))
    assert isinstance(sender, AsyncHttpxSender)
    asyncio.run(sender.aclose())


def run():
    test_defaults()
    test_from_env_reads_variables()
    test_from_env_with_empty_environment_uses_defaults()
    test_from_env_rejects_bad_timeout()
    test_invalid_values_are_rejected()
    test_default_client_picks_backend()
    test_default_async_client()
    print("test_config: all checks passed.")


if __name__ == "__main__":
    run()
