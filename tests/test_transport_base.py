"""Tests for the request builders shared by every sender."""

import pytest

from slack_api.transport.base import (
    InvalidMethodURLError,
    SlackRequestError,
    build_get_request,
    build_post_request,
    split_token,
    validate_method_url,
)

HISTORY_URL = "https://slack.com/api/channels.history"
INVALID_URLS = ["", "   ", "not a url", "slack.com/api/x", "ftp://slack.com/api/x", "https://", "http://host:port/x"]


def test_get_without_token_keeps_every_param_and_adds_no_auth():
    prepared = build_get_request(HISTORY_URL, [("channel", "C123"), ("count", "10")])
    assert prepared.method == "GET"
    assert prepared.url == f"{HISTORY_URL}?channel=C123&count=10"
    assert prepared.header_values("Authorization") == []
    assert prepared.body is None


def test_get_with_token_moves_it_to_bearer_header():
    prepared = build_get_request(HISTORY_URL, [("channel", "C123"), ("token", "xoxb-abc")])
    assert prepared.url == f"{HISTORY_URL}?channel=C123"
    assert prepared.header_values("authorization") == ["Bearer xoxb-abc"]
    assert "token" not in prepared.url


def test_get_with_several_tokens_uses_the_last_one():
    params = [("token", "first"), ("channel", "C1"), ("token", "second")]
    prepared = build_get_request(HISTORY_URL, params)
    assert prepared.header_values("Authorization") == ["Bearer second"]
    assert prepared.url == f"{HISTORY_URL}?channel=C1"


def test_get_preserves_order_and_duplicates_of_other_params():
    params = [("b", "2"), ("a", "1"), ("b", "3")]
    prepared = build_get_request(HISTORY_URL, params)
    assert prepared.url == f"{HISTORY_URL}?b=2&a=1&b=3"


def test_get_appends_to_existing_query_and_encodes_values():
    prepared = build_get_request(f"{HISTORY_URL}?pretty=1", [("text", "a b&c")])
    assert prepared.url == f"{HISTORY_URL}?pretty=1&text=a+b%26c"


def test_get_with_only_token_leaves_url_untouched():
    prepared = build_get_request(HISTORY_URL, [("token", "xoxp-1")])
    assert prepared.url == HISTORY_URL


def test_split_token_returns_none_when_absent():
    token, rest = split_token([("channel", "C1")])
    assert token is None
    assert rest == [("channel", "C1")]


def test_post_encodes_form_and_appends_headers():
    prepared = build_post_request(
        "https://slack.com/api/chat.postMessage",
        [("text", "hi")],
        [("X-Test", "1")],
    )
    assert prepared.method == "POST"
    assert prepared.body == b"text=hi"
    assert prepared.header_values("Content-Type") == ["application/x-www-form-urlencoded"]
    assert prepared.header_values("X-Test") == ["1"]


def test_post_keeps_repeated_header_names():
    prepared = build_post_request(
        "https://slack.com/api/chat.postMessage",
        [("a", "1"), ("b", "2")],
        [("X-Slack-Tag", "one"), ("X-Slack-Tag", "two")],
    )
    assert prepared.body == b"a=1&b=2"
    assert prepared.header_values("X-Slack-Tag") == ["one", "two"]


def test_post_does_not_touch_token_form_field():
    prepared = build_post_request("https://slack.com/api/auth.test", [("token", "t")], [])
    assert prepared.body == b"token=t"
    assert prepared.header_values("Authorization") == []


@pytest.mark.parametrize("url", INVALID_URLS)
def test_invalid_method_urls_are_rejected(url):
    with pytest.raises(InvalidMethodURLError):
        validate_method_url(url)
    with pytest.raises(InvalidMethodURLError):
        build_get_request(url, [])
    with pytest.raises(InvalidMethodURLError):
        build_post_request(url, [], [])


def test_token_in_method_url_query_is_rejected_without_echoing_it():
    for url in (
        "https://slack.com/api/channels.history?token=xoxb-secret",
        "https://slack.com/api/channels.history?channel=C1&token=",
    ):
        with pytest.raises(InvalidMethodURLError) as exc_info:
            build_get_request(url, [("channel", "C1")])
        assert "xoxb-secret" not in str(exc_info.value)
        with pytest.raises(InvalidMethodURLError):
            build_post_request(url, [], [])
    assert validate_method_url("https://slack.com/api/x?tokens=1&pretty=1")


def test_invalid_method_url_error_is_value_error_and_slack_error():
    with pytest.raises(ValueError):
        validate_method_url("nope")
    with pytest.raises(SlackRequestError):
        validate_method_url("nope")


def run():
    test_get_without_token_keeps_every_param_and_adds_no_auth()
    test_get_with_token_moves_it_to_bearer_header()
    test_get_with_several_tokens_uses_the_last_one()
    test_get_preserves_order_and_duplicates_of_other_params()
    test_get_appends_to_existing_query_and_encodes_values()
    test_get_with_only_token_leaves_url_untouched()
    test_split_token_returns_none_when_absent()
    test_post_encodes_form_and_appends_headers()
    test_post_keeps_repeated_header_names()
    test_post_does_not_touch_token_form_field()
    for url in INVALID_URLS:
        test_invalid_method_urls_are_rejected(url)
    test_token_in_method_url_query_is_rejected_without_echoing_it()
    test_invalid_method_url_error_is_value_error_and_slack_error()
    print("test_transport_base: all checks passed.")


if __name__ == "__main__":
    run()
