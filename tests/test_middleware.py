"""Tests for request logging helpers."""

import pytest

from hackernews.logging import (
    add_request_context,
    bind_user_id,
    clear_request_context,
    request_id_ctx,
    start_request_context,
    user_id_ctx,
)
from hackernews.middleware import operation_name_from_payload, sanitize_query_params


class TestSanitizeQueryParams:
    def test_sensitive_keys_are_redacted(self):
        params = {"access_token": "abc", "Password": "pw", "page": "2"}

        assert sanitize_query_params(params) == {
            "access_token": "[REDACTED]",
            "Password": "[REDACTED]",
            "page": "2",
        }

    def test_empty_params(self):
        assert sanitize_query_params({}) == {}


class TestOperationName:
    @pytest.mark.parametrize(
        ("payload", "expected"),
        [
            ({"operationName": "LinkFeed", "query": "query Other { me { id } }"}, "LinkFeed"),
            ({"query": "query LinkFeed { linkFeed { id } }"}, "LinkFeed"),
            ({"query": "mutation PostLink { postLink { id } }"}, "mutation:PostLink"),
            ({"query": "{ linkFeed { id } }"}, "unnamed_operation"),
            ({"query": "query IntrospectionQuery { __schema { types { name } } }"}, "__introspection"),
            ({"query": ""}, None),
            ({}, None),
            ({"query": 12}, None),
        ],
    )
    def test_operation_name(self, payload, expected):
        assert operation_name_from_payload(payload) == expected


class TestRequestContext:
    def teardown_method(self):
        clear_request_context()

    def test_well_formed_incoming_id_is_reused(self):
        assert start_request_context("req-123_abc.9") == "req-123_abc.9"
        assert request_id_ctx.get() == "req-123_abc.9"

    @pytest.mark.parametrize("incoming", [None, "", "has space", "x" * 65, "line\nbreak"])
    def test_missing_or_malformed_id_is_replaced(self, incoming):
        request_id = start_request_context(incoming)

        assert request_id != incoming
        assert len(request_id) == 16
        assert request_id_ctx.get() == request_id

    def test_new_request_forgets_previous_user(self):
        start_request_context()
        bind_user_id("7")

        start_request_context()

        assert user_id_ctx.get() is None

    def test_processor_stamps_request_and_user(self):
        start_request_context("abc")
        bind_user_id("7")

        event = add_request_context(None, "info", {"event": "hello"})

        assert event == {"event": "hello", "request_id": "abc", "user_id": "7"}

    def test_processor_leaves_anonymous_events_alone(self):
        clear_request_context()

        assert add_request_context(None, "info", {"event": "hello"}) == {"event": "hello"}
