"""Tests for request context extraction."""

from dataclasses import dataclass
from types import SimpleNamespace
from typing import Any

from reqlog.context.extractor import get_request_context


class TestAbsentRequest:
    """Tests for missing or empty request inputs."""

    def test_none_yields_empty_context(self, base_logger):
        assert get_request_context(None, base_logger) == {}
        base_logger.warning.assert_not_called()

    def test_empty_mapping_yields_empty_context(self, base_logger):
        assert get_request_context({}, base_logger) == {}

    def test_no_known_fields_yields_empty_context(self, base_logger):
        assert get_request_context({"body": "x"}, base_logger) == {}


class TestUserInfo:
    """Tests for the user part of the context."""

    def test_ip_only(self, base_logger):
        context = get_request_context({"ip": "10.0.0.1"}, base_logger)
        assert context == {"user": {"ip": "10.0.0.1"}}

    def test_user_id_only(self, base_logger):
        context = get_request_context({"user": {"id": "u1"}}, base_logger)
        assert context == {"user": {"id": "u1"}}

    def test_user_id_coerced_to_string(self, base_logger):
        context = get_request_context({"user": {"id": 42}}, base_logger)
        assert context["user"] == {"id": "42"}

    def test_user_without_id_is_skipped(self, base_logger):
        context = get_request_context({"user": {"name": "ann"}}, base_logger)
        assert "user" not in context

    def test_falsy_values_are_skipped(self, base_logger):
        context = get_request_context({"ip": "", "user": {"id": None}}, base_logger)
        assert context == {}


class TestRequestInfo:
    """Tests for the request part of the context."""

    def test_method_and_original_url(self, base_logger):
        context = get_request_context(
            {"method": "POST", "originalUrl": "/api/items?x=1", "url": "/items"},
            base_logger,
        )
        assert context == {"request": {"method": "POST", "route": "/api/items?x=1"}}

    def test_snake_case_original_url(self, base_logger):
        context = get_request_context(
            {"method": "GET", "original_url": "/a", "url": "/b"}, base_logger
        )
        assert context["request"]["route"] == "/a"

    def test_route_falls_back_to_url(self, base_logger):
        context = get_request_context({"method": "GET", "url": "/items"}, base_logger)
        assert context == {"request": {"method": "GET", "route": "/items"}}

    def test_id_only(self, base_logger):
        context = get_request_context({"id": 7}, base_logger)
        assert context == {"request": {"id": "7"}}

    def test_url_object_is_coerced(self, base_logger):
        class URL:
            def __str__(self):
                return "http://example.com/health"

        context = get_request_context({"url": URL()}, base_logger)
        assert context["request"]["route"] == "http://example.com/health"


class TestObjectRequests:
    """Tests for attribute-based request objects."""

    def test_namespace_request(self, base_logger):
        request = SimpleNamespace(
            id="r-2",
            method="DELETE",
            url="/items/3",
            ip="::1",
            user=SimpleNamespace(id="admin"),
        )
        assert get_request_context(request, base_logger) == {
            "user": {"id": "admin", "ip": "::1"},
            "request": {"id": "r-2", "method": "DELETE", "route": "/items/3"},
        }

    def test_dataclass_request_with_missing_fields(self, base_logger):
        @dataclass
        class Request:
            method: str
            path: str
            user: Any = None

        context = get_request_context(Request("PUT", "/x"), base_logger)
        assert context == {"request": {"method": "PUT"}}


class TestExtractionFailure:
    """Tests for requests whose fields raise on access."""

    def test_failing_user_property_is_reported(self, base_logger):
        class Request:
            method = "GET"

            @property
            def user(self):
                raise AssertionError("AuthenticationMiddleware must be installed")

        context = get_request_context(Request(), base_logger)

        assert context == {}
        base_logger.warning.assert_called_once()
        args, kwargs = base_logger.warning.call_args
        assert args == ("Failed to extract request context",)
        assert isinstance(kwargs["exc_info"], AssertionError)

    def test_completed_user_is_kept_when_request_part_fails(self, base_logger):
        class Request:
            ip = "1.1.1.1"

            @property
            def method(self):
                raise RuntimeError("boom")

        context = get_request_context(Request(), base_logger)

        assert context == {"user": {"ip": "1.1.1.1"}}
        base_logger.warning.assert_called_once()

    def test_failure_never_propagates_when_logger_breaks(self, base_logger, capsys):
        base_logger.warning.side_effect = RuntimeError("sink down")

        class Request:
            @property
            def user(self):
                raise KeyError("user")

        assert get_request_context(Request(), base_logger) == {}
        assert "Failed to extract request context" in capsys.readouterr().err
