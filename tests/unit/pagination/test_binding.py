"""
Tests for binding pagination parameters from requests.

Covers defaults, range checks, semantic validation, client parameter
capture and link construction.
"""

from urllib.parse import parse_qsl, urlsplit

import pytest
from starlette.datastructures import QueryParams

from pagination_engine.exceptions import (
    BindingError,
    DecodeError,
    ValidationError,
)
from pagination_engine.storage.pagination.binding import (
    build_base_url,
    build_link,
    extract_client_params,
)
from pagination_engine.storage.pagination.cursor_codec import encode_cursor
from pagination_engine.storage.pagination.params import (
    CursorParams,
    OffsetParams,
)


class TestBuildBaseURL:
    """Tests for build_base_url function."""

    def test_http_request(self, make_request):
        request = make_request(path="/api/test", query_string="page=2")
        assert build_base_url(request) == "http://example.com/api/test"

    def test_https_request(self, make_request):
        request = make_request(scheme="https")
        assert build_base_url(request) == "https://example.com/api/test"

    def test_host_with_port(self, make_request):
        request = make_request(host="localhost:8000", path="/doctors")
        assert build_base_url(request) == "http://localhost:8000/doctors"

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("/files/a b", "http://example.com/files/a%20b"),
            ("/files/a?b", "http://example.com/files/a%3Fb"),
            ("/files/100%", "http://example.com/files/100%25"),
        ],
    )
    def test_path_is_escaped(self, make_request, path, expected):
        # ASGI scopes carry the decoded path
        assert build_base_url(make_request(path=path)) == expected

    def test_escaped_path_survives_link_building(self, make_request):
        params = OffsetParams.from_request(
            make_request(path="/files/a?b", query_string="page=1&limit=1")
        )

        link = build_link(params.base_url, [("page", "2")], [])

        assert urlsplit(link).path == "/files/a%3Fb"
        assert parse_qsl(urlsplit(link).query) == [("page", "2")]


class TestExtractClientParams:
    """Tests for extract_client_params function."""

    def test_strips_pagination_keys(self):
        query = QueryParams("page=2&limit=10&filter=test&extra=value")
        result = extract_client_params(query, {"page", "limit"})
        assert result == [("filter", "test"), ("extra", "value")]

    def test_keeps_order_and_repeated_keys(self):
        query = QueryParams("filter=name&page=1&sort=created_at&filter=specialty")
        result = extract_client_params(query, {"page", "limit"})
        assert result == [
            ("filter", "name"),
            ("sort", "created_at"),
            ("filter", "specialty"),
        ]

    def test_empty_query(self):
        assert extract_client_params(QueryParams(""), {"page"}) == []


class TestBuildLink:
    """Tests for build_link function."""

    def test_pagination_first_then_client_params(self):
        link = build_link(
            "http://example.com/api",
            [("page", "2"), ("limit", "10")],
            [("filter", "name"), ("filter", "specialty")],
        )
        assert (
            link
            == "http://example.com/api?page=2&limit=10&filter=name&filter=specialty"
        )

    def test_without_client_params(self):
        link = build_link("http://example.com/api", [("page", "3")], [])
        assert link == "http://example.com/api?page=3"

    def test_values_are_escaped(self):
        link = build_link(
            "http://example.com/api", [("page", "2")], [("q", "a b&c")]
        )
        query = parse_qsl(urlsplit(link).query)
        assert ("q", "a b&c") in query

    def test_base_url_query_is_kept_and_pagination_replaced(self):
        link = build_link(
            "http://example.com/api?status=active&page=7",
            [("page", "2"), ("limit", "10")],
            [],
        )
        query = parse_qsl(urlsplit(link).query)
        assert query == [("page", "2"), ("limit", "10"), ("status", "active")]


class TestOffsetParamsBinding:
    """Tests for OffsetParams.from_request."""

    def test_defaults(self, make_request):
        params = OffsetParams.from_request(make_request())

        assert params.page == 1
        assert params.limit == 10
        assert params.base_url == "http://example.com/api/test"
        assert params.client_params == []

    def test_all_fields(self, make_request):
        request = make_request(
            query_string="page=3&limit=20&filter=test&extra=value"
        )
        params = OffsetParams.from_request(request)

        assert params.page == 3
        assert params.limit == 20
        assert params.client_params == [("filter", "test"), ("extra", "value")]
        assert params.get_offset() == 40

    def test_repeated_page_uses_first_value(self, make_request):
        params = OffsetParams.from_request(make_request(query_string="page=2&page=5"))
        assert params.page == 2

    @pytest.mark.parametrize(
        "query_string",
        ["page=0", "page=-1", "limit=0", "limit=101", "limit=abc", "page=two"],
    )
    def test_invalid_values(self, make_request, query_string):
        with pytest.raises(BindingError, match="invalid pagination parameters"):
            OffsetParams.from_request(make_request(query_string=query_string))

    def test_error_message_is_short(self, make_request):
        with pytest.raises(BindingError) as exc_info:
            OffsetParams.from_request(make_request(query_string="limit=0"))

        assert exc_info.value.message == (
            "invalid pagination parameters: "
            "limit: Input should be greater than or equal to 1"
        )
        assert "\n" not in exc_info.value.message
        assert "pydantic.dev" not in exc_info.value.message

    def test_error_message_lists_every_field(self, make_request):
        with pytest.raises(BindingError) as exc_info:
            OffsetParams.from_request(make_request(query_string="page=0&limit=abc"))

        assert "page: Input should be greater than or equal to 1" in (
            exc_info.value.message
        )
        assert "limit: Input should be a valid integer" in exc_info.value.message

    @pytest.mark.parametrize("limit", [1, 100])
    def test_limit_bounds_are_inclusive(self, make_request, limit):
        params = OffsetParams.from_request(
            make_request(query_string=f"limit={limit}")
        )
        assert params.limit == limit

    def test_missing_host(self, make_request):
        with pytest.raises(ValidationError, match="valid host"):
            OffsetParams.from_request(make_request(host=""))

    def test_binding_is_idempotent(self, make_request):
        request = make_request(query_string="page=2&limit=5&tag=a&tag=b")
        assert OffsetParams.from_request(request) == OffsetParams.from_request(
            request
        )


class TestCursorParamsBinding:
    """Tests for CursorParams.from_request."""

    def test_all_fields(self, make_request):
        cursor = encode_cursor("123")
        request = make_request(
            query_string=f"cursor={cursor}&ordering=asc&limit=20&filter=test&extra=value"
        )
        params = CursorParams.from_request(request)

        assert params.cursor == cursor
        assert params.ordering == "asc"
        assert params.limit == 20
        assert params.base_url == "http://example.com/api/test"
        assert params.client_params == [("filter", "test"), ("extra", "value")]
        assert params.decoded_cursor() == "123"

    def test_defaults(self, make_request):
        params = CursorParams.from_request(make_request())

        assert params.cursor == ""
        assert params.ordering == "asc"
        assert params.limit == 10
        assert params.client_params == []
        assert params.decoded_cursor() is None

    def test_ordering_is_normalized(self, make_request):
        params = CursorParams.from_request(make_request(query_string="ordering=DESC"))
        assert params.ordering == "desc"

    @pytest.mark.parametrize("query_string", ["limit=0", "limit=101", "limit=ten"])
    def test_invalid_limit(self, make_request, query_string):
        with pytest.raises(BindingError, match="invalid cursor parameters"):
            CursorParams.from_request(make_request(query_string=query_string))

    def test_error_message_is_short(self, make_request):
        with pytest.raises(BindingError) as exc_info:
            CursorParams.from_request(make_request(query_string="limit=101"))

        assert exc_info.value.message == (
            "invalid cursor parameters: "
            "limit: Input should be less than or equal to 100"
        )

    def test_zero_limit_is_binding_error_whatever_else_is_wrong(self, make_request):
        request = make_request(
            query_string="limit=0&ordering=sideways&cursor=invalid!!!", host=""
        )
        with pytest.raises(BindingError):
            CursorParams.from_request(request)

    def test_invalid_ordering(self, make_request):
        with pytest.raises(
            ValidationError, match="ordering must be either 'asc' or 'desc'"
        ):
            CursorParams.from_request(make_request(query_string="ordering=sideways"))

    def test_invalid_cursor(self, make_request):
        with pytest.raises(DecodeError, match="invalid cursor"):
            CursorParams.from_request(make_request(query_string="cursor=invalid!!!"))

    def test_binding_is_idempotent(self, make_request):
        request = make_request(
            query_string=f"cursor={encode_cursor('9')}&ordering=Desc&q=x"
        )
        assert CursorParams.from_request(request) == CursorParams.from_request(
            request
        )


class TestCursorParamsValidate:
    """Tests for CursorParams.validate_params on directly built params."""

    def test_valid_params_with_cursor(self, base_url):
        params = CursorParams(
            cursor=encode_cursor("123"), ordering="desc", limit=20, base_url=base_url
        )
        params.validate_params()
        assert params.ordering == "desc"

    def test_uppercase_ordering(self, base_url):
        params = CursorParams(ordering="ASC", base_url=base_url)
        params.validate_params()
        assert params.ordering == "asc"

    def test_invalid_cursor(self, base_url):
        params = CursorParams(cursor="invalid-cursor!!!", base_url=base_url)
        with pytest.raises(DecodeError, match="invalid cursor"):
            params.validate_params()

    def test_missing_base_url(self):
        with pytest.raises(ValidationError, match="base url is required"):
            CursorParams().validate_params()
