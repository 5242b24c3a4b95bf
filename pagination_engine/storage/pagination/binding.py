"""
Helpers that turn an inbound request into pagination parameters and build
the navigation links replayed to the client.

Pagination keys are read by the parameter models; every other query
parameter is captured verbatim so generated links keep the client's
filters and sort options.
"""

from collections.abc import Collection
from typing import Any
from urllib.parse import quote, urlencode

from starlette.datastructures import URL, QueryParams
from starlette.requests import Request


def build_base_url(request: Request) -> str:
    """
    Build ``scheme://host/path`` for the current request, without the query.

    The scheme follows the request URL, so requests served over TLS produce
    ``https`` links. The path is taken from the decoded ASGI scope and
    escaped again, so ``/files/a%3Fb`` stays one path segment.
    """
    url = request.url
    root_path = request.scope.get("root_path", "")
    path = request.scope["path"]
    if not path.startswith(root_path):
        path = root_path + path
    return f"{url.scheme}://{url.netloc}{quote(path)}"


def extract_client_params(
    query_params: QueryParams, exclude: Collection[str]
) -> list[tuple[str, str]]:
    """
    Collect non-pagination query parameters in request order.

    Multi-valued keys keep every value.

    Args:
        query_params: The request's query parameters.
        exclude: Keys consumed by the pagination strategy.

    Returns:
        Ordered list of ``(key, value)`` pairs.

    Example:
        >>> extract_client_params(
        ...     QueryParams("page=2&filter=a&filter=b"), {"page", "limit"}
        ... )
        [('filter', 'a'), ('filter', 'b')]
    """
    return [
        (key, value)
        for key, value in query_params.multi_items()
        if key not in exclude
    ]


def pagination_values(
    query_params: QueryParams, keys: Collection[str]
) -> dict[str, Any]:
    """
    Pick the pagination keys present in the request.

    When a key is repeated the first value wins. Missing keys are left out so
    the parameter model applies its defaults.
    """
    return {
        key: query_params.getlist(key)[0]
        for key in keys
        if key in query_params
    }


def build_link(
    base_url: str,
    pagination: list[tuple[str, str]],
    client_params: list[tuple[str, str]],
) -> str:
    """
    Build a navigation link.

    Pagination pairs come first, followed by any query already on the base
    URL (minus pagination keys) and then the captured client parameters.

    Args:
        base_url: Validated ``scheme://host/path`` of the endpoint.
        pagination: Strategy-specific pairs such as ``("page", "2")``.
        client_params: Pairs captured by extract_client_params().

    Example:
        >>> build_link(
        ...     "http://example.com/api",
        ...     [("page", "2"), ("limit", "10")],
        ...     [("filter", "name")],
        ... )
        'http://example.com/api?page=2&limit=10&filter=name'
    """
    url = URL(base_url)
    replaced = {key for key, _ in pagination}
    existing = [
        (key, value)
        for key, value in QueryParams(url.query).multi_items()
        if key not in replaced
    ]
    query = urlencode([*pagination, *existing, *client_params])
    return str(url.replace(query=query))
