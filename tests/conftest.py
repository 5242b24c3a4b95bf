"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures for the pagination tests.
"""

from typing import Callable

import pytest
from starlette.requests import Request

from tests.mocks.pagination_mocks import build_request


@pytest.fixture
def make_request() -> Callable[..., Request]:
    """
    Provides a factory for Starlette requests.

    Returns:
        Callable: build_request(path, query_string, host, scheme).
    """
    return build_request


@pytest.fixture
def base_url() -> str:
    """Base URL used by paginators built directly from parameters."""
    return "http://example.com/api"
