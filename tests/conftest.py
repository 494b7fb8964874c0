"""Shared pytest fixtures for massive_client tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from massive_client.client import RESTClient

BASE_URL = "https://api.massive.test"
API_KEY = "test-key"


@pytest.fixture
def client() -> Iterator[RESTClient]:
    """Client pointed at a fake host; requests are intercepted by httpx_mock."""
    with RESTClient(API_KEY, base_url=BASE_URL) as c:
        yield c
