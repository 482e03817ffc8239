"""Shared fixtures for ynab-vault tests."""

import httpx
import pytest

from ynab_vault.ynab_client import YNABClient

BASE_URL = "https://api.test/v1/budgets"


class ScriptedStream(httpx.AsyncByteStream):
    """Response body that can fail while being read or closed."""

    def __init__(self, body=b"data", read_error=None, close_error=None):
        self.body = body
        self.read_error = read_error
        self.close_error = close_error
        self.closed = False

    async def __aiter__(self):
        if self.read_error:
            raise self.read_error
        yield self.body

    async def aclose(self):
        self.closed = True
        if self.close_error:
            raise self.close_error


@pytest.fixture
def make_client():
    """Build a YNABClient whose requests are answered by ``handler``."""

    def _make(handler, token="test_token"):
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return YNABClient(token, base_url=BASE_URL, http_client=http_client)

    return _make
