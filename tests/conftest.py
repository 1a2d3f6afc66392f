import os
import sys

import httpx
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from gatewayapi import GatewayAPIClient


@pytest.fixture
def captured_requests() -> list:
    """Every request seen by the mocked GatewayAPI, in order."""
    return []


@pytest.fixture
def make_client(captured_requests):
    """Builds a GatewayAPIClient whose httpx transport answers with a canned response."""

    def _make(status_code=200, body=None, content=None, api_token="test-token", error=None, **kwargs):
        def handler(request: httpx.Request) -> httpx.Response:
            captured_requests.append(request)
            if error is not None:
                raise error
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=body)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return GatewayAPIClient(api_token=api_token, client=http_client, **kwargs)

    return _make
