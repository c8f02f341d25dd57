"""
Pytest configuration and shared fixtures for the Cyber MCP tests.
"""

import asyncio
import os
import sys

import httpx
import pytest

# Add the project root to Python path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cyber_mcp.core.config import Settings
from cyber_mcp.services.gateway import RequestGateway


BASE_URL = "http://cyber.test"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request and counts how often it was closed."""

    def __init__(self, handler):
        self.requests = []
        self.closed = 0

        async def recording_handler(request):
            self.requests.append(request)
            response = handler(request)
            if not isinstance(response, httpx.Response):
                response = await response
            return response

        super().__init__(recording_handler)

    async def aclose(self):
        self.closed += 1


@pytest.fixture
def make_settings():
    """Build Settings pointing at the fake Cyber API."""
    def _make(**overrides):
        values = {
            "CYBER_API_BASE_URL": BASE_URL,
            "CYBER_API_AUTH_KEY": "test-key",
            "CYBER_API_TIMEOUT_MS": 500,
        }
        values.update(overrides)
        return Settings(**values)
    return _make


@pytest.fixture
def make_gateway(make_settings):
    """Build a RequestGateway whose traffic goes to the given handler."""
    def _make(handler, **overrides):
        transport = RecordingTransport(handler)
        return RequestGateway(make_settings(**overrides), transport=transport), transport
    return _make


def _json_handler(payload, status_code=200):
    """Handler that always answers with the given JSON payload."""
    def _handler(request):
        return httpx.Response(status_code, json=payload)
    return _handler


@pytest.fixture
def json_handler():
    return _json_handler


@pytest.fixture
def slow_handler():
    """Handler that answers far later than any test timeout."""
    async def _handler(request):
        await asyncio.sleep(2)
        return httpx.Response(200, json={})
    return _handler
