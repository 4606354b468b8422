"""Shared test fixtures for babylai.

Provides mock-transport helpers so client tests never touch the network.
"""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest


class RecordingHandler:
    """MockTransport handler that returns a canned response and records requests."""

    def __init__(self, status_code: int = 200, body: str | bytes = "") -> None:
        self.status_code = status_code
        self.body = body.encode("utf-8") if isinstance(body, str) else body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.body)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    @property
    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def make_handler() -> Callable[..., RecordingHandler]:
    """Factory for :class:`RecordingHandler` instances."""

    def _make(status_code: int = 200, body: str | bytes | dict[str, Any] = "") -> RecordingHandler:
        if isinstance(body, dict):
            body = json.dumps(body)
        return RecordingHandler(status_code, body)

    return _make
