"""
Shared fixtures for adapter tests.

HTTP traffic is served by httpx.MockTransport so no test touches the network.
Each recorder keeps the requests it saw for wire-format assertions.
"""

import json
from typing import Any, Callable, List

import httpx
import pytest


class RecordingTransport:
    """Mock transport that records requests and replies via a handler."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.handler = handler
        self.requests: List[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


def json_reply(body: Any, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    """Handler returning the same JSON body for every request."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=body)

    return handler


def openai_body(content: Any) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def anthropic_body(text: Any) -> dict:
    return {"content": [{"type": "text", "text": text}]}


def gemini_body(text: Any) -> dict:
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}


@pytest.fixture
def make_client():
    """Factory for AsyncClients backed by a RecordingTransport."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]):
        recorder = RecordingTransport(handler)
        client = httpx.AsyncClient(transport=recorder.transport)
        return client, recorder

    return _make
