"""Test helpers shared across modules."""

import base64
import json
from typing import Any, Callable

import httpx

WEBHOOK_URL = "https://chat.googleapis.com/v1/spaces/AAA/messages?key=k&token=t"


def make_envelope(payload: Any) -> dict[str, Any]:
    """Wrap a payload the way Pub/Sub does: base64 JSON in message.data."""
    raw = payload if isinstance(payload, bytes) else json.dumps(payload).encode("utf-8")
    return {
        "message": {
            "data": base64.b64encode(raw).decode("ascii"),
            "messageId": "1234567890",
            "publishTime": "2024-01-01T00:00:00Z",
        },
        "subscription": "projects/demo/subscriptions/alerts",
    }


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)
