"""Shared test fixtures."""

from typing import Any, Callable

import httpx
import pytest

from app.channels.google_chat import GoogleChatChannel
from app.forwarder import AlertForwarder
from app.sources.monitoring import MonitoringSource
from helpers import WEBHOOK_URL, RecordingTransport, make_envelope


@pytest.fixture
def incident_payload() -> dict[str, Any]:
    return {
        "incident": {
            "incident_id": "0.abc123",
            "policy_name": "CPU High",
            "documentation": {"content": "log line"},
            "state": "open",
            "url": "https://x/y",
            "started_at": 0,
        },
        "version": "1.2",
    }


@pytest.fixture
def envelope(incident_payload: dict[str, Any]) -> dict[str, Any]:
    return make_envelope(incident_payload)


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    """Build a transport answering every request with a fixed response."""

    def factory(status_code: int = 200, content: bytes = b"{}") -> RecordingTransport:
        return RecordingTransport(lambda request: httpx.Response(status_code, content=content))

    return factory


@pytest.fixture
def ok_transport(make_transport) -> RecordingTransport:
    return make_transport(200, b'{"name": "spaces/AAA/messages/1"}')


@pytest.fixture
def make_forwarder() -> Callable[[httpx.AsyncBaseTransport], AlertForwarder]:
    def factory(transport: httpx.AsyncBaseTransport) -> AlertForwarder:
        channel = GoogleChatChannel(WEBHOOK_URL, transport=transport)
        return AlertForwarder(MonitoringSource(), channel)

    return factory
