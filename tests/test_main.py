"""Tests for the Pub/Sub push endpoint."""

import pytest
from httpx import ASGITransport, AsyncClient

import app.main
from app.channels.google_chat import GoogleChatChannel
from app.forwarder import AlertForwarder
from app.sources.monitoring import MonitoringSource
from helpers import make_envelope


@pytest.fixture
async def client():
    transport = ASGITransport(app=app.main.app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def use_forwarder(monkeypatch):
    def install(forwarder):
        monkeypatch.setattr(app.main, "forwarder", forwarder)

    return install


async def test_health_check(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


async def test_push_without_forwarder(client, use_forwarder, envelope):
    use_forwarder(None)
    response = await client.post("/pubsub/push", json=envelope)
    assert response.status_code == 503


async def test_push_delivers(client, use_forwarder, make_forwarder, ok_transport, envelope):
    use_forwarder(make_forwarder(ok_transport))

    response = await client.post("/pubsub/push", json=envelope)

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "incident_id": "0.abc123"}
    assert len(ok_transport.requests) == 1


async def test_push_malformed_envelope(client, use_forwarder, make_forwarder, ok_transport):
    use_forwarder(make_forwarder(ok_transport))

    response = await client.post("/pubsub/push", content=b"garbage")

    assert response.status_code == 400
    assert "failed to retrieve PubSub message" in response.json()["detail"]
    assert ok_transport.requests == []


async def test_push_malformed_payload(client, use_forwarder, make_forwarder, ok_transport):
    use_forwarder(make_forwarder(ok_transport))

    response = await client.post("/pubsub/push", json=make_envelope(b"nope"))

    assert response.status_code == 400
    assert "failed to parse PubSub msg payload" in response.json()["detail"]


async def test_push_remote_error(client, use_forwarder, make_forwarder, make_transport, envelope):
    transport = make_transport(400, b'{"error": {"code": 400, "message": "bad", "status": "INVALID"}}')
    use_forwarder(make_forwarder(transport))

    response = await client.post("/pubsub/push", json=envelope)

    assert response.status_code == 502
    assert "code=400" in response.json()["detail"]


async def test_push_with_unconfigured_channel(client, use_forwarder, ok_transport, envelope):
    use_forwarder(AlertForwarder(MonitoringSource(), GoogleChatChannel("", transport=ok_transport)))

    response = await client.post("/pubsub/push", json=envelope)

    assert response.status_code == 503
    assert ok_transport.requests == []
