"""Cloud Functions entry point for Pub/Sub triggered alerts."""

import asyncio
import functools
import logging
from typing import Callable

import functions_framework
from cloudevents.http import CloudEvent

from app.config import get_settings
from app.forwarder import AlertForwarder, create_forwarder

logger = logging.getLogger(__name__)

ENTRY_POINT = "GoogleChatAlert"


def google_chat_alert(cloud_event: CloudEvent, forwarder: AlertForwarder | None = None) -> None:
    """Forward the Pub/Sub message carried by ``cloud_event`` to Google Chat."""
    if forwarder is None:
        forwarder = create_forwarder(get_settings())
    logger.info(f"Received CloudEvent {cloud_event['id']} from {cloud_event['source']}")
    asyncio.run(forwarder.forward(cloud_event.data))


def register(name: str = ENTRY_POINT) -> Callable[[CloudEvent], None]:
    """Register the handler as a CloudEvent function under ``name``.

    The Functions Framework keys its registry by function name, so the
    handler is wrapped and renamed before registration. Call once at startup.
    """

    @functools.wraps(google_chat_alert)
    def handler(cloud_event: CloudEvent) -> None:
        google_chat_alert(cloud_event)

    handler.__name__ = name
    handler.__qualname__ = name
    registered = functions_framework.cloud_event(handler)
    logger.info(f"Registered CloudEvent function {name}")
    return registered
