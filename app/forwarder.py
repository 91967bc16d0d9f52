"""Alert forwarding pipeline: decode, render, deliver."""

import logging
from typing import Any

from app.channels.base import BaseChannel
from app.channels.google_chat import GoogleChatChannel
from app.config import Settings
from app.errors import ConfigurationError, ForwarderError
from app.models.incident import Incident
from app.sources.base import BaseSource
from app.sources.monitoring import MonitoringSource

logger = logging.getLogger(__name__)


class AlertForwarder:
    """Forwards one incoming event to one channel, in a single attempt."""

    def __init__(self, source: BaseSource, channel: BaseChannel):
        self._source = source
        self._channel = channel

    @property
    def source(self) -> BaseSource:
        return self._source

    @property
    def channel(self) -> BaseChannel:
        return self._channel

    async def forward(self, event: Any) -> Incident:
        """Deliver the incident carried by ``event``.

        Raises a ForwarderError subclass on any failure. Nothing is retried.
        """
        if not self._channel.enabled:
            logger.error(f"Channel {self._channel.name} has no webhook configured")
            raise ConfigurationError(f"{self._channel.name} webhook is not configured, set WEBHOOK_URL")

        try:
            incident = self._source.parse(event)
        except ForwarderError as e:
            logger.error(f"Failed to decode {self._source.name} event: {e}")
            raise

        logger.info(
            f"Received incident {incident.incident_id or '<none>'}: "
            f"policy={incident.policy_name!r}, state={incident.state!r}"
        )

        try:
            await self._channel.send(incident)
        except ForwarderError as e:
            logger.error(f"Failed to deliver incident {incident.incident_id} to {self._channel.name}: {e}")
            raise

        logger.info(f"Incident {incident.incident_id} delivered to {self._channel.name}")
        return incident


def create_forwarder(settings: Settings) -> AlertForwarder:
    """Build the forwarder described by ``settings``."""
    channel = GoogleChatChannel(
        webhook_url=settings.webhook_url,
        tz=settings.tzinfo,
        timezone_label=settings.timezone_label,
    )
    return AlertForwarder(MonitoringSource(), channel)
