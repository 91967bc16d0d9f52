"""Cloud Monitoring notifications delivered over Pub/Sub."""

import base64
import logging
from typing import Any

from pydantic import ValidationError

from app.errors import DecodeError, ParseError
from app.models.incident import Incident, IncidentPayload
from app.models.pubsub import PushEnvelope
from app.sources.base import BaseSource

logger = logging.getLogger(__name__)


class MonitoringSource(BaseSource):
    """Decoder for Cloud Monitoring Pub/Sub notification channels."""

    @property
    def name(self) -> str:
        return "monitoring"

    def parse(self, event: Any) -> Incident:
        data = self.decode_envelope(event)
        return self.parse_payload(data)

    def decode_envelope(self, event: Any) -> bytes:
        """Extract the payload bytes carried in ``message.data``."""
        try:
            envelope = PushEnvelope.from_event(event)
        except ValidationError as e:
            raise DecodeError(f"failed to retrieve PubSub message: {e}") from e

        message = envelope.message
        logger.debug(
            f"Decoded envelope: message_id={message.message_id}, "
            f"subscription={envelope.subscription}"
        )

        data = message.data
        if data is None:
            return b""
        if isinstance(data, bytes):
            return data
        try:
            return base64.b64decode(data, validate=True)
        except ValueError as e:
            raise DecodeError(f"failed to retrieve PubSub message: {e}") from e

    def parse_payload(self, data: bytes) -> Incident:
        """Parse decoded payload bytes as a monitoring notification."""
        try:
            payload = IncidentPayload.model_validate_json(data)
        except ValidationError as e:
            raise ParseError(f"failed to parse PubSub msg payload: {e}") from e
        return payload.incident
