"""Pub/Sub event envelope models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PubSubMessage(BaseModel):
    """A single Pub/Sub message as delivered to subscribers."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    data: str | bytes | None = Field(default=None, description="Base64 string or raw payload bytes")
    attributes: dict[str, str] = Field(default_factory=dict)
    message_id: str = Field(default="", alias="messageId")
    publish_time: str = Field(default="", alias="publishTime")


class PushEnvelope(BaseModel):
    """Outer wrapper around a Pub/Sub message (push and CloudEvent form)."""

    model_config = ConfigDict(extra="ignore")

    message: PubSubMessage
    subscription: str = ""

    @classmethod
    def from_event(cls, event: Any) -> "PushEnvelope":
        """Build an envelope from a decoded dict or raw JSON text/bytes."""
        if isinstance(event, (bytes, bytearray, str)):
            return cls.model_validate_json(event)
        return cls.model_validate(event)
