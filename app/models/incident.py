"""Cloud Monitoring incident models."""

from pydantic import ConfigDict, Field, StrictInt, StrictStr

from app.models.base import ZeroValueModel


class _Payload(ZeroValueModel):
    model_config = ConfigDict(frozen=True)


class Documentation(_Payload):
    content: StrictStr = ""


class Incident(_Payload):
    """The fields of an incident the bridge cares about."""

    policy_name: StrictStr = ""
    incident_id: StrictStr = ""
    documentation: Documentation = Field(default_factory=Documentation)
    state: StrictStr = Field(default="", description="open/closed")
    url: StrictStr = ""
    started_at: StrictInt = Field(default=0, description="Unix seconds")


class IncidentPayload(_Payload):
    """Decoded body of a monitoring notification."""

    incident: Incident = Field(default_factory=Incident)
