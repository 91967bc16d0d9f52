"""Base class for notification channels."""

from abc import ABC, abstractmethod

from app.models.incident import Incident


class BaseChannel(ABC):
    """Abstract base class for notification channels."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Channel name for logging."""
        ...

    @property
    @abstractmethod
    def enabled(self) -> bool:
        """Whether the channel is enabled."""
        ...

    @abstractmethod
    def render(self, incident: Incident) -> str:
        """Render the message body for an incident."""
        ...

    @abstractmethod
    async def send(self, incident: Incident) -> None:
        """Deliver the incident. Raises ForwarderError on failure."""
        ...
