"""Base class for alert source decoders."""

from abc import ABC, abstractmethod
from typing import Any

from app.models.incident import Incident


class BaseSource(ABC):
    """Abstract base class for alert source decoders."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Source name identifier."""
        ...

    @abstractmethod
    def parse(self, event: Any) -> Incident:
        """Decode an incoming event into an Incident."""
        ...
