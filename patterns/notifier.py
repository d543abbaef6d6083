"""Abstract message sender shared by the base notifier and its decorators."""

from abc import ABC, abstractmethod


class Notifier(ABC):
    """Abstract base class for anything that can send a text message."""

    @abstractmethod
    def send(self, message: str) -> None:
        """Send ``message``. Must be implemented by subclasses."""
        pass
