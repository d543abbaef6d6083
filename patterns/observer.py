"""Abstract Observer for the notification hub."""

from abc import ABC, abstractmethod


class Observer(ABC):
    """Abstract base class for objects that receive hub broadcasts."""

    @abstractmethod
    def update(self, message: str) -> None:
        """Handle a broadcast message. Must be implemented by subclasses."""
        pass
