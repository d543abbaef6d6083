"""Observer hub: keeps an ordered list of observers and broadcasts to them."""

from typing import List

from patterns.observability import get_logger
from patterns.observer import Observer


class NotificationService:
    """In-memory subject; observers are notified in subscription order on the calling thread."""

    def __init__(self) -> None:
        self._observers: List[Observer] = []
        self._notifications_sent: int = 0
        self._logger = get_logger("patterns.notification_service")

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    @property
    def notifications_sent(self) -> int:
        return self._notifications_sent

    def get_observers(self) -> List[Observer]:
        """Return a copy of the observer list."""
        return list(self._observers)

    def subscribe(self, observer: Observer) -> None:
        """Append an observer. The same observer may be subscribed more than once."""
        self._observers.append(observer)
        self._logger.info("subscribed", extra={"observer": repr(observer)})

    def unsubscribe(self, observer: Observer) -> None:
        """Remove the first observer equal to ``observer``; do nothing if there is none."""
        try:
            self._observers.remove(observer)
        except ValueError:
            return
        self._logger.info("unsubscribed", extra={"observer": repr(observer)})

    def notify(self, message: str) -> None:
        """Call update(message) on every observer. Copy the list first, then deliver.

        An exception from an observer is logged as notify_failed and never reaches
        the caller; the remaining observers still receive the message.
        """
        observers = list(self._observers)
        self._logger.info(
            "notifying",
            extra={"observer_count": len(observers), "text": message},
        )
        self._notifications_sent += 1
        for observer in observers:
            try:
                observer.update(message)
            except Exception as e:
                self._logger.exception(
                    "notify_failed",
                    extra={"observer": repr(observer), "error": str(e)},
                )

    def __repr__(self) -> str:
        return f"NotificationService(observers={len(self._observers)})"
