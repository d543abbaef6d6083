"""Decorator notifier: delegates to the wrapped notifier, then sends an SMS."""

from patterns.notifier import Notifier
from patterns.observability import get_logger


class SmsNotifier(Notifier):
    """Wraps exactly one inner notifier. Output order is always inner first, then SMS."""

    def __init__(self, inner: Notifier) -> None:
        self._inner = inner
        self._logger = get_logger("patterns.sms_notifier")

    @property
    def inner(self) -> Notifier:
        return self._inner

    def send(self, message: str) -> None:
        self._inner.send(message)
        print(f"Відправлено SMS: {message}")
        self._logger.info("sent", extra={"channel": "sms", "inner": repr(self._inner)})

    def __repr__(self) -> str:
        return f"SmsNotifier(inner={self._inner!r})"
