"""Base notifier at the end of every decorator chain."""

from patterns.notifier import Notifier


class EmailNotifier(Notifier):
    """Base notifier: prints the email line and wraps nothing."""

    def send(self, message: str) -> None:
        print(f"Відправлено email: {message}")

    def __repr__(self) -> str:
        return "EmailNotifier()"
