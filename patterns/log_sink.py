"""Process-wide log sink (Singleton)."""

import threading
from typing import Optional


class LogSink:
    """Writes ``[LOG]: ...`` lines to stdout. Exactly one instance exists per process."""

    _instance: Optional["LogSink"] = None
    _lock = threading.Lock()

    def __new__(cls) -> "LogSink":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def instance(cls) -> "LogSink":
        """Return the shared sink, creating it on first access."""
        return cls()

    @classmethod
    def reset(cls) -> None:
        """Forget the shared instance. Used by tests."""
        with cls._lock:
            cls._instance = None

    def log(self, message: str) -> None:
        print(f"[LOG]: {message}")

    def __repr__(self) -> str:
        return f"LogSink(id={id(self):#x})"
