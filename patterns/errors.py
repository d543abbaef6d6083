"""Exceptions raised by the patterns package."""


class PatternsError(Exception):
    """Base class for errors raised by this package."""


class InvalidArgumentError(PatternsError, ValueError):
    """Raised when a caller passes a value the receiver does not recognise."""
