class ElapsedError(Exception):
    """Base class for errors raised by elapsed."""


class InvalidArgumentError(ElapsedError, ValueError):
    """A duration was negative or a timestamp pair was reversed."""


class MissingTranslationError(ElapsedError, LookupError):
    """The active string table has no entry for a locale or template key."""

    def __init__(self, message: str, *, locale: str = "", key: str | None = None):
        super().__init__(message)
        self.locale: str = locale
        self.key: str | None = key


class UnreachableError(ElapsedError, AssertionError):
    """The division ladder failed to produce a display division."""
