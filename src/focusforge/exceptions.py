"""Exceptions raised by FocusForge services and adapters."""


class FocusForgeError(Exception):
    """Base class for all FocusForge errors."""


class PersistenceError(FocusForgeError):
    """A call against the remote database failed.

    Raised for transport errors, non-2xx responses and bodies that cannot be
    decoded. The originating exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class QuoteServiceError(FocusForgeError):
    """The public quote service could not be reached or returned garbage."""


class ConfigError(FocusForgeError):
    """Configuration is missing a required value."""
