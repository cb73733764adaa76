"""Errors raised while loading pages."""

from typing import Optional


class PageLoadError(Exception):
    """Base class for failures reported by a page source."""

    def __init__(self, message: str = "Failed to load page"):
        super().__init__(message)
        self.message = message

    @classmethod
    def wrap(cls, error: BaseException) -> "PageLoadError":
        """Return ``error`` as a PageLoadError, chaining the original as cause.

        CancelledStale is internal to the controller, so one raised by a
        page source is wrapped like any foreign exception.
        """
        if isinstance(error, PageLoadError) and not isinstance(error, CancelledStale):
            return error
        wrapped = cls(str(error) or type(error).__name__)
        wrapped.__cause__ = error
        return wrapped


class TransportError(PageLoadError):
    """Raised when the remote end is unreachable or reports a failure"""
    pass


class DecodeError(PageLoadError):
    """Raised when a page payload is malformed"""
    pass


class CancelledStale(PageLoadError):
    """Raised internally when a fetch was superseded by a newer load"""

    def __init__(self, generation: int, current_generation: Optional[int] = None):
        super().__init__(
            f"Fetch from generation {generation} superseded"
            + (f" by generation {current_generation}" if current_generation is not None else "")
        )
        self.generation = generation
        self.current_generation = current_generation


UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again."
DECODE_ERROR_MESSAGE = "Failed to decode the response."


def describe_error(error: Optional[BaseException]) -> str:
    """Map an error to the message shown to the user."""
    if error is None:
        return ""
    if isinstance(error, DecodeError):
        return DECODE_ERROR_MESSAGE
    if isinstance(error, TransportError):
        return error.message
    return UNEXPECTED_ERROR_MESSAGE
