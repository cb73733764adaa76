"""Core types, errors and collaborator interfaces."""

from .errors import (
    CancelledStale,
    DecodeError,
    PageLoadError,
    TransportError,
    describe_error,
)
from .models import ListSnapshot, ListState, LoadKind, LoadPhase, LoadTicket, Page
from .protocols import PageSource, StateObserver

__all__ = [
    "CancelledStale",
    "DecodeError",
    "ListSnapshot",
    "ListState",
    "LoadKind",
    "LoadPhase",
    "LoadTicket",
    "Page",
    "PageLoadError",
    "PageSource",
    "StateObserver",
    "TransportError",
    "describe_error",
]
