"""Error types surfaced by the workflow controller."""

from __future__ import annotations


class MeetSumError(Exception):
    """Base class; the message is shown to the user as-is."""


class ValidationError(MeetSumError):
    """A precondition failed before any request was issued."""


class TransportError(MeetSumError):
    """The backend call failed or returned a non-success body."""
