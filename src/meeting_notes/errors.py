from __future__ import annotations


class MeetingNotesError(Exception):
    """Base class for errors raised by the notes pipeline."""


class ResourceUnavailable(MeetingNotesError, RuntimeError):
    """Tagging model or lexicon data could not be loaded."""


class InvalidArgument(MeetingNotesError, ValueError):
    """Caller passed a value the pipeline cannot work with (e.g. negative k)."""
