"""Exceptions raised by the note store."""


class ThoughtflowError(Exception):
    """Base class for all thoughtflow errors."""


class PersistenceReadError(ThoughtflowError):
    """The persisted notes blob could not be parsed."""


class PersistenceWriteError(ThoughtflowError):
    """The notes blob could not be written to the blob store."""
