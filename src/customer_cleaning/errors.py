from __future__ import annotations


class CleaningError(Exception):
    """Base class for errors that abort a cleaning run."""


class SchemaError(CleaningError):
    """Input record is malformed or missing a required field."""


class InsufficientDataError(CleaningError):
    """Not enough present values to compute a summary statistic."""


class PreconditionError(CleaningError):
    """A stage received data an earlier stage should have fixed."""
