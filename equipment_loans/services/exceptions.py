class TrackerError(Exception):
    """Base class for errors raised by tracker commands."""

class NotFoundError(TrackerError):
    pass

class ConflictError(TrackerError):
    """The command would break a loan invariant (e.g. a second active loan)."""

class InvalidRequestError(TrackerError):
    pass

class SnapshotError(TrackerError):
    """A snapshot document could not be parsed; the store was left untouched."""
