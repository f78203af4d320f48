"""Exceptions raised by the history system."""


class HistoryError(Exception):
    """Base class for history errors."""


class SnapshotError(HistoryError):
    """An entity's fields could not be captured as an independent copy."""


class ConfigError(HistoryError):
    """History configuration could not be read or is invalid."""
