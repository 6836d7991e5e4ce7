"""Exceptions for the fatal path.

Expected business outcomes (not found, duplicate key, invalid state,
insufficient stock) never raise; they travel as ``Result`` failures.
Everything in this module signals a fault the current request cannot
recover from, so the CLI layer can catch them uniformly.
"""


class PosError(Exception):
    """Base class for all unexpected faults."""


class PersistenceError(PosError):
    """The store rejected or could not perform the write."""


class ConcurrencyConflictError(PersistenceError):
    """Another unit of work committed a newer version of an aggregate."""


class OperationCancelledError(PosError):
    """The caller cancelled the operation before it reached the store."""
