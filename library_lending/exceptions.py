"""Exceptions raised by the lending components."""


class LendingError(Exception):
    """Base exception for lending system errors."""


class InvalidArgumentError(LendingError, ValueError):
    """A required argument was missing or blank."""


class InvalidStateError(LendingError):
    """The requested action is not allowed in the current state."""


class DuplicateIdentifierError(InvalidStateError):
    """An entity with the same identifier is already registered."""


class NotFoundError(LendingError, LookupError):
    """The referenced entity is not tracked by the component."""
