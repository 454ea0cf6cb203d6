"""Domain-level exceptions.

Business rule violations are subclasses of DomainException.  Storage
failures are reported separately through StorageUnavailableError so
callers can tell "no such stock" apart from "could not ask".
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class StorageUnavailableError(Exception):
    """The inventory store could not answer a query."""
