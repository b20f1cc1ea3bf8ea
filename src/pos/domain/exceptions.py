"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class LookupUnavailableError(DomainException):
    """A catalog or promotion source could not be read.

    Fatal for the receipt being computed: no partial receipt is produced.
    """
