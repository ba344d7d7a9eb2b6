"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the web and CLI layers can catch them uniformly and turn them into
user-facing messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""

    @property
    def message(self) -> str:
        return str(self)


class ValidationError(DomainException):
    """A required field is missing or malformed."""


class ConflictError(ValidationError):
    """A uniqueness constraint would be violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class AuthorizationError(DomainException):
    """The caller may not perform an administrative action."""


class NotificationError(DomainException):
    """The mail collaborator failed to dispatch a message."""
