"""Exceptions shared by the application use cases."""


class EntityNotFoundError(LookupError):
    """Raised when a referenced entity does not exist in the organization."""


class PermissionDeniedError(PermissionError):
    """Raised when the acting user lacks the role required by a use case."""


__all__ = ["EntityNotFoundError", "PermissionDeniedError"]
