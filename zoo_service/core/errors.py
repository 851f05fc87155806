class ZooServiceError(Exception):
    """Base class for every failure a zoo service operation can report."""

    kind = "ZooServiceError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ZooServiceError):
    """A required field is missing or empty, or the age is not positive."""

    kind = "ValidationError"


class NotFoundError(ZooServiceError):
    """The referenced id is absent from the relevant store."""

    kind = "NotFoundError"


class ConflictError(ZooServiceError):
    """Membership add/remove against a list that does not allow it."""

    kind = "ConflictError"


class AuthorizationError(ZooServiceError):
    """The caller is not the owner of the zoo being mutated."""

    kind = "AuthorizationError"


class StorageError(ZooServiceError):
    """The underlying database rejected a read or a write."""

    kind = "StorageError"
