"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class AuthError(DomainError):
    """Raised when an operation requires an identity and none was supplied."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"You must be logged in to {action}")


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class ConflictError(DomainError):
    """Raised when a concurrent write on the same key wins the race.

    Covers unique constraint violations on insert and check-and-set misses
    on update or delete.
    """

    pass


class StoreError(DomainError):
    """Opaque failure from the record store (unavailable, timed out, ...)."""

    pass

