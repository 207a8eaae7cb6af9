class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 500


class ValidationError(DomainError):
    """Raised when input data is invalid (malformed date, missing field, bad body)."""

    status_code = 400


class NotFoundError(DomainError):
    """Raised when an employee identifier is unknown."""

    status_code = 404


class ConflictError(DomainError):
    """Raised when an employee with the same normalized name already exists."""

    status_code = 409


class ConfigurationError(DomainError):
    """Raised when the database is unreachable or misconfigured.

    `hint` is shown to the caller, so it must never contain credentials.
    """

    status_code = 500

    def __init__(self, message: str, *, hint: str | None = None):
        super().__init__(message)
        self.hint = hint
