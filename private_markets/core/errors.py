"""Application error taxonomy.

Every error the API reports deliberately is an AppError carrying the HTTP
status it maps to. Anything else reaching the HTTP layer is treated as an
internal error and rendered without detail.
"""

from typing import List, Optional


class AppError(Exception):
    """Base exception for errors reported to API clients."""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        return {"message": self.message}


class ValidationError(AppError):
    """Raised when client input fails the declared field rules."""

    status_code = 400

    def __init__(self, message: str = "Validation failed", errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = list(errors or [])

    def to_dict(self) -> dict:
        body = super().to_dict()
        if self.errors:
            body["errors"] = self.errors
        return body


class NotFoundError(AppError):
    """Raised when an entity id does not exist."""

    status_code = 404


class ConflictError(AppError):
    """Raised on uniqueness violations (e.g. duplicate investor email)."""

    status_code = 409


class ReferentialError(AppError):
    """Raised when a referenced record (fund, investor) does not exist."""

    status_code = 400


class InvalidDataError(AppError):
    """Raised when the datastore rejects a value (check constraint, bad format)."""

    status_code = 400


class DestructiveOperationError(RuntimeError):
    """Raised when a destructive maintenance operation is not enabled."""

    pass
