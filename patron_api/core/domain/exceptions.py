# patron_api/core/domain/exceptions.py
from typing import Optional


class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    code = "DOMAIN_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        if code:
            self.code = code
        super().__init__(self.message)

# --- Validation Errors ---

class ValidationError(DomainError):
    """Raised when a value object or entity rejects its input."""
    code = "VALIDATION_ERROR"

# --- Uniqueness Errors ---

class ConflictError(DomainError):
    """Raised when an operation would violate a uniqueness rule (e.g., duplicate email)."""
    code = "CONFLICT"

# --- Entity Not Found Errors ---

class NotFoundError(DomainError):
    """Raised when the requested entity does not exist."""
    code = "NOT_FOUND"

    def __init__(self, resource: str, identifier: Optional[str] = None):
        self.resource = resource
        self.identifier = identifier
        if identifier:
            message = f"{resource} with id '{identifier}' not found"
        else:
            message = f"{resource} not found"
        super().__init__(message)

# --- Infrastructure Errors ---

class DatabaseError(DomainError):
    """Raised by persistence adapters when the underlying storage fails."""
    code = "DATABASE_ERROR"

    def __init__(self, message: str, operation: Optional[str] = None):
        self.operation = operation
        super().__init__(message)
