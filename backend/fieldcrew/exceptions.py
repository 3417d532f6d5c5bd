"""Exceptions raised by fieldcrew.

Field-level validation problems are reported as error maps, never raised;
only structurally wrong input and failed calls to the collaborator service
end up here.
"""
from typing import Optional


class FieldcrewError(Exception):
    """Base exception for the package."""


class InvalidFormError(FieldcrewError, TypeError):
    """Submitted form payload is not a mapping."""

    def __init__(self, received_type: str) -> None:
        self.received_type = received_type
        super().__init__(f"Collaborator form must be an object, got {received_type}")


class UnknownPermissionError(FieldcrewError, KeyError):
    """Permission key is not part of the registry."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Unknown permission: {self.key}"


class CollaboratorServiceError(FieldcrewError):
    """Call to the collaborator management API failed."""

    def __init__(self, operation: str, detail: str, status_code: Optional[int] = None) -> None:
        self.operation = operation
        self.detail = detail
        self.status_code = status_code
        if status_code is None:
            message = f"{operation} failed: {detail}"
        else:
            message = f"{operation} failed ({status_code}): {detail}"
        super().__init__(message)
