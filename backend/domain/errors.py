"""
Errors raised by option lookups and the option builder.

Each carries the HTTP status it maps to; main.py turns them into the
{"success": false, "error": {...}} envelope.
"""
from fastapi import HTTPException, status


class DomainError(HTTPException):
    """HTTPException with a plain message and a details dict for the error envelope."""
    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST, details: dict | None = None):
        super().__init__(status_code=status_code, detail=message)
        self.message = message
        self.details = details or {}


class NotFoundError(DomainError):
    """Unknown enum key or other missing lookup target (404)."""
    def __init__(self, resource_type: str, identifier: str, details: dict | None = None):
        message = f"{resource_type} not found: {identifier}"
        super().__init__(message, status_code=status.HTTP_404_NOT_FOUND, details=details)


class InvalidArgumentError(DomainError):
    """
    Argument of the wrong kind (400).

    Raised by the option builder when it is handed something that is not an
    enumeration type.
    """
    def __init__(self, message: str, argument: str | None = None, details: dict | None = None):
        details = dict(details or {})
        if argument:
            details.setdefault("argument", argument)
        super().__init__(message, status_code=status.HTTP_400_BAD_REQUEST, details=details)
