from typing import Any, List, Optional


class ContactError(Exception):
    """Base exception for contact operations."""


class PersistenceError(ContactError):
    """Raised when the document store rejects an operation or is unreachable."""


class ContactValidationError(ContactError):
    """Raised when one or more draft fields fail their constraint."""

    def __init__(self, fields: List[str]):
        self.fields = fields
        super().__init__(f"Invalid fields: {', '.join(fields)}")


class TransportError(ContactError):
    """Raised when the contacts API cannot be reached or answers with a failure."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Any = None):
        self.status_code = status_code
        self.body = body
        super().__init__(message)
