"""Domain errors raised by the service layer.

Every error is an :class:`HTTPException`, so routes let them propagate and the
application-level handler renders ``{"error": detail}`` with the status code.
"""
from __future__ import annotations

from fastapi import HTTPException, status


class NotFound(HTTPException):
    """A referenced User, Account or Transaction does not exist."""

    def __init__(self, entity: str) -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=f"{entity} not found")
        self.entity = entity


class BadRequest(HTTPException):
    def __init__(self, detail: str) -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class InvalidAmount(BadRequest):
    pass


class InvalidType(BadRequest):
    def __init__(self, detail: str = 'Type must be either "income" or "expense"') -> None:
        super().__init__(detail)


class InvalidDate(BadRequest):
    def __init__(self, detail: str = "Invalid date format. Use YYYY-MM-DD") -> None:
        super().__init__(detail)


class Conflict(HTTPException):
    def __init__(self, detail: str) -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


__all__ = [
    "BadRequest",
    "Conflict",
    "InvalidAmount",
    "InvalidDate",
    "InvalidType",
    "NotFound",
]
