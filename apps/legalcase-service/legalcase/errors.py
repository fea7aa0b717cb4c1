"""
Error taxonomy for the legal case domain layer.

Presentation code is expected to catch these and render a message; only
``StoreError`` usually needs operator attention.
"""
from __future__ import annotations

from typing import Any


class LegalCaseError(Exception):
    """Base class for all domain errors."""


class NotFoundError(LegalCaseError):
    """A referenced entity does not exist."""

    def __init__(self, entity: str, key: Any):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found: {key}")


class DuplicateKeyError(LegalCaseError):
    """A natural key collides with a different existing entity."""

    def __init__(self, field: str, value: Any = None):
        self.field = field
        self.value = value
        if value is None:
            message = f"{field} is already in use"
        else:
            message = f"{field} is already in use: {value}"
        super().__init__(message)


class InvalidArgumentError(LegalCaseError, ValueError):
    """Malformed input reached a service."""


class StoreError(LegalCaseError):
    """The underlying store failed independently of domain logic."""

    def __init__(self, operation: str, detail: str | None = None):
        self.operation = operation
        self.detail = detail
        message = f"Could not {operation}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class NoActiveSessionError(LegalCaseError, RuntimeError):
    """No user is logged in on the given session."""

    def __init__(self):
        super().__init__("No user is currently logged in")


__all__ = [
    "LegalCaseError",
    "NotFoundError",
    "DuplicateKeyError",
    "InvalidArgumentError",
    "StoreError",
    "NoActiveSessionError",
]
