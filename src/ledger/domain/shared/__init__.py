"""Shared domain components.

This module exports shared exceptions and utilities used across domain
boundaries.
"""

from ledger.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    StorageError,
    ValidationError,
)
from ledger.domain.shared.time import first_day_of_month, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "EntityNotFoundError",
    "ConflictError",
    "StorageError",
    # Utilities
    "first_day_of_month",
    "utc_now",
]
