"""Error kinds surfaced by ledger operations."""

from __future__ import annotations


class LedgerError(Exception):
    """Base class for all ledger business errors."""


class NotFoundError(LedgerError, LookupError):
    """A participant or match lookup key does not resolve."""

    def __init__(self, entity: str, field: str, key: object) -> None:
        self.entity = entity
        self.field = field
        self.key = key
        super().__init__(f"{entity} not found with {field}: {key}")


class InvalidArgumentError(LedgerError, ValueError):
    """The request is well-formed but violates a ledger rule."""


class ConflictError(InvalidArgumentError):
    """The request conflicts with existing ledger state."""


class AlreadyExistsError(ConflictError):
    """A participant with the same username is already registered."""

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(f"Username already exists: {username}")


__all__ = [
    "AlreadyExistsError",
    "ConflictError",
    "InvalidArgumentError",
    "LedgerError",
    "NotFoundError",
]
