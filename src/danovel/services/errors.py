"""Typed domain errors raised by the core services."""
from __future__ import annotations

__all__ = [
    "DomainError",
    "NotFoundError",
    "ConflictError",
    "InvalidOperationError",
]


class DomainError(Exception):
    """Base class for failures the core reports to its caller.

    Attributes:
        message: Human-readable description naming the entity involved.
        entity: Entity name, e.g. ``"Novel"``.
        entity_id: Identifier (or identifier tuple) of the subject, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        entity: str | None = None,
        entity_id: object = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.entity = entity
        self.entity_id = entity_id

    def __str__(self) -> str:
        return self.message


class NotFoundError(DomainError):
    """A referenced entity does not exist."""

    def __init__(self, entity: str, entity_id: object, detail: str | None = None) -> None:
        message = f"{entity} with id {entity_id} not found"
        if detail:
            message = f"{message} {detail}"
        super().__init__(message, entity=entity, entity_id=entity_id)


class ConflictError(DomainError):
    """A uniqueness invariant would be violated."""


class InvalidOperationError(DomainError):
    """The request is well formed but not allowed."""
