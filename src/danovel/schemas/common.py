"""Shared Pydantic helpers for partial-update payloads."""
from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, model_validator


class PartialUpdate(BaseModel):
    """Base for update payloads where omitted fields mean "leave unchanged".

    Subclasses list the columns that may not be set to null in
    ``non_nullable_fields``; an explicit ``None`` for one of those is rejected,
    while an explicit ``None`` for any other field clears the column.
    """

    non_nullable_fields: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _reject_explicit_nulls(self) -> PartialUpdate:
        for name in self.non_nullable_fields:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        """Return only the fields the caller supplied."""
        return self.model_dump(exclude_unset=True)
