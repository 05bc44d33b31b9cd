"""Tag-set reconciliation for transaction updates.

Callers always send the complete desired tag set. Engines store only the
difference against what is already persisted.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class TagDiff:
    """Tags to insert and tags to delete to reach a desired tag set."""

    to_add: frozenset[str]
    to_remove: frozenset[str]

    @classmethod
    def between(cls, existing: Iterable[str], desired: Iterable[str]) -> TagDiff:
        existing_set = frozenset(existing)
        desired_set = frozenset(desired)
        return cls(
            to_add=desired_set - existing_set,
            to_remove=existing_set - desired_set,
        )

    @property
    def is_empty(self) -> bool:
        return not self.to_add and not self.to_remove

    def apply(self, existing: Iterable[str]) -> frozenset[str]:
        return (frozenset(existing) - self.to_remove) | self.to_add
