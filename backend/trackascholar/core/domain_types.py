"""Domain Types — enums and rich types that replace bare primitives.

Invariants:
    - Application statuses are exactly pending, accepted, rejected
    - Status rank is fixed: pending (0) < accepted (1) < rejected (2)
    - OneBasedIndex is always >= 1 (enforced by parse_arguments.parse_index)

Design Decisions:
    - str Enums: values are the exact strings written to JSON
    - NewType for indices: zero runtime cost, full type-checker support
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

OneBasedIndex = NewType("OneBasedIndex", int)


# ─── Enums ───────────────────────────────────────────────────────

class ApplicationStatusKind(str, Enum):
    """Application lifecycle states, declared in display order."""
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"

    @property
    def rank(self) -> int:
        return _STATUS_RANK[self]


_STATUS_RANK: dict[ApplicationStatusKind, int] = {
    kind: position for position, kind in enumerate(ApplicationStatusKind)
}


class SortKey(str, Enum):
    """Orderings offered to the sort command."""
    NAME = "name"
    SCHOLARSHIP = "scholarship"
    STATUS = "status"
