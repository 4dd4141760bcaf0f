"""Applicant — one validated scholarship candidate.

Invariants:
    - Every field is a validated value type; construction checks types, not text
    - At most Major.MAXIMUM_NUMBER_OF_MAJORS majors, held as a frozenset
    - Immutable: with_changes() returns a new Applicant, never edits in place
    - Identity (is_same_applicant) is exact Name equality; full equality covers every field

Design Decisions:
    - Sort orders exposed as key functions for sorted()/list.sort(): stable and total,
      reading only immutable fields
    - Name is the universal tiebreaker: unique within one registry
"""

from dataclasses import dataclass, field, replace
from typing import Callable

from trackascholar.core.domain_types import SortKey
from trackascholar.core.errors import InvalidFieldError
from trackascholar.core.field_values import (
    ApplicationStatus, BooleanField, Email, Major, Name, Phone, Scholarship,
)


PIN_LABEL = "pin"

ApplicantSortKey = Callable[["Applicant"], tuple]


def _unpinned() -> BooleanField:
    return BooleanField(PIN_LABEL, False)


@dataclass(frozen=True)
class Applicant:
    """Scholarship applicant with every field present and validated."""

    # Identity field
    name: Name

    # Data fields
    phone: Phone
    email: Email
    scholarship: Scholarship
    application_status: ApplicationStatus
    majors: frozenset[Major] = frozenset()
    pin: BooleanField = field(default_factory=_unpinned)

    def __post_init__(self):
        for name, expected in _FIELD_TYPES.items():
            value = getattr(self, name)
            if not isinstance(value, expected):
                raise TypeError(
                    f"Applicant.{name} must be {expected.__name__}, "
                    f"got {type(value).__name__}"
                )
        majors = frozenset(self.majors)
        if not all(isinstance(m, Major) for m in majors):
            raise TypeError("Applicant.majors must only contain Major")
        if len(majors) > Major.MAXIMUM_NUMBER_OF_MAJORS:
            raise InvalidFieldError(Major.MESSAGE_CONSTRAINTS, "Major")
        object.__setattr__(self, "majors", majors)

    @property
    def is_pinned(self) -> bool:
        return self.pin.value

    def is_same_applicant(self, other: "Applicant | None") -> bool:
        """Weaker notion of equality: both applicants carry the same name."""
        if other is self:
            return True
        return other is not None and other.name == self.name

    def is_matching_status(self, status: ApplicationStatus | None) -> bool:
        return status is not None and status == self.application_status

    def with_changes(self, **changes) -> "Applicant":
        """Return a copy with the given fields replaced, re-running every check."""
        return replace(self, **changes)

    def with_pin(self, pinned: bool) -> "Applicant":
        return replace(self, pin=BooleanField(PIN_LABEL, pinned))

    def sorted_majors(self) -> list[Major]:
        return sorted(self.majors, key=lambda m: m.value)

    def __str__(self) -> str:
        parts = [
            str(self.name),
            f"Phone: {self.phone}",
            f"Email: {self.email}",
            f"Scholarship: {self.scholarship}",
            f"Application Status: {self.application_status}",
        ]
        if self.majors:
            parts.append("Majors: " + "".join(str(m) for m in self.sorted_majors()))
        return "; ".join(parts)

    # ─── Orderings ───────────────────────────────────────────────

    @staticmethod
    def sort_by_name() -> ApplicantSortKey:
        """Ascending by name. No tiebreaker: names are unique in a registry."""
        return lambda a: (a.name.value,)

    @staticmethod
    def sort_by_scholarship() -> ApplicantSortKey:
        """Ascending by scholarship; ties broken by name."""
        return lambda a: (a.scholarship.value, a.name.value)

    @staticmethod
    def sort_by_status() -> ApplicantSortKey:
        """Pending first, then accepted, then rejected; ties broken by name."""
        return lambda a: (a.application_status.kind.rank, a.name.value)


_FIELD_TYPES: dict[str, type] = {
    "name": Name,
    "phone": Phone,
    "email": Email,
    "scholarship": Scholarship,
    "application_status": ApplicationStatus,
    "pin": BooleanField,
}

_SORT_KEYS: dict[SortKey, Callable[[], ApplicantSortKey]] = {
    SortKey.NAME: Applicant.sort_by_name,
    SortKey.SCHOLARSHIP: Applicant.sort_by_scholarship,
    SortKey.STATUS: Applicant.sort_by_status,
}


def sort_key_for(sort_key: SortKey) -> ApplicantSortKey:
    return _SORT_KEYS[sort_key]()
