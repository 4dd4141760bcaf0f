"""Applicant Registry — the ordered, name-unique collection of all applicants.

Invariants:
    - No two stored applicants satisfy is_same_applicant
    - Insertion order is kept until sort() is called
    - Every failing call leaves the contents exactly as before (no partial insert)
    - The applicants view is a tuple: it cannot be mutated structurally

Design Decisions:
    - Plain list behind a tuple view: no observable-collection machinery, the shell re-reads
    - reset_data validates into a scratch list and swaps only on success
"""

from typing import Callable, Iterable, Iterator

from trackascholar.core.applicant import Applicant
from trackascholar.core.errors import ApplicantNotFoundError, DuplicateApplicantError
from trackascholar.core.field_values import ApplicationStatus


class ApplicantRegistry:
    """Mutable container of Applicants, unique by name."""

    def __init__(self, applicants: Iterable[Applicant] = ()):
        self._applicants: list[Applicant] = []
        self.reset_data(applicants)

    @property
    def applicants(self) -> tuple[Applicant, ...]:
        return tuple(self._applicants)

    def has_applicant(self, applicant: Applicant) -> bool:
        return any(a.is_same_applicant(applicant) for a in self._applicants)

    def add(self, applicant: Applicant) -> None:
        if self.has_applicant(applicant):
            raise DuplicateApplicantError(applicant.name.value)
        self._applicants.append(applicant)

    def remove(self, applicant: Applicant) -> None:
        """Remove the stored applicant with the same identity."""
        position = self._position_of(applicant)
        del self._applicants[position]

    def set_applicant(self, target: Applicant, edited: Applicant) -> None:
        """Replace `target` with `edited` in place, keeping its position."""
        position = self._position_of(target)
        if not target.is_same_applicant(edited) and self.has_applicant(edited):
            raise DuplicateApplicantError(edited.name.value)
        self._applicants[position] = edited

    def remove_by_status(self, status: ApplicationStatus) -> tuple[Applicant, ...]:
        """Remove every applicant with `status`; return the removed ones in order."""
        removed = tuple(a for a in self._applicants if a.is_matching_status(status))
        self._applicants = [a for a in self._applicants if not a.is_matching_status(status)]
        return removed

    def reset_data(self, source: "ApplicantRegistry | Iterable[Applicant]") -> None:
        """Replace all contents with `source`, rejecting the first duplicate found."""
        items = source.applicants if isinstance(source, ApplicantRegistry) else source
        staged: list[Applicant] = []
        for applicant in items:
            if any(a.is_same_applicant(applicant) for a in staged):
                raise DuplicateApplicantError(applicant.name.value)
            staged.append(applicant)
        self._applicants = staged

    def sort(self, key: Callable[[Applicant], object]) -> None:
        self._applicants.sort(key=key)

    def clear(self) -> None:
        self._applicants = []

    def _position_of(self, applicant: Applicant) -> int:
        for position, stored in enumerate(self._applicants):
            if stored.is_same_applicant(applicant):
                return position
        raise ApplicantNotFoundError(applicant.name.value)

    def __len__(self) -> int:
        return len(self._applicants)

    def __iter__(self) -> Iterator[Applicant]:
        return iter(self.applicants)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApplicantRegistry):
            return NotImplemented
        return self._applicants == other._applicants

    __hash__ = None

    def __repr__(self) -> str:
        return f"ApplicantRegistry({len(self._applicants)} applicants)"
