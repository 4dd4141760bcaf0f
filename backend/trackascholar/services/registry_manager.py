"""Registry Manager — the imperative shell commands drive.

Invariants:
    - Holds the one process-resident ApplicantRegistry plus the active filter
    - Indices are one-based and refer to the filtered view the user sees
    - load() is all-or-nothing: on any error the held registry is untouched
    - clear_registry only clears when the caller passes confirmed=True
    - Every mutation is logged; every error is logged, then re-raised unchanged

Design Decisions:
    - Confirmation is a two-phase protocol: the caller asks, then calls with the answer
    - Storage injected as a RegistryStorage protocol (tests pass a fake or tmp file)
"""

import logging

from trackascholar.config import Settings, get_settings
from trackascholar.core.applicant import Applicant, sort_key_for
from trackascholar.core.domain_types import OneBasedIndex, SortKey
from trackascholar.core.errors import InvalidIndexError, TrackAScholarError
from trackascholar.core.field_values import ApplicationStatus
from trackascholar.core.predicates import ApplicationStatusPredicate
from trackascholar.core.registry import ApplicantRegistry
from trackascholar.core.repository_protocols import RegistryStorage
from trackascholar.infrastructure.json_storage import JsonRegistryStorage

logger = logging.getLogger(__name__)


class RegistryManager:
    """Owns the registry, the current filter and the storage collaborator."""

    def __init__(
        self,
        registry: ApplicantRegistry | None = None,
        storage: RegistryStorage | None = None,
    ):
        self._registry = registry if registry is not None else ApplicantRegistry()
        self._storage = storage
        self._filter: ApplicationStatusPredicate | None = None

    @property
    def registry(self) -> ApplicantRegistry:
        return self._registry

    @property
    def filtered_applicants(self) -> tuple[Applicant, ...]:
        if self._filter is None:
            return self._registry.applicants
        return tuple(a for a in self._registry if self._filter.test(a))

    def update_filter(self, predicate: ApplicationStatusPredicate | None) -> None:
        """Show only applicants matching `predicate`; None shows everyone."""
        self._filter = predicate

    # ─── Mutations ───────────────────────────────────────────────

    def add_applicant(self, applicant: Applicant) -> None:
        try:
            self._registry.add(applicant)
        except TrackAScholarError as e:
            self._log_rejected("add", e)
            raise
        logger.info("Applicant added", extra={"applicant_name": applicant.name.value})

    def edit_applicant(self, index: OneBasedIndex, **changes) -> Applicant:
        """Replace fields of the applicant at `index`; returns the edited applicant."""
        target = self._applicant_at(index)
        try:
            edited = target.with_changes(**changes)
            self._registry.set_applicant(target, edited)
        except TrackAScholarError as e:
            self._log_rejected("edit", e)
            raise
        logger.info("Applicant edited", extra={"applicant_name": edited.name.value})
        return edited

    def pin_applicant(self, index: OneBasedIndex) -> Applicant:
        return self._set_pin(index, True)

    def unpin_applicant(self, index: OneBasedIndex) -> Applicant:
        return self._set_pin(index, False)

    def remove_by_status(self, status: ApplicationStatus) -> tuple[Applicant, ...]:
        removed = self._registry.remove_by_status(status)
        logger.info(
            f"Removed applicants with status {status.value}",
            extra={"count": len(removed)},
        )
        return removed

    def sort_applicants(self, sort_key: SortKey) -> None:
        """Sort the registry and reset the filter so every applicant is shown."""
        self._registry.sort(sort_key_for(sort_key))
        self._filter = None
        logger.info("Applicants sorted", extra={"sort_key": sort_key.value})

    def clear_registry(self, confirmed: bool) -> bool:
        """Purge all data if the user confirmed. Returns whether anything was cleared."""
        if not confirmed:
            logger.info("Clearing of all data cancelled")
            return False
        count = len(self._registry)
        self._registry.clear()
        self._filter = None
        logger.warning("Registry cleared", extra={"count": count})
        return True

    # ─── Persistence ─────────────────────────────────────────────

    def load(self) -> bool:
        """Replace the registry with the stored one. Returns False if nothing was stored."""
        storage = self._require_storage()
        try:
            loaded = storage.read_registry()
        except TrackAScholarError as e:
            logger.error(
                f"Data file could not be loaded, keeping current data: {e.message}",
                extra={"error_code": e.code, "field": e.context.field_name},
            )
            raise
        if loaded is None:
            return False
        self._registry.reset_data(loaded)
        self._filter = None
        logger.info("Registry loaded", extra={"count": len(self._registry)})
        return True

    def save(self) -> None:
        self._require_storage().save_registry(self._registry)

    # ─── Helpers ─────────────────────────────────────────────────

    def _applicant_at(self, index: OneBasedIndex) -> Applicant:
        shown = self.filtered_applicants
        if not 1 <= index <= len(shown):
            error = InvalidIndexError(index, len(shown))
            self._log_rejected("lookup", error)
            raise error
        return shown[index - 1]

    def _set_pin(self, index: OneBasedIndex, pinned: bool) -> Applicant:
        target = self._applicant_at(index)
        edited = target.with_pin(pinned)
        self._registry.set_applicant(target, edited)
        logger.info(
            "Applicant pinned" if pinned else "Applicant unpinned",
            extra={"applicant_name": edited.name.value},
        )
        return edited

    def _require_storage(self) -> RegistryStorage:
        if self._storage is None:
            raise RuntimeError("RegistryManager has no storage configured")
        return self._storage

    def _log_rejected(self, operation: str, error: TrackAScholarError) -> None:
        logger.warning(
            f"Rejected {operation}: {error.message}",
            extra={
                "error_code": error.code,
                "applicant_name": error.context.applicant_name,
                "field": error.context.field_name,
            },
        )


def create_registry_manager(settings: Settings | None = None) -> RegistryManager:
    """Build a manager wired to the JSON data file named in settings."""
    settings = settings or get_settings()
    return RegistryManager(storage=JsonRegistryStorage(settings.data_file_path))
