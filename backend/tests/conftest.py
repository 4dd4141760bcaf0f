"""Root conftest — shared test configuration and applicant builders."""

import logging
import os

import pytest

from trackascholar.core.applicant import Applicant
from trackascholar.core.field_values import (
    ApplicationStatus, Email, Major, Name, Phone, Scholarship,
)

# Ensure tests never write to a real data file
os.environ.setdefault("TRACKASCHOLAR_DATA_FILE_PATH", "test-data/trackascholar.json")

DEFAULT_FIELDS = {
    "name": "Amy Bee",
    "phone": "85355255",
    "email": "amy@gmail.com",
    "scholarship": "Merit",
    "status": "pending",
    "majors": (),
}


def build_applicant(**overrides) -> Applicant:
    """Build an Applicant from raw strings, DEFAULT_FIELDS filling the gaps."""
    raw = {**DEFAULT_FIELDS, **overrides}
    return Applicant(
        name=Name(raw["name"]),
        phone=Phone(raw["phone"]),
        email=Email(raw["email"]),
        scholarship=Scholarship(raw["scholarship"]),
        application_status=ApplicationStatus(raw["status"]),
        majors=frozenset(Major(m) for m in raw["majors"]),
    )


@pytest.fixture
def make_applicant():
    return build_applicant


@pytest.fixture
def typical_applicants() -> list[Applicant]:
    """Four applicants in insertion order, mixed scholarships and statuses."""
    return [
        build_applicant(name="Alice Pauline", phone="94351253", email="alice@example.com",
                        scholarship="Arts", status="pending", majors=("History",)),
        build_applicant(name="Benson Meier", phone="98765432", email="johnd@example.com",
                        scholarship="Sports", status="accepted", majors=("Physics", "Mathematics")),
        build_applicant(name="Carl Kurz", phone="95352563", email="heinz@example.com",
                        scholarship="Sports", status="rejected"),
        build_applicant(name="Daniel Meier", phone="87652533", email="cornelia@example.com",
                        scholarship="Arts", status="accepted", majors=("Computer Science",)),
    ]


@pytest.fixture
def restore_root_logger():
    """Undo any handler or level change a test makes to the root logger."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
