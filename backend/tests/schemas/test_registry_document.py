"""Registry Document — JSON persistence adapter.

Tests cover:
    - Serialised shape: camelCase keys, string fields, majors as objects, pin flag
    - Round trip preserves every field and the registry order
    - Missing required keys -> MissingFieldError naming the field
    - Invalid values -> InvalidFieldError with the type's constraint message
    - Duplicate names -> DuplicateApplicantError for the whole document
    - Malformed JSON / wrong shapes -> MalformedDocumentError
"""

import json

import pytest

from trackascholar.core.errors import (
    DuplicateApplicantError, InvalidFieldError, MalformedDocumentError, MissingFieldError,
)
from trackascholar.core.field_values import Email, Major, Name, Phone
from trackascholar.core.registry import ApplicantRegistry
from trackascholar.schemas.registry_document import (
    ApplicantRecord, RegistryDocument, registry_from_json, registry_to_json,
)


VALID_RECORD = {
    "name": "Alice Pauline",
    "phone": "94351253",
    "email": "alice@example.com",
    "scholarship": "Arts",
    "applicationStatus": "pending",
    "majors": [{"majorName": "History"}],
}


def _document(*records) -> str:
    return json.dumps({"applicants": list(records)})


# ─── Serialisation ───────────────────────────────────────────────

def test_serialised_shape(typical_applicants):
    registry = ApplicantRegistry(typical_applicants)
    document = json.loads(registry_to_json(registry))
    assert list(document) == ["applicants"]
    assert [r["name"] for r in document["applicants"]] == [
        "Alice Pauline", "Benson Meier", "Carl Kurz", "Daniel Meier",
    ]
    benson = document["applicants"][1]
    assert benson == {
        "name": "Benson Meier",
        "phone": "98765432",
        "email": "johnd@example.com",
        "scholarship": "Sports",
        "applicationStatus": "accepted",
        "majors": [{"majorName": "Mathematics"}, {"majorName": "Physics"}],
        "pin": "false",
    }


def test_pin_written_as_text(make_applicant):
    registry = ApplicantRegistry([make_applicant().with_pin(True)])
    document = json.loads(registry_to_json(registry))
    assert document["applicants"][0]["pin"] == "true"


def test_empty_registry_serialises_to_empty_list():
    assert json.loads(registry_to_json(ApplicantRegistry())) == {"applicants": []}


# ─── Round trip ──────────────────────────────────────────────────

def test_round_trip_preserves_fields_and_order(typical_applicants):
    registry = ApplicantRegistry(reversed(typical_applicants))
    registry.add(typical_applicants[0].with_changes(name=Name("Pinned Person")).with_pin(True))
    restored = registry_from_json(registry_to_json(registry))
    assert restored == registry
    assert list(restored) == list(registry)


# ─── Loading ─────────────────────────────────────────────────────

def test_load_valid_document():
    registry = registry_from_json(_document(VALID_RECORD))
    alice = registry.applicants[0]
    assert alice.name.value == "Alice Pauline"
    assert alice.majors == frozenset({Major("History")})
    assert not alice.is_pinned


def test_majors_and_pin_are_optional():
    record = {k: v for k, v in VALID_RECORD.items() if k != "majors"}
    alice = registry_from_json(_document(record)).applicants[0]
    assert alice.majors == frozenset()
    assert not alice.is_pinned


def test_missing_applicants_key_loads_empty_registry():
    assert registry_from_json("{}") == ApplicantRegistry()


def test_unknown_keys_are_ignored():
    record = {**VALID_RECORD, "nickname": "Ally"}
    registry = registry_from_json(_document(record))
    assert "nickname" not in registry_to_json(registry)


def test_status_case_normalised_by_value_type():
    record = {**VALID_RECORD, "applicationStatus": "ACCEPTED"}
    alice = registry_from_json(_document(record)).applicants[0]
    assert alice.application_status.value == "accepted"


@pytest.mark.parametrize("key,field", [
    ("name", "Name"),
    ("phone", "Phone"),
    ("email", "Email"),
    ("scholarship", "Scholarship"),
    ("applicationStatus", "ApplicationStatus"),
])
def test_missing_field_names_the_field(key, field):
    record = {k: v for k, v in VALID_RECORD.items() if k != key}
    with pytest.raises(MissingFieldError) as exc_info:
        registry_from_json(_document(record))
    assert exc_info.value.field == field
    assert exc_info.value.message == f"Applicant's {field} field is missing!"


def test_null_field_counts_as_missing():
    with pytest.raises(MissingFieldError):
        registry_from_json(_document({**VALID_RECORD, "phone": None}))


def test_missing_major_name():
    with pytest.raises(MissingFieldError) as exc_info:
        registry_from_json(_document({**VALID_RECORD, "majors": [{}]}))
    assert exc_info.value.field == "Major"


def test_invalid_phone_reports_constraint():
    with pytest.raises(InvalidFieldError) as exc_info:
        registry_from_json(_document({**VALID_RECORD, "phone": "+651234"}))
    assert exc_info.value.message == Phone.MESSAGE_CONSTRAINTS


def test_invalid_email_reports_constraint():
    with pytest.raises(InvalidFieldError) as exc_info:
        registry_from_json(_document({**VALID_RECORD, "email": "example.com"}))
    assert exc_info.value.message == Email.MESSAGE_CONSTRAINTS


@pytest.mark.parametrize("key,value", [
    ("name", "R@chel"),
    ("scholarship", " "),
    ("applicationStatus", "waitlisted"),
    ("pin", "maybe"),
])
def test_invalid_values_rejected(key, value):
    with pytest.raises(InvalidFieldError):
        registry_from_json(_document({**VALID_RECORD, key: value}))


def test_too_many_majors_rejected():
    majors = [{"majorName": m} for m in ("Art", "History", "Physics")]
    with pytest.raises(InvalidFieldError):
        registry_from_json(_document({**VALID_RECORD, "majors": majors}))


def test_duplicate_names_fail_whole_document():
    other = {**VALID_RECORD, "phone": "11111111", "scholarship": "Sports"}
    third = {**VALID_RECORD, "name": "Bob"}
    with pytest.raises(DuplicateApplicantError) as exc_info:
        registry_from_json(_document(VALID_RECORD, third, other))
    assert exc_info.value.name == "Alice Pauline"


def test_names_differing_in_case_are_not_duplicates():
    lower = {**VALID_RECORD, "name": "alice pauline"}
    assert len(registry_from_json(_document(VALID_RECORD, lower))) == 2


@pytest.mark.parametrize("text", [
    "not json",
    "[]",
    '{"applicants": 5}',
    '{"applicants": [{"name": 12345}]}',
    '{"applicants": [{"name": "Alice", "majors": "History"}]}',
])
def test_malformed_documents(text):
    with pytest.raises(MalformedDocumentError):
        RegistryDocument.from_json(text)


def test_applicant_record_from_model_uses_aliases(make_applicant):
    record = ApplicantRecord.from_model(make_applicant(status="rejected"))
    dumped = record.model_dump(by_alias=True)
    assert dumped["applicationStatus"] == "rejected"
    assert "application_status" not in dumped
