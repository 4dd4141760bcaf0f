"""Registry Document — pydantic models for the JSON file that stores the registry.

Invariants:
    - Document shape: {"applicants": [ApplicantRecord, ...]}, written in registry order
    - Every applicant field is a JSON string; majors are [{"majorName": str}]; flags are "true"/"false"
    - Loading replays validation field by field: missing -> MissingFieldError,
      invalid -> InvalidFieldError, duplicate name -> DuplicateApplicantError
    - A failed load never yields a partially populated registry
    - No normalisation beyond what the value types already do

Design Decisions:
    - pydantic validates structure only (types, nesting); domain rules stay in core/
    - Required fields declared Optional so the missing one is reported by name, in field order
    - Unknown keys ignored on load, never written on save
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from trackascholar.core.applicant import PIN_LABEL, Applicant
from trackascholar.core.errors import (
    InvalidFieldError, MalformedDocumentError, MissingFieldError,
)
from trackascholar.core.field_values import (
    ApplicationStatus, BooleanField, Email, Major, Name, Phone, Scholarship,
)
from trackascholar.core.registry import ApplicantRegistry


def _to_value(raw: str | None, value_type: type):
    """Re-run a field type's checks on stored text, naming the field on failure."""
    field_name = value_type.__name__
    if raw is None:
        raise MissingFieldError(field_name)
    if not value_type.is_valid(raw):
        raise InvalidFieldError(value_type.MESSAGE_CONSTRAINTS, field_name)
    return value_type(raw)


class MajorRecord(BaseModel):
    """One entry of an applicant's majors array."""
    model_config = ConfigDict(populate_by_name=True)

    major_name: str | None = Field(None, alias="majorName")

    @classmethod
    def from_model(cls, major: Major) -> "MajorRecord":
        return cls(major_name=major.value)

    def to_model(self) -> Major:
        return _to_value(self.major_name, Major)


class ApplicantRecord(BaseModel):
    """JSON-friendly version of an Applicant."""
    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    phone: str | None = None
    email: str | None = None
    scholarship: str | None = None
    application_status: str | None = Field(None, alias="applicationStatus")
    majors: list[MajorRecord] | None = None
    pin: str | None = None

    @classmethod
    def from_model(cls, applicant: Applicant) -> "ApplicantRecord":
        return cls(
            name=applicant.name.value,
            phone=applicant.phone.value,
            email=applicant.email.value,
            scholarship=applicant.scholarship.value,
            application_status=applicant.application_status.value,
            majors=[MajorRecord.from_model(m) for m in applicant.sorted_majors()],
            pin=applicant.pin.to_text(),
        )

    def to_model(self) -> Applicant:
        """Convert back into an Applicant, enforcing every field invariant."""
        name = _to_value(self.name, Name)
        phone = _to_value(self.phone, Phone)
        email = _to_value(self.email, Email)
        scholarship = _to_value(self.scholarship, Scholarship)
        status = _to_value(self.application_status, ApplicationStatus)
        majors = frozenset(record.to_model() for record in self.majors or [])
        pin = (
            BooleanField(PIN_LABEL, False) if self.pin is None
            else BooleanField.from_text(PIN_LABEL, self.pin)
        )
        return Applicant(name, phone, email, scholarship, status, majors, pin)


class RegistryDocument(BaseModel):
    """The whole stored registry."""

    applicants: list[ApplicantRecord] = Field(default_factory=list)

    @classmethod
    def from_model(cls, registry: ApplicantRegistry) -> "RegistryDocument":
        return cls(applicants=[ApplicantRecord.from_model(a) for a in registry])

    @classmethod
    def from_json(cls, text: str | bytes) -> "RegistryDocument":
        try:
            return cls.model_validate_json(text)
        except ValidationError as exc:
            raise MalformedDocumentError(_describe_validation_error(exc)) from exc

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)

    def to_model(self) -> ApplicantRegistry:
        """Build a registry through the same add() path used at runtime."""
        registry = ApplicantRegistry()
        for record in self.applicants:
            registry.add(record.to_model())
        return registry


def registry_to_json(registry: ApplicantRegistry) -> str:
    return RegistryDocument.from_model(registry).to_json()


def registry_from_json(text: str | bytes) -> ApplicantRegistry:
    return RegistryDocument.from_json(text).to_model()


def _describe_validation_error(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc']) or 'document'}: {e['msg']}"
        for e in exc.errors()
    )
