"""Field Value Types — immutable validated scalars that make up an Applicant.

Invariants:
    - Every type validates in __post_init__ and raises InvalidFieldError on failure
    - is_valid(text) is pure and agrees exactly with whether construction succeeds
    - Values are stored verbatim, except ApplicationStatus which is lowercased
    - Name, Scholarship and ApplicationStatus are totally ordered via compare()

Design Decisions:
    - Frozen dataclasses: value equality and hashing for free, no mutation after build
    - Regexes are ASCII-only: "alphanumeric" means [A-Za-z0-9]
    - One parametrised BooleanField instead of one class per flag
"""

import re
from dataclasses import dataclass
from typing import ClassVar

from trackascholar.core.domain_types import ApplicationStatusKind
from trackascholar.core.errors import InvalidFieldError


_ALNUM_WITH_SPACES = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")

_EMAIL_SPECIAL_CHARACTERS = "+_.-"
_EMAIL_ALNUM = r"[A-Za-z0-9]+"
_EMAIL_LOCAL_PART = rf"{_EMAIL_ALNUM}([{re.escape(_EMAIL_SPECIAL_CHARACTERS)}]{_EMAIL_ALNUM})*"
_EMAIL_DOMAIN_LABEL = rf"{_EMAIL_ALNUM}(-{_EMAIL_ALNUM})*"
_EMAIL = re.compile(
    # last domain label is at least 2 characters long
    rf"{_EMAIL_LOCAL_PART}@({_EMAIL_DOMAIN_LABEL}\.)*(?=[A-Za-z0-9-]{{2,}}\Z){_EMAIL_DOMAIN_LABEL}"
)


def _matches(pattern: re.Pattern, test: object) -> bool:
    return isinstance(test, str) and pattern.fullmatch(test) is not None


class _OrderedField:
    """Mixin giving a field type compare() and < from _order_value()."""

    def _order_value(self):
        raise NotImplementedError

    def compare(self, other) -> int:
        """Return -1, 0 or 1 as self sorts before, level with, or after other."""
        mine, theirs = self._order_value(), other._order_value()
        return (mine > theirs) - (mine < theirs)

    def __lt__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._order_value() < other._order_value()


@dataclass(frozen=True)
class Name(_OrderedField):
    """Applicant's full name, the identity field."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )

    value: str

    def __post_init__(self):
        if not Name.is_valid(self.value):
            raise InvalidFieldError(Name.MESSAGE_CONSTRAINTS, "Name")

    @staticmethod
    def is_valid(test: object) -> bool:
        return _matches(_ALNUM_WITH_SPACES, test)

    def _order_value(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Phone:
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    )
    _PATTERN: ClassVar[re.Pattern] = re.compile(r"[0-9]{3,}")

    value: str

    def __post_init__(self):
        if not Phone.is_valid(self.value):
            raise InvalidFieldError(Phone.MESSAGE_CONSTRAINTS, "Phone")

    @staticmethod
    def is_valid(test: object) -> bool:
        return _matches(Phone._PATTERN, test)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Email:
    """Email address of the form local-part@domain.

    The local part is alphanumeric runs joined by one of +_.- (never leading,
    trailing or doubled). The domain is dot-separated labels of alphanumeric
    runs joined by hyphens; the last label is at least 2 characters long.
    """

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these special characters, "
        f"excluding the parentheses, ({_EMAIL_SPECIAL_CHARACTERS}). The local-part may not start or end "
        "with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is made up of domain labels "
        "separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, separated only by hyphens, if any."
    )

    value: str

    def __post_init__(self):
        if not Email.is_valid(self.value):
            raise InvalidFieldError(Email.MESSAGE_CONSTRAINTS, "Email")

    @staticmethod
    def is_valid(test: object) -> bool:
        return _matches(_EMAIL, test)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Scholarship(_OrderedField):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Scholarship can take any values, and it should not be blank"
    )
    # First character must not be whitespace, otherwise " " would be valid
    _PATTERN: ClassVar[re.Pattern] = re.compile(r"[^\s].*")

    value: str

    def __post_init__(self):
        if not Scholarship.is_valid(self.value):
            raise InvalidFieldError(Scholarship.MESSAGE_CONSTRAINTS, "Scholarship")

    @staticmethod
    def is_valid(test: object) -> bool:
        return _matches(Scholarship._PATTERN, test)

    def _order_value(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ApplicationStatus(_OrderedField):
    """Where an application stands. Input is case-insensitive, stored lowercased."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Application status should only be one of the following: "
        + ", ".join(kind.value for kind in ApplicationStatusKind)
    )

    value: str

    def __post_init__(self):
        if not ApplicationStatus.is_valid(self.value):
            raise InvalidFieldError(ApplicationStatus.MESSAGE_CONSTRAINTS, "ApplicationStatus")
        object.__setattr__(self, "value", self.value.lower())

    @staticmethod
    def is_valid(test: object) -> bool:
        return isinstance(test, str) and test.lower() in {
            kind.value for kind in ApplicationStatusKind
        }

    @property
    def kind(self) -> ApplicationStatusKind:
        return ApplicationStatusKind(self.value)

    def _order_value(self) -> int:
        return self.kind.rank

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Major:
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Majors should only contain alphanumeric characters and spaces, "
        "and adhere to the following constraints:\n"
        "1. Major should not be empty\n"
        "2. An applicant can only take up at most 2 Majors"
    )
    MAXIMUM_NUMBER_OF_MAJORS: ClassVar[int] = 2

    value: str

    def __post_init__(self):
        if not Major.is_valid(self.value):
            raise InvalidFieldError(Major.MESSAGE_CONSTRAINTS, "Major")

    @staticmethod
    def is_valid(test: object) -> bool:
        return _matches(_ALNUM_WITH_SPACES, test)

    def __str__(self) -> str:
        return f"[{self.value}]"


@dataclass(frozen=True)
class BooleanField:
    """A named yes/no flag, stored as the literal text "true" or "false"."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Flag values should be either 'true' or 'false'"
    TRUE_TEXT: ClassVar[str] = "true"
    FALSE_TEXT: ClassVar[str] = "false"

    label: str
    value: bool = False

    def __post_init__(self):
        if not isinstance(self.value, bool):
            raise InvalidFieldError(BooleanField.MESSAGE_CONSTRAINTS, self.label)

    @staticmethod
    def is_valid(test: object) -> bool:
        return isinstance(test, str) and test.lower() in {
            BooleanField.TRUE_TEXT, BooleanField.FALSE_TEXT,
        }

    @classmethod
    def from_text(cls, label: str, text: object) -> "BooleanField":
        if not cls.is_valid(text):
            raise InvalidFieldError(cls.MESSAGE_CONSTRAINTS, label)
        return cls(label, text.lower() == cls.TRUE_TEXT)

    def to_text(self) -> str:
        return self.TRUE_TEXT if self.value else self.FALSE_TEXT

    def __bool__(self) -> bool:
        return self.value
