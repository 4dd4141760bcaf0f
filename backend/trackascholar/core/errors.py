"""Error Hierarchy — typed, categorized exceptions for all TrackAScholar failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors are recoverable: the failing call never mutates state
    - Storage errors are critical: the caller decides whether to continue
    - to_response() produces the envelope the calling layer renders to users

Design Decisions:
    - Single hierarchy with TrackAScholarError base: callers catch one type
    - ErrorContext as dataclass: rich observability without coupling core to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    RESOURCE_NOT_FOUND = "resource_not_found"
    STORAGE = "storage"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    applicant_name: str | None = None
    field_name: str | None = None
    file_path: str | None = None


class TrackAScholarError(Exception):
    """Base exception for all TrackAScholar errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    @property
    def recoverable(self) -> bool:
        return self.severity is not ErrorSeverity.CRITICAL

    def to_response(self) -> dict:
        """Convert to the standard error envelope shown by the calling layer."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "recoverable": self.recoverable,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "applicant_name": self.context.applicant_name,
                    "field_name": self.context.field_name,
                    "file_path": self.context.file_path,
                },
            }
        }


# ─── Domain Errors ──────────────────────────────────────────────

class InvalidFieldError(TrackAScholarError):
    """A raw value failed its field type's validation rule."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field_name = field
        super().__init__(
            message, "INVALID_FIELD", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )
        self.field = field


class MissingFieldError(TrackAScholarError):
    """A required key is absent from a stored applicant record."""
    MESSAGE_FORMAT = "Applicant's {} field is missing!"

    def __init__(self, field: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field_name = field
        super().__init__(
            self.MESSAGE_FORMAT.format(field),
            "MISSING_FIELD", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )
        self.field = field


class MalformedDocumentError(TrackAScholarError):
    """Stored text is not JSON, or not shaped like a registry document."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Registry document is malformed: {message}",
            "MALFORMED_DOCUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )


class DuplicateApplicantError(TrackAScholarError):
    """An applicant with the same name is already in the registry."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.applicant_name = name
        super().__init__(
            f"Applicant '{name}' already exists in TrackAScholar",
            "DUPLICATE_APPLICANT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx,
        )
        self.name = name


class ApplicantNotFoundError(TrackAScholarError):
    """The targeted applicant is not in the registry."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.applicant_name = name
        super().__init__(
            f"Applicant '{name}' not found",
            "APPLICANT_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx,
        )
        self.name = name


class ParseError(TrackAScholarError):
    """Command arguments could not be mapped to a keyword, sort key or index."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "PARSE_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )


class InvalidIndexError(TrackAScholarError):
    """A one-based index points past the end of the displayed list."""
    def __init__(self, index: int, size: int, context: ErrorContext | None = None):
        super().__init__(
            f"The applicant index provided is invalid: {index} (list has {size})",
            "INVALID_INDEX", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.index = index
        self.size = size


# ─── Infrastructure Errors ──────────────────────────────────────

class StorageError(TrackAScholarError):
    """Reading or writing the data file failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Storage {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, context,
        )
        self.operation = operation
