"""Argument Parsing — maps raw command arguments onto validated core inputs.

Invariants:
    - Pure: returns a value or raises ParseError, never touches the registry
    - Status keywords are lower-cased and trimmed, then checked against the fixed status set
    - Indices are one-based positive integers

Design Decisions:
    - Only strict status membership is accepted here; the predicate trusts its keyword
"""

from trackascholar.core.domain_types import ApplicationStatusKind, OneBasedIndex, SortKey
from trackascholar.core.errors import ParseError
from trackascholar.core.predicates import ApplicationStatusPredicate


MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."

FILTER_USAGE = (
    "filter: Filters the list by application status "
    "(one of pending, accepted, rejected, case-insensitive).\n"
    "Example: filter accepted"
)
SORT_USAGE = (
    "sort: Sorts all applicants by the specified input (case-insensitive) "
    "and displays them as a list with index numbers.\n"
    "Parameters: name/scholarship/status\n"
    "Example: sort name"
)


def parse_status_keyword(args: str) -> str:
    keyword = args.lower().strip()
    if keyword not in {kind.value for kind in ApplicationStatusKind}:
        raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(FILTER_USAGE))
    return keyword


def build_status_predicate(args: str) -> ApplicationStatusPredicate:
    return ApplicationStatusPredicate(parse_status_keyword(args))


def parse_sort_key(args: str) -> SortKey:
    try:
        return SortKey(args.lower().strip())
    except ValueError:
        raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(SORT_USAGE)) from None


def parse_index(args: str) -> OneBasedIndex:
    """Parse a one-based index. Leading and trailing whitespace is ignored."""
    trimmed = args.strip()
    if not trimmed.isascii() or not trimmed.isdigit() or int(trimmed) == 0:
        raise ParseError(MESSAGE_INVALID_INDEX)
    return OneBasedIndex(int(trimmed))
