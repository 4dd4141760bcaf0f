"""Status Predicate — filters applicants by application status.

Invariants:
    - The keyword is validated at the argument boundary (parse_arguments), never here
    - Matching is whole-word and case-insensitive against the status text
"""

from dataclasses import dataclass

from trackascholar.core.applicant import Applicant


def contains_word_ignore_case(sentence: str, word: str) -> bool:
    """True if `word` is one of the whitespace-separated words of `sentence`."""
    target = word.strip().lower()
    if not target or len(target.split()) != 1:
        raise ValueError("word parameter should be a single non-empty word")
    return target in (w.lower() for w in sentence.split())


@dataclass(frozen=True)
class ApplicationStatusPredicate:
    keyword: str

    def test(self, applicant: Applicant) -> bool:
        return contains_word_ignore_case(applicant.application_status.value, self.keyword)

    def __call__(self, applicant: Applicant) -> bool:
        return self.test(applicant)
