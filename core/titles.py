"""Title normalization and role-suffix matching for occupation titles.

Titles from occupational taxonomies follow a narrow grammar: a domain prefix
(``"Computer and Information Systems"``) followed by a role noun
(``"Managers"``), optionally decorated with boilerplate such as
``", All Other"`` or ``", Including Health"``. The helpers here peel off the
boilerplate and locate the role noun so that the expansion and concept
extraction stages can work on the two halves independently.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, List

# Singular role nouns in match priority order. The first entry whose plural or
# singular form ends a title wins, so order matters.
OCCUPATION_SUFFIXES: Final[tuple[str, ...]] = (
    "Manager",
    "Director",
    "Supervisor",
    "Administrator",
    "Coordinator",
    "Specialist",
    "Analyst",
    "Engineer",
    "Technician",
    "Operator",
    "Worker",
    "Assistant",
    "Aide",
    "Clerk",
    "Representative",
    "Agent",
    "Officer",
    "Inspector",
    "Examiner",
    "Auditor",
    "Counselor",
    "Advisor",
    "Consultant",
    "Trainer",
    "Instructor",
    "Teacher",
    "Professor",
    "Scientist",
    "Researcher",
    "Developer",
    "Designer",
    "Architect",
    "Planner",
    "Estimator",
    "Appraiser",
    "Therapist",
    "Nurse",
    "Physician",
    "Surgeon",
    "Dentist",
    "Technologist",
    "Hygienist",
    "Pharmacist",
    "Veterinarian",
    "Attorney",
    "Lawyer",
    "Paralegal",
    "Judge",
    "Arbitrator",
    "Accountant",
    "Bookkeeper",
    "Teller",
    "Broker",
    "Underwriter",
    "Mechanic",
    "Electrician",
    "Plumber",
    "Carpenter",
    "Welder",
    "Driver",
    "Pilot",
    "Captain",
    "Dispatcher",
    "Controller",
    "Chef",
    "Cook",
    "Baker",
    "Bartender",
    "Server",
    "Host",
    "Guard",
    "Detective",
    "Firefighter",
    "Paramedic",
    "Treasurer",
    "Secretary",
    "Economist",
    "Librarian",
    "Editor",
    "Writer",
    "Programmer",
)

_ALL_OTHER_RE = re.compile(r"^(.+),\s*All Other$", re.IGNORECASE)
_INCLUDING_RE = re.compile(r"^(.+),\s*Including\s+(.+)$", re.IGNORECASE)
# Comma with an optional trailing conjunction, or a bare "and"/"or".
_CONJUNCTION_SPLIT_RE = re.compile(r",\s*(?:and\s+|or\s+)?|\s+and\s+|\s+or\s+", re.IGNORECASE)
_CONJUNCTION_MARKER_RE = re.compile(r",|\s+and\s+|\s+or\s+", re.IGNORECASE)
_DANGLING_CONJUNCTION_RE = re.compile(r"(?:^|[\s,])(?:and|or)$|,$", re.IGNORECASE)
_AND_RE = re.compile(r"\s+and\s+", re.IGNORECASE)
_SIMPLE_AND_RE = re.compile(r"^(.+?)\s+and\s+(.+)$", re.IGNORECASE)


def pluralize(singular: str) -> str:
    """Return the plural of a role noun (``y`` becomes ``ies``, else ``s``)."""

    if singular.endswith("y"):
        return singular[:-1] + "ies"
    return singular + "s"


@dataclass(frozen=True, slots=True)
class CleanedTitle:
    """Title with boilerplate suffixes removed."""

    text: str
    is_category_other: bool = False
    inclusion_note: str | None = None


@dataclass(frozen=True, slots=True)
class SuffixSplit:
    """Role suffix matched at the end of a title and everything before it."""

    prefix: str
    suffix: str


def strip_all_other(title: str) -> tuple[str, bool]:
    """Remove a trailing ``", All Other"`` and report whether it was present."""

    match = _ALL_OTHER_RE.match(title)
    if match:
        return match.group(1).strip(), True
    return title, False


def strip_including(title: str) -> tuple[str, str | None]:
    """Remove a trailing ``", Including X"`` and return ``X`` when present."""

    match = _INCLUDING_RE.match(title)
    if match:
        return match.group(1).strip(), match.group(2).strip()
    return title, None


def normalize_title(title: str) -> CleanedTitle:
    """Strip ``All Other`` then ``Including`` boilerplate from ``title``.

    Unmatched titles are returned unchanged with both flags unset.
    """

    text, is_other = strip_all_other(title)
    text, including = strip_including(text)
    return CleanedTitle(text=text, is_category_other=is_other, inclusion_note=including)


def find_suffix(title: str) -> SuffixSplit | None:
    """Return the first known role suffix ending ``title``.

    Each role in :data:`OCCUPATION_SUFFIXES` is tried in declaration order,
    plural form first and singular second. The comparison is a plain,
    case-sensitive ``endswith`` so the same function doubles as a test of
    whether a standalone phrase is itself a role.

    Args:
        title: Cleaned occupation title or fragment.

    Returns:
        The split, or ``None`` when no known role ends the title.
    """

    for singular in OCCUPATION_SUFFIXES:
        plural = pluralize(singular)
        for form in (plural, singular):
            if title.endswith(form):
                return SuffixSplit(prefix=title[: -len(form)].strip(), suffix=form)
    return None


def has_role_suffix(phrase: str) -> bool:
    """Return ``True`` when ``phrase`` ends with a known role noun."""

    return find_suffix(phrase) is not None


def is_role_noun(word: str) -> bool:
    """Return ``True`` when ``word`` is exactly a known role noun.

    Unlike :func:`find_suffix` this compares whole words, ignoring case.
    """

    normalized = word.casefold()
    for singular in OCCUPATION_SUFFIXES:
        if normalized in (singular.casefold(), pluralize(singular).casefold()):
            return True
    return False


def split_title(title: str) -> SuffixSplit | None:
    """Split a cleaned title into its domain prefix and shared role suffix.

    A match whose prefix ends in a dangling ``and``/``or``/comma means the
    final role is one conjunct of a list of standalone roles
    (``"Treasurers and Controllers"``), not a suffix shared by the prefix, so
    no split is returned.
    """

    match = find_suffix(title)
    if match is None:
        return None
    if _DANGLING_CONJUNCTION_RE.search(match.prefix):
        return None
    return match


def has_conjunction(text: str) -> bool:
    """Return ``True`` when ``text`` contains a comma, ``and`` or ``or``."""

    return _CONJUNCTION_MARKER_RE.search(text) is not None


def count_and(text: str) -> int:
    return len(_AND_RE.findall(text))


def split_first_and(text: str) -> tuple[str, str] | None:
    """Split ``text`` around its first ``" and "`` into two trimmed halves."""

    match = _SIMPLE_AND_RE.match(text)
    if match is None:
        return None
    return match.group(1).strip(), match.group(2).strip()


def split_conjunctions(text: str) -> List[str]:
    """Split ``text`` on commas and ``and``/``or`` into trimmed, non-empty parts."""

    return [part.strip() for part in _CONJUNCTION_SPLIT_RE.split(text) if part.strip()]


__all__ = [
    "CleanedTitle",
    "OCCUPATION_SUFFIXES",
    "SuffixSplit",
    "count_and",
    "find_suffix",
    "has_conjunction",
    "has_role_suffix",
    "is_role_noun",
    "normalize_title",
    "pluralize",
    "split_conjunctions",
    "split_first_and",
    "split_title",
    "strip_all_other",
    "strip_including",
]
