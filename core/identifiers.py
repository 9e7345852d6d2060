"""Canonical identifier generation for occupation titles and concepts."""

from __future__ import annotations

import re
from typing import Final

# Upper-cased vocabulary kept verbatim when a title word matches it.
ACRONYMS: Final[frozenset[str]] = frozenset(
    {
        "IT",
        "HR",
        "ERP",
        "CRM",
        "API",
        "CEO",
        "CFO",
        "CIO",
        "COO",
        "CTO",
        "EHS",
        "EPA",
        "FDA",
        "EMT",
        "HVAC",
        "CAD",
        "CAM",
        "CNC",
        "PLC",
        "MRI",
        "CT",
        "EKG",
        "ICU",
        "ER",
        "OR",
        "RN",
        "LPN",
        "MD",
        "DO",
        "DDS",
        "DMD",
        "OD",
        "DC",
        "DVM",
        "PA",
        "NP",
        "JD",
        "MBA",
        "CPA",
        "CFP",
        "CFA",
        "STEM",
        "ESL",
        "GED",
        "SAT",
        "ACT",
        "OSHA",
        "ISO",
        "QA",
        "QC",
        "PR",
        "B2B",
        "B2C",
    }
)

_SHORT_NAME_STOP_WORDS: Final[frozenset[str]] = frozenset(
    {
        "the",
        "a",
        "an",
        "and",
        "or",
        "of",
        "for",
        "to",
        "in",
        "on",
        "at",
        "by",
        "with",
        "all",
        "other",
        "including",
    }
)

_PARENTHETICAL_RE = re.compile(r"\([^)]+\)")
_UNSAFE_CHARS_RE = re.compile(r"[^\w\s-]", re.ASCII)
_SPACE_RE = re.compile(r"\s+")
_CAMEL_BOUNDARY_RE = re.compile(r"([a-z])([A-Z])")
IDENTIFIER_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9_]+")


def _case_part(part: str) -> str:
    upper = part.upper()
    if upper in ACRONYMS:
        return upper
    return part.capitalize()


def _case_word(word: str) -> str:
    """Return ``word`` in Pascal case, keeping known acronyms upper-case."""

    if word.upper() in ACRONYMS:
        return word.upper()
    if "-" in word:
        return "".join(_case_part(part) for part in word.split("-"))
    return word.capitalize()


def clean_phrase(text: str) -> str:
    """Strip parentheticals and unsafe characters and collapse whitespace."""

    if not text:
        return ""
    cleaned = _PARENTHETICAL_RE.sub("", text)
    cleaned = _UNSAFE_CHARS_RE.sub(" ", cleaned)
    return _SPACE_RE.sub(" ", cleaned).strip()


def to_identifier(text: str) -> str:
    """Convert ``text`` into a canonical Pascal-case identifier.

    Parenthetical segments are dropped, every character other than an ASCII
    word character, whitespace or hyphen becomes a separator, and each word is
    capitalised. Words found in :data:`ACRONYMS` stay upper-case; hyphenated
    words are cased per part and joined without the hyphen.

    Args:
        text: Arbitrary phrase such as an occupation title.

    Returns:
        The identifier, or an empty string when nothing identifier-safe
        remains.
    """

    cleaned = clean_phrase(text)
    if not cleaned:
        return ""
    return "".join(_case_word(word) for word in cleaned.split(" ") if word)


def is_identifier(value: str) -> bool:
    """Return ``True`` when ``value`` is a non-empty identifier-safe string."""

    return bool(value) and IDENTIFIER_RE.fullmatch(value) is not None


def to_display_name(identifier: str) -> str:
    """Split ``identifier`` at lower-to-upper case boundaries."""

    return _CAMEL_BOUNDARY_RE.sub(r"\1 \2", identifier)


def generate_short_name(name: str) -> str:
    """Return a compact mnemonic for a cleaned occupation title.

    A single word is truncated to eight characters. Longer titles drop stop
    words; up to four significant words contribute their first two letters,
    anything longer is reduced to initials.
    """

    words = [word for word in name.lower().split() if word]
    if not words:
        return ""
    if len(words) == 1:
        return words[0][:8]
    significant = [word for word in words if word not in _SHORT_NAME_STOP_WORDS]
    if len(significant) <= 4:
        return "".join(word[:2] for word in significant)
    return "".join(word[0] for word in significant)


__all__ = [
    "ACRONYMS",
    "IDENTIFIER_RE",
    "clean_phrase",
    "generate_short_name",
    "is_identifier",
    "to_display_name",
    "to_identifier",
]
