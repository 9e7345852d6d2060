"""Cartesian expansion of conjoined occupation titles.

A title such as ``"Transportation, Storage, and Distribution Managers"``
names three occupations sharing one role suffix. :func:`expand_title`
distributes the suffix across the conjuncts and returns one identifier per
derived sibling::

    >>> expand_title("Computer and Information Systems Managers")
    ['ComputerSystemsManagers', 'InformationSystemsManagers']
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from core.identifiers import to_identifier
from core.titles import (
    count_and,
    find_suffix,
    has_conjunction,
    has_role_suffix,
    is_role_noun,
    normalize_title,
    split_conjunctions,
    split_first_and,
    split_title,
)

logger = logging.getLogger(__name__)


def _unique_identifiers(phrases: Iterable[str]) -> List[str]:
    identifiers: List[str] = []
    seen: set[str] = set()
    for phrase in phrases:
        identifier = to_identifier(phrase)
        if identifier and identifier not in seen:
            seen.add(identifier)
            identifiers.append(identifier)
    return identifiers


def _expand_role_list(cleaned: str) -> List[str]:
    """Expand a title that is itself a list of standalone roles."""

    parts = split_conjunctions(cleaned)
    if len(parts) < 2 or not all(has_role_suffix(part) for part in parts):
        return [cleaned]

    # "Career Counselors and Advisors": the leading modifier carries over to
    # conjuncts that are bare role nouns.
    head = find_suffix(parts[0])
    modifier = head.prefix if head is not None else ""
    phrases = [parts[0]]
    for part in parts[1:]:
        split = find_suffix(part)
        if modifier and split is not None and not split.prefix:
            phrases.append(f"{modifier} {part}")
        else:
            phrases.append(part)
    return phrases


def _expand_simple_and(first: str, second: str, suffix: str) -> List[str]:
    """Expand ``"<first> and <second> <suffix>"``."""

    if has_role_suffix(first):
        return [first, f"{second} {suffix}"]

    second_words = second.split()
    if len(second_words) > 1:
        last_word = second_words[-1]
        # Shared trailing modifier: "Computer and Information Systems".
        if len(first.split()) == 1 and not is_role_noun(last_word):
            return [f"{first} {last_word} {suffix}", f"{second} {suffix}"]

    return [f"{first} {suffix}", f"{second} {suffix}"]


def _expand_list(prefix: str, suffix: str, cleaned: str) -> List[str]:
    parts = split_conjunctions(prefix)
    if len(parts) <= 1:
        return [cleaned]
    return [part if has_role_suffix(part) else f"{part} {suffix}" for part in parts]


def expand_title(title: str) -> List[str]:
    """Return the identifiers a raw occupation title expands to.

    The title is normalised first (``All Other`` and ``Including`` removed).
    A title without conjunctions yields its own identifier only; callers drop
    that entry when it equals the occupation identifier.

    Args:
        title: Raw, pre-normalisation occupation title.

    Returns:
        Unique identifiers in derivation order.
    """

    cleaned = normalize_title(title).text
    split = split_title(cleaned)

    if split is None:
        phrases = _expand_role_list(cleaned)
    elif not has_conjunction(split.prefix):
        phrases = [cleaned]
    elif "," not in split.prefix and count_and(split.prefix) == 1:
        halves = split_first_and(split.prefix)
        if halves is None:  # pragma: no cover - guarded by count_and
            phrases = [cleaned]
        else:
            phrases = _expand_simple_and(halves[0], halves[1], split.suffix)
    else:
        phrases = _expand_list(split.prefix, split.suffix, cleaned)

    identifiers = _unique_identifiers(phrases)
    logger.debug("Expanded %r into %s", title, identifiers)
    return identifiers


__all__ = ["expand_title"]
