"""Extract domain and role concepts from occupation titles."""

from __future__ import annotations

from typing import List

from core.identifiers import to_identifier
from core.titles import normalize_title, split_conjunctions, split_title

_MIN_CONCEPT_LENGTH = 3


def extract_concepts(title: str) -> List[str]:
    """Return the concept identifiers named by ``title``.

    Concepts only exist for titles with a domain prefix and a role suffix:
    every conjunct of the prefix becomes a concept (identifiers shorter than
    three characters are skipped) and the role suffix itself is added last.

    Args:
        title: Raw occupation title.

    Returns:
        Concept identifiers without duplicates, in first-seen order. Empty
        when no role suffix was recognised.
    """

    cleaned = normalize_title(title).text
    split = split_title(cleaned)
    if split is None:
        return []

    concepts: List[str] = []
    seen: set[str] = set()
    candidates = [to_identifier(part) for part in split_conjunctions(split.prefix)]
    candidates = [c for c in candidates if len(c) >= _MIN_CONCEPT_LENGTH]
    candidates.append(to_identifier(split.suffix))
    for concept in candidates:
        if concept and concept not in seen:
            seen.add(concept)
            concepts.append(concept)
    return concepts


__all__ = ["extract_concepts"]
