"""Heuristics that flag concepts produced by a failed title parse."""

from __future__ import annotations

import logging
import re
from collections import Counter
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Dict, Iterable, List, Mapping

from core.identifiers import to_display_name

if TYPE_CHECKING:
    from nlp.semantic_parser import SemanticParser

logger = logging.getLogger(__name__)

_MAX_CONCEPT_LENGTH = 50
_MIN_CONCEPT_LENGTH = 3

_CONJUNCTION_RE = re.compile(r"[a-z](And|Or)[A-Z]")
_FIRST_WORD_RE = re.compile(r"^([A-Z][a-z]+)")

PREPOSITIONS: tuple[str, ...] = (
    "To",
    "For",
    "With",
    "From",
    "In",
    "On",
    "At",
    "By",
    "Of",
    "Through",
    "Into",
    "Within",
)

ARTICLES: tuple[str, ...] = (
    "The",
    "A",
    "An",
    "This",
    "That",
    "These",
    "Those",
    "All",
    "Any",
    "Both",
    "Each",
    "Every",
    "Some",
    "No",
    "None",
)

VERBS: frozenset[str] = frozenset(
    """
    review approve manage develop create ensure establish implement maintain
    monitor analyze assess build conduct coordinate define deliver design
    determine direct evaluate execute identify improve integrate lead optimize
    perform plan prepare provide report resolve support track update align
    allocate communicate configure control document enforce facilitate generate
    govern guide handle initiate inspect install investigate measure negotiate
    obtain organize oversee process produce promote protect recommend record
    reduce refine register regulate remediate remove repair replace request
    research respond restore retrieve revise schedule secure select set share
    specify standardize store submit supervise test train transfer transform
    validate verify
    """.split()
)


class Severity(StrEnum):
    """How strongly an issue indicates a parsing failure."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True, slots=True)
class ConceptIssue:
    """A single suspicious concept and the reason it was flagged."""

    id: str
    name: str
    issue: str
    severity: Severity


def _starts_with_word(identifier: str, words: Iterable[str]) -> str | None:
    for word in words:
        rest = identifier[len(word) :]
        if identifier.startswith(word) and rest and rest[0].isupper():
            return word
    return None


def _check_concept(identifier: str, name: str, parser: SemanticParser | None) -> ConceptIssue | None:
    conjunction = _CONJUNCTION_RE.search(identifier)
    if conjunction:
        return ConceptIssue(
            identifier,
            name,
            f'Contains "{conjunction.group(1)}" conjunction (failed expansion)',
            Severity.HIGH,
        )

    preposition = _starts_with_word(identifier, PREPOSITIONS)
    if preposition:
        return ConceptIssue(identifier, name, f'Starts with preposition "{preposition}"', Severity.HIGH)

    article = _starts_with_word(identifier, ARTICLES)
    if article:
        return ConceptIssue(identifier, name, f'Starts with article/determiner "{article}"', Severity.MEDIUM)

    first_word = _FIRST_WORD_RE.match(identifier)
    if first_word and first_word.group(1).lower() in VERBS:
        return ConceptIssue(
            identifier,
            name,
            f'Starts with verb "{first_word.group(1)}" (likely infinitive phrase)',
            Severity.MEDIUM,
        )
    if parser is not None:
        parsed = parser.parse(name or to_display_name(identifier))
        if parsed.first_pos == "VERB":
            return ConceptIssue(
                identifier,
                name,
                f'Starts with verb "{parsed.tokens[0]}" (tagged by parser)',
                Severity.MEDIUM,
            )

    if len(identifier) > _MAX_CONCEPT_LENGTH:
        return ConceptIssue(identifier, name, f"Very long ID ({len(identifier)} chars)", Severity.LOW)
    if len(identifier) < _MIN_CONCEPT_LENGTH:
        return ConceptIssue(identifier, name, f"Very short ID ({len(identifier)} chars)", Severity.LOW)
    return None


def analyze_concepts(
    concepts: Iterable[Mapping[str, str]],
    *,
    parser: SemanticParser | None = None,
) -> List[ConceptIssue]:
    """Return at most one issue per concept, most severe check first.

    Args:
        concepts: Rows with ``id`` and ``name`` keys, e.g. read from the
            concepts TSV.
        parser: Optional semantic parser used to catch verb-led concepts the
            fixed verb list misses.

    Returns:
        Issues in input order.
    """

    issues: List[ConceptIssue] = []
    for row in concepts:
        identifier = (row.get("id") or "").strip()
        if not identifier:
            continue
        issue = _check_concept(identifier, (row.get("name") or "").strip(), parser)
        if issue is not None:
            issues.append(issue)
    logger.debug("Flagged %d concept issue(s)", len(issues))
    return issues


def group_by_severity(issues: Iterable[ConceptIssue]) -> Dict[Severity, List[ConceptIssue]]:
    grouped: Dict[Severity, List[ConceptIssue]] = {severity: [] for severity in Severity}
    for issue in issues:
        grouped[issue.severity].append(issue)
    return grouped


def verb_counts(issues: Iterable[ConceptIssue]) -> Counter[str]:
    """Count the verbs that start flagged concepts."""

    counts: Counter[str] = Counter()
    for issue in issues:
        if issue.issue.startswith("Starts with verb"):
            counts[issue.issue.split('"')[1]] += 1
    return counts


def format_report(
    issues: List[ConceptIssue],
    total: int,
    *,
    limits: Mapping[Severity, int] | None = None,
) -> str:
    """Render a plain-text report grouped by severity."""

    limits = limits or {Severity.HIGH: 50, Severity.MEDIUM: 30, Severity.LOW: 20}
    grouped = group_by_severity(issues)
    rule = "=" * 80
    lines: List[str] = []
    for severity in Severity:
        bucket = grouped[severity]
        limit = limits.get(severity, len(bucket))
        lines.extend([rule, f"{severity.value.upper()} SEVERITY ISSUES ({len(bucket)})", rule])
        for issue in bucket[:limit]:
            lines.extend([f"  {issue.id}", f"    Name: {issue.name}", f"    Issue: {issue.issue}", ""])
        if len(bucket) > limit:
            lines.append(f"  ... and {len(bucket) - limit} more")
            lines.append("")

    rate = (len(issues) / total * 100) if total else 0.0
    lines.extend(
        [
            rule,
            "SUMMARY",
            rule,
            f"  Total concepts: {total}",
            f"  High severity issues: {len(grouped[Severity.HIGH])}",
            f"  Medium severity issues: {len(grouped[Severity.MEDIUM])}",
            f"  Low severity issues: {len(grouped[Severity.LOW])}",
            f"  Clean concepts: {total - len(issues)}",
            f"  Issue rate: {rate:.1f}%",
        ]
    )
    top_verbs = verb_counts(grouped[Severity.MEDIUM]).most_common(10)
    if top_verbs:
        lines.append("")
        lines.append("  Top verb-starting concepts:")
        lines.extend(f'    "{verb}": {count} concepts' for verb, count in top_verbs)
    return "\n".join(lines)


__all__ = [
    "ARTICLES",
    "ConceptIssue",
    "PREPOSITIONS",
    "Severity",
    "VERBS",
    "analyze_concepts",
    "format_report",
    "group_by_severity",
    "verb_counts",
]
