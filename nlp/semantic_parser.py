"""Optional spaCy-backed semantic parser for occupation titles.

The heuristic engine in :mod:`core` never depends on this module. When spaCy
and an English pipeline are installed the parser is detected at start-up and
used for diagnostics only; without them :func:`detect_semantic_parser`
returns ``None`` and every stage behaves identically.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List, Protocol, runtime_checkable

from core.errors import ParserUnavailableError

try:  # pragma: no cover - optional dependency guard
    import spacy
except ImportError:  # pragma: no cover - fallback when dependency missing
    spacy = None  # type: ignore[assignment]

if TYPE_CHECKING:
    from spacy.language import Language
else:  # pragma: no cover - only used when spaCy is missing at runtime
    Language = Any  # type: ignore[assignment,misc]


logger = logging.getLogger(__name__)

DEFAULT_MODEL_NAME = "en_core_web_sm"


@dataclass(slots=True)
class ParsedTitle:
    """Richer view of a title produced by a semantic parser."""

    text: str
    tokens: List[str] = field(default_factory=list)
    pos_tags: List[str] = field(default_factory=list)

    @property
    def first_pos(self) -> str | None:
        return self.pos_tags[0] if self.pos_tags else None


@runtime_checkable
class SemanticParser(Protocol):
    """Capability interface for optional title parsers."""

    name: str

    def initialize(self) -> None: ...

    def parse(self, title: str) -> ParsedTitle: ...


class SpacySemanticParser:
    """Parse titles with a spaCy pipeline."""

    def __init__(self, model_name: str = DEFAULT_MODEL_NAME) -> None:
        self.model_name = model_name
        self.name = f"spacy:{model_name}"
        self._pipeline: Language | None = None

    def initialize(self) -> None:
        """Load the spaCy pipeline or raise :class:`ParserUnavailableError`."""

        if self._pipeline is not None:
            return
        if spacy is None:
            raise ParserUnavailableError("spaCy is not installed. Install the optional 'nlp' extra.")
        try:
            self._pipeline = spacy.load(self.model_name)
        except (OSError, ImportError, ValueError) as exc:
            # Missing packages raise OSError; incompatible ones ImportError or ValueError.
            raise ParserUnavailableError(
                f"spaCy model '{self.model_name}' is not installed or not loadable. "
                f"Run 'python -m spacy download {self.model_name}'."
            ) from exc

    def parse(self, title: str) -> ParsedTitle:
        if self._pipeline is None:
            self.initialize()
        assert self._pipeline is not None
        doc = self._pipeline(title)
        return ParsedTitle(
            text=title,
            tokens=[token.text for token in doc],
            pos_tags=[token.pos_ for token in doc],
        )


def detect_semantic_parser(
    model_name: str = DEFAULT_MODEL_NAME,
    *,
    enabled: bool = True,
) -> SemanticParser | None:
    """Return an initialised parser when one is available, else ``None``."""

    if not enabled:
        logger.debug("Semantic parser disabled, using heuristic parsing only.")
        return None
    parser = SpacySemanticParser(model_name)
    try:
        parser.initialize()
    except ParserUnavailableError as exc:
        logger.info("Semantic parser not available, using heuristic parsing only: %s", exc)
        return None
    logger.info("Semantic parser initialised (%s)", parser.name)
    return parser


__all__ = [
    "DEFAULT_MODEL_NAME",
    "ParsedTitle",
    "SemanticParser",
    "SpacySemanticParser",
    "detect_semantic_parser",
]
