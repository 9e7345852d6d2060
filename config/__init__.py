"""Central configuration for the occupation normalization pipeline.

Settings come from environment variables (a local ``.env`` file is loaded on
import) and can be overridden per run by the command line:

``OCCUPATIONS_SOURCE_FILE``
    O*NET occupation export to read.
``OCCUPATIONS_JOB_ZONES_FILE``
    Optional job zone reference keyed by the same occupation code.
``OCCUPATIONS_OUTPUT_DIR``
    Directory receiving the four record collections.
``OCCUPATIONS_SPACY_MODEL`` / ``OCCUPATIONS_USE_PARSER``
    spaCy pipeline for the optional semantic parser and a switch to disable it.
``OCCUPATIONS_LOG_LEVEL``
    Root log level name.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

_TRUTHY_ENV_VALUES: tuple[str, ...] = ("1", "true", "yes", "on")

DEFAULT_SOURCE_FILE = Path(".standards/.source/ONET/ONET.OccupationData.tsv")
DEFAULT_JOB_ZONES_FILE = Path(".standards/.source/ONET/ONET.JobZoneReference.tsv")
DEFAULT_OUTPUT_DIR = Path(".data")
DEFAULT_SPACY_MODEL = "en_core_web_sm"
DEFAULT_LOG_LEVEL = "INFO"

OCCUPATIONS_FILENAME = "Occupations.tsv"
EXPANSIONS_FILENAME = "OccupationExpansions.tsv"
CONCEPTS_FILENAME = "OccupationConcepts.tsv"
CONCEPT_RELATIONSHIPS_FILENAME = Path("relationships") / "Occupations.Concepts.tsv"


def _is_truthy_flag(value: str | None, *, default: bool = False) -> bool:
    """Return ``True`` when ``value`` matches a truthy environment token."""

    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY_ENV_VALUES


def _resolve_path(value: str | None, default: Path) -> Path:
    raw = (value or "").strip()
    path = Path(raw) if raw else default
    return path if path.is_absolute() else Path.cwd() / path


@dataclass(frozen=True, slots=True)
class PipelineSettings:
    """Resolved settings for one pipeline run."""

    source_file: Path
    job_zones_file: Path | None
    output_dir: Path
    spacy_model: str = DEFAULT_SPACY_MODEL
    use_parser: bool = True
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def occupations_path(self) -> Path:
        return self.output_dir / OCCUPATIONS_FILENAME

    @property
    def expansions_path(self) -> Path:
        return self.output_dir / EXPANSIONS_FILENAME

    @property
    def concepts_path(self) -> Path:
        return self.output_dir / CONCEPTS_FILENAME

    @property
    def concept_relationships_path(self) -> Path:
        return self.output_dir / CONCEPT_RELATIONSHIPS_FILENAME


def load_settings(env: Mapping[str, str] | None = None) -> PipelineSettings:
    """Build :class:`PipelineSettings` from ``env`` (defaults to ``os.environ``).

    Relative paths are resolved against the current working directory.
    """

    source = os.environ if env is None else env
    log_level = (source.get("OCCUPATIONS_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        logger.warning("Ignoring unknown OCCUPATIONS_LOG_LEVEL %r", log_level)
        log_level = DEFAULT_LOG_LEVEL
    return PipelineSettings(
        source_file=_resolve_path(source.get("OCCUPATIONS_SOURCE_FILE"), DEFAULT_SOURCE_FILE),
        job_zones_file=_resolve_path(source.get("OCCUPATIONS_JOB_ZONES_FILE"), DEFAULT_JOB_ZONES_FILE),
        output_dir=_resolve_path(source.get("OCCUPATIONS_OUTPUT_DIR"), DEFAULT_OUTPUT_DIR),
        spacy_model=(source.get("OCCUPATIONS_SPACY_MODEL") or DEFAULT_SPACY_MODEL).strip(),
        use_parser=_is_truthy_flag(source.get("OCCUPATIONS_USE_PARSER"), default=True),
        log_level=log_level,
    )


__all__ = [
    "CONCEPTS_FILENAME",
    "CONCEPT_RELATIONSHIPS_FILENAME",
    "DEFAULT_JOB_ZONES_FILE",
    "DEFAULT_OUTPUT_DIR",
    "DEFAULT_SOURCE_FILE",
    "DEFAULT_SPACY_MODEL",
    "EXPANSIONS_FILENAME",
    "OCCUPATIONS_FILENAME",
    "PipelineSettings",
    "load_settings",
]
