"""Read and write tab-separated reference datasets."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Sequence

from core.errors import SourceFormatError, SourceNotFoundError
from models.occupations import SourceRow

logger = logging.getLogger(__name__)

CODE_COLUMNS: tuple[str, ...] = ("O*NET-SOC Code", "oNETSOCCode", "code")
TITLE_COLUMNS: tuple[str, ...] = ("Title", "title")
DESCRIPTION_COLUMNS: tuple[str, ...] = ("Description", "description")
JOB_ZONE_CODE_COLUMN = "O*NET-SOC Code"
JOB_ZONE_COLUMN = "Job Zone"

# O*NET exports are unquoted; quote characters are literal text.
TSV_FORMAT: Dict[str, Any] = {"delimiter": "\t", "quoting": csv.QUOTE_NONE, "quotechar": None}


def read_tsv(path: str | Path) -> List[Dict[str, str]]:
    """Parse a TSV file into one dictionary per data row.

    A leading byte-order mark is ignored, blank lines are skipped and missing
    trailing cells become empty strings. Header cells and values are trimmed.

    Args:
        path: File to read.

    Returns:
        Rows keyed by header, in file order.

    Raises:
        SourceNotFoundError: If the file does not exist or cannot be read.
    """

    file_path = Path(path)
    try:
        with file_path.open("r", encoding="utf-8-sig", newline="") as handle:
            reader = csv.DictReader(handle, restval="", **TSV_FORMAT)
            if reader.fieldnames is None:
                return []
            reader.fieldnames = [header.strip() for header in reader.fieldnames]
            raw_rows = list(reader)
    except FileNotFoundError as exc:
        raise SourceNotFoundError(file_path) from exc
    except OSError as exc:
        raise SourceNotFoundError(file_path, reason=str(exc)) from exc

    records: List[Dict[str, str]] = []
    for raw in raw_rows:
        # Cells beyond the header land under the ``None`` key.
        record = {header: (value or "").strip() for header, value in raw.items() if header is not None}
        if any(record.values()):
            records.append(record)
    logger.debug("Read %d rows from %s", len(records), file_path)
    return records


def _sanitize(value: Any) -> str:
    if value is None:
        return ""
    return str(value).replace("\t", " ").replace("\n", " ").replace("\r", "")


def write_tsv(path: str | Path, records: Iterable[Mapping[str, Any]], headers: Sequence[str]) -> int:
    """Write ``records`` to ``path`` using ``headers`` as the column order.

    Parent directories are created as needed. Tabs and newlines inside values
    are replaced with spaces so that every record stays on one line.

    Returns:
        Number of records written.
    """

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with file_path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=list(headers), lineterminator="\n", **TSV_FORMAT)
        writer.writeheader()
        for record in records:
            writer.writerow({column: _sanitize(record.get(column)) for column in headers})
            count += 1
    logger.info("Wrote %d records to %s", count, file_path)
    return count


def _pick_column(headers: Iterable[str], candidates: Sequence[str]) -> str | None:
    available = set(headers)
    for candidate in candidates:
        if candidate in available:
            return candidate
    return None


def load_source_rows(path: str | Path) -> List[SourceRow]:
    """Load occupation rows and map known source columns onto :class:`SourceRow`.

    Columns other than the code, title and description columns are kept as
    pass-through extras.

    Raises:
        SourceNotFoundError: If ``path`` is missing.
        SourceFormatError: If the file has rows but no code or title column.
    """

    raw_rows = read_tsv(path)
    if not raw_rows:
        return []

    headers = list(raw_rows[0].keys())
    code_column = _pick_column(headers, CODE_COLUMNS)
    title_column = _pick_column(headers, TITLE_COLUMNS)
    description_column = _pick_column(headers, DESCRIPTION_COLUMNS)
    if code_column is None or title_column is None:
        raise SourceFormatError(
            f"{path} has no code/title columns; expected one of {CODE_COLUMNS} and one of {TITLE_COLUMNS}"
        )

    mapped = {code_column, title_column, description_column}
    rows: List[SourceRow] = []
    for raw in raw_rows:
        extras = {key: value for key, value in raw.items() if key not in mapped}
        payload = {
            **extras,
            "code": raw.get(code_column, ""),
            "title": raw.get(title_column, ""),
            "description": raw.get(description_column, "") if description_column else "",
        }
        rows.append(SourceRow.model_validate(payload))
    return rows


def load_job_zones(path: str | Path | None) -> Dict[str, str]:
    """Return a ``code -> job zone`` map, empty when the file is absent."""

    if path is None:
        return {}
    file_path = Path(path)
    if not file_path.is_file():
        logger.info("Job zone file %s not found, job zones left empty", file_path)
        return {}
    zones: Dict[str, str] = {}
    for row in read_tsv(file_path):
        code = row.get(JOB_ZONE_CODE_COLUMN, "")
        zone = row.get(JOB_ZONE_COLUMN, "")
        if code and zone:
            zones[code] = zone
    logger.info("Loaded %d job zone mappings", len(zones))
    return zones


__all__ = [
    "CODE_COLUMNS",
    "DESCRIPTION_COLUMNS",
    "TITLE_COLUMNS",
    "load_job_zones",
    "load_source_rows",
    "read_tsv",
    "write_tsv",
]
