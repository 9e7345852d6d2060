from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import SourceFormatError, SourceNotFoundError
from ingest.tsv import load_job_zones, load_source_rows, read_tsv, write_tsv


def test_read_tsv_handles_bom_crlf_and_blank_lines(tmp_path: Path) -> None:
    path = tmp_path / "data.tsv"
    path.write_bytes("\ufeffcode\t title \tnote\r\n\r\n11-1011.00\t Chief Executives \r\n\n".encode("utf-8"))

    rows = read_tsv(path)

    assert rows == [{"code": "11-1011.00", "title": "Chief Executives", "note": ""}]


def test_read_tsv_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "empty.tsv"
    path.write_text("", encoding="utf-8")

    assert read_tsv(path) == []


def test_read_tsv_missing_file_raises(tmp_path: Path) -> None:
    missing = tmp_path / "missing.tsv"

    with pytest.raises(SourceNotFoundError) as excinfo:
        read_tsv(missing)
    assert excinfo.value.path == missing
    assert str(missing) in str(excinfo.value)


def test_write_tsv_creates_parents_and_sanitises(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "out.tsv"
    records = [
        {"id": "A", "name": "tab\tinside", "extra": "ignored"},
        {"id": "B", "name": "line\r\nbreak"},
    ]

    count = write_tsv(path, records, ["id", "name", "missing"])

    assert count == 2
    assert path.read_text(encoding="utf-8") == "id\tname\tmissing\nA\ttab inside\t\nB\tline break\t\n"


def test_write_then_read_preserves_rows(tmp_path: Path) -> None:
    path = tmp_path / "concepts.tsv"
    write_tsv(path, [{"id": "Software", "name": "Software"}], ["id", "name"])

    assert read_tsv(path) == [{"id": "Software", "name": "Software"}]


def test_quote_characters_are_literal_text(tmp_path: Path) -> None:
    path = tmp_path / "quoted.tsv"
    path.write_text('code\ttitle\n27-2012.00\t"Stage" Directors\n', encoding="utf-8")

    rows = read_tsv(path)
    assert rows == [{"code": "27-2012.00", "title": '"Stage" Directors'}]

    write_tsv(path, rows, ["code", "title"])
    assert path.read_text(encoding="utf-8") == 'code\ttitle\n27-2012.00\t"Stage" Directors\n'


def test_read_tsv_ignores_cells_beyond_header(tmp_path: Path) -> None:
    path = tmp_path / "ragged.tsv"
    path.write_text("code\ttitle\n11-1011.00\tChief Executives\tstray\n", encoding="utf-8")

    assert read_tsv(path) == [{"code": "11-1011.00", "title": "Chief Executives"}]


def test_load_source_rows_maps_onet_columns(onet_source: Path) -> None:
    rows = load_source_rows(onet_source)

    assert len(rows) == 10
    first = rows[0]
    assert first.code == "11-1011.00"
    assert first.title == "Chief Executives"
    assert first.description == "Determine and formulate policies."
    assert first.extras == {"Data Date": "07/2024"}
    assert not rows[-1].is_complete


def test_load_source_rows_accepts_camel_case_columns(tmp_path: Path) -> None:
    path = tmp_path / "occupations.tsv"
    path.write_text("oNETSOCCode\ttitle\n15-1252.00\tSoftware Developers\n", encoding="utf-8")

    rows = load_source_rows(path)

    assert [(row.code, row.title, row.description) for row in rows] == [
        ("15-1252.00", "Software Developers", "")
    ]


def test_load_source_rows_requires_code_and_title(tmp_path: Path) -> None:
    path = tmp_path / "bad.tsv"
    path.write_text("Name\tSummary\nActors\tPlay parts\n", encoding="utf-8")

    with pytest.raises(SourceFormatError):
        load_source_rows(path)


def test_load_job_zones(job_zones_source: Path, tmp_path: Path) -> None:
    assert load_job_zones(job_zones_source) == {"11-1011.00": "5", "11-3021.00": "4"}
    assert load_job_zones(tmp_path / "absent.tsv") == {}
    assert load_job_zones(None) == {}
