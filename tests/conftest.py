from pathlib import Path
import sys

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


SAMPLE_ONET_ROWS: list[tuple[str, str, str]] = [
    ("11-1011.00", "Chief Executives", "Determine and formulate policies."),
    ("11-3021.00", "Computer and Information Systems Managers", "Plan and coordinate IT activities."),
    ("11-3071.00", "Transportation, Storage, and Distribution Managers", "Plan and direct logistics."),
    ("11-3031.01", "Treasurers and Controllers", "Direct financial activities."),
    ("21-1012.00", "Career Counselors and Advisors", "Advise students."),
    ("19-4099.00", "Life, Physical, and Social Science Technicians, All Other", "All other technicians."),
    (
        "19-2041.00",
        "Environmental Science and Protection Technicians, Including Health",
        "Perform laboratory and field tests.",
    ),
    ("15-1252.00", "Software Developers", "Research, design, and develop software."),
    ("15-1252.01", "Software Developers", "Duplicate code for the same title."),
    ("", "Orphan Title Without Code", "Skipped."),
]


@pytest.fixture(autouse=True)
def _isolate_occupation_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment settings out of the test run."""

    for name in (
        "OCCUPATIONS_SOURCE_FILE",
        "OCCUPATIONS_JOB_ZONES_FILE",
        "OCCUPATIONS_OUTPUT_DIR",
        "OCCUPATIONS_SPACY_MODEL",
        "OCCUPATIONS_USE_PARSER",
        "OCCUPATIONS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def onet_source(tmp_path: Path) -> Path:
    """Write a small O*NET occupation export with a BOM and an extra column."""

    lines = ["O*NET-SOC Code\tTitle\tDescription\tData Date"]
    lines.extend(f"{code}\t{title}\t{description}\t07/2024" for code, title, description in SAMPLE_ONET_ROWS)
    path = tmp_path / "ONET.OccupationData.tsv"
    path.write_text("\ufeff" + "\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def job_zones_source(tmp_path: Path) -> Path:
    path = tmp_path / "ONET.JobZoneReference.tsv"
    path.write_text(
        "O*NET-SOC Code\tJob Zone\n11-1011.00\t5\n11-3021.00\t4\n",
        encoding="utf-8",
    )
    return path
