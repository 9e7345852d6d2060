from __future__ import annotations

import pytest

from core.concepts import extract_concepts
from core.titles import normalize_title, split_title


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("Software Developers", ["Software", "Developers"]),
        ("Computer and Information Systems Managers", ["Computer", "InformationSystems", "Managers"]),
        (
            "Transportation, Storage, and Distribution Managers",
            ["Transportation", "Storage", "Distribution", "Managers"],
        ),
        (
            "Life, Physical, and Social Science Technicians, All Other",
            ["Life", "Physical", "SocialScience", "Technicians"],
        ),
        (
            "Environmental Science and Protection Technicians, Including Health",
            ["EnvironmentalScience", "Protection", "Technicians"],
        ),
    ],
)
def test_extract_concepts(title: str, expected: list[str]) -> None:
    assert extract_concepts(title) == expected


def test_role_lists_have_no_concepts() -> None:
    assert extract_concepts("Treasurers and Controllers") == []
    assert extract_concepts("Career Counselors and Advisors") == []


def test_titles_without_role_have_no_concepts() -> None:
    assert extract_concepts("Chief Executives") == []


def test_short_prefix_parts_are_dropped() -> None:
    assert extract_concepts("IT and HR Managers") == ["Managers"]


def test_concepts_are_unique() -> None:
    assert extract_concepts("Sales and Sales Managers") == ["Sales", "Managers"]


@pytest.mark.parametrize(
    "title",
    [
        "Software Developers",
        "Chief Executives",
        "Treasurers and Controllers",
        "Heating or Cooling Mechanics",
        "Life, Physical, and Social Science Technicians, All Other",
    ],
)
def test_concepts_exist_only_for_split_titles(title: str) -> None:
    has_split = split_title(normalize_title(title).text) is not None
    assert bool(extract_concepts(title)) is has_split
