from __future__ import annotations

import pytest

from core.titles import (
    SuffixSplit,
    count_and,
    find_suffix,
    has_conjunction,
    is_role_noun,
    normalize_title,
    pluralize,
    split_conjunctions,
    split_first_and,
    split_title,
)


def test_normalize_strips_all_other() -> None:
    cleaned = normalize_title("Life, Physical, and Social Science Technicians, All Other")

    assert cleaned.text == "Life, Physical, and Social Science Technicians"
    assert cleaned.is_category_other is True
    assert cleaned.inclusion_note is None


def test_normalize_strips_including_note() -> None:
    cleaned = normalize_title("Environmental Science and Protection Technicians, Including Health")

    assert cleaned.text == "Environmental Science and Protection Technicians"
    assert cleaned.is_category_other is False
    assert cleaned.inclusion_note == "Health"


def test_normalize_handles_both_markers_case_insensitively() -> None:
    cleaned = normalize_title("Farm Workers, including Ranch Hands, all other")

    assert cleaned.text == "Farm Workers"
    assert cleaned.is_category_other is True
    assert cleaned.inclusion_note == "Ranch Hands"


def test_normalize_leaves_plain_titles_untouched() -> None:
    cleaned = normalize_title("Software Developers")

    assert cleaned.text == "Software Developers"
    assert not cleaned.is_category_other
    assert cleaned.inclusion_note is None


@pytest.mark.parametrize(
    ("singular", "plural"),
    [("Manager", "Managers"), ("Secretary", "Secretaries"), ("Host", "Hosts")],
)
def test_pluralize(singular: str, plural: str) -> None:
    assert pluralize(singular) == plural


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        (
            "Computer and Information Systems Managers",
            SuffixSplit("Computer and Information Systems", "Managers"),
        ),
        ("Legal Secretaries", SuffixSplit("Legal", "Secretaries")),
        ("Night Security Guard", SuffixSplit("Night Security", "Guard")),
        ("Managers", SuffixSplit("", "Managers")),
    ],
)
def test_find_suffix(title: str, expected: SuffixSplit) -> None:
    assert find_suffix(title) == expected


def test_find_suffix_prefers_declaration_order() -> None:
    # "Underwriter" is declared before "Writer", so the longer role wins here.
    assert find_suffix("Insurance Underwriters") == SuffixSplit("Insurance", "Underwriters")


@pytest.mark.parametrize("title", ["Chief Executives", "Actors", "", "software developers"])
def test_find_suffix_returns_none_without_known_role(title: str) -> None:
    assert find_suffix(title) is None


@pytest.mark.parametrize(
    "title",
    [
        "Computer and Information Systems Managers",
        "Transportation, Storage, and Distribution Managers",
        "Legal Secretaries",
        "Registered Nurses",
        "Night Security Guard",
    ],
)
def test_suffix_survives_reassembly(title: str) -> None:
    split = find_suffix(title)
    assert split is not None

    rebuilt = find_suffix(f"{split.prefix} {split.suffix}".strip())
    assert rebuilt is not None
    assert rebuilt.suffix == split.suffix


def test_is_role_noun_compares_whole_words() -> None:
    assert is_role_noun("Managers")
    assert is_role_noun("managers")
    assert is_role_noun("Secretaries")
    assert is_role_noun("Worker")
    assert not is_role_noun("Systems")
    assert not is_role_noun("Manag")
    assert not is_role_noun("Caseworkers")


def test_split_title_rejects_dangling_conjunction() -> None:
    # The suffix is found, but it belongs to one conjunct of a role list.
    assert find_suffix("Treasurers and Controllers") is not None
    assert split_title("Treasurers and Controllers") is None
    assert split_title("Career Counselors and Advisors") is None
    assert split_title("Cashiers, Tellers") is None


def test_split_title_keeps_shared_suffix() -> None:
    assert split_title("Computer and Information Systems Managers") == SuffixSplit(
        "Computer and Information Systems", "Managers"
    )
    assert split_title("Software Developers") == SuffixSplit("Software", "Developers")


def test_conjunction_helpers() -> None:
    assert has_conjunction("Transportation, Storage")
    assert has_conjunction("Heating or Cooling")
    assert not has_conjunction("Sand Blasting")
    assert count_and("Research and Development and Testing") == 2
    assert count_and("Sandpapering") == 0
    assert split_first_and("Computer and Information Systems") == ("Computer", "Information Systems")
    assert split_first_and("Software") is None


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Transportation, Storage, and Distribution", ["Transportation", "Storage", "Distribution"]),
        ("Life, Physical, and Social Science", ["Life", "Physical", "Social Science"]),
        ("Heating or Cooling", ["Heating", "Cooling"]),
        ("Sales, Marketing, or Advertising", ["Sales", "Marketing", "Advertising"]),
        ("Sand and Gravel", ["Sand", "Gravel"]),
        ("Standalone", ["Standalone"]),
    ],
)
def test_split_conjunctions(text: str, expected: list[str]) -> None:
    assert split_conjunctions(text) == expected
