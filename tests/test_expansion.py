from __future__ import annotations

import pytest

from core.expansion import expand_title


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("Career Counselors and Advisors", ["CareerCounselors", "CareerAdvisors"]),
        ("Treasurers and Controllers", ["Treasurers", "Controllers"]),
        (
            "Computer and Information Systems Managers",
            ["ComputerSystemsManagers", "InformationSystemsManagers"],
        ),
        (
            "Transportation, Storage, and Distribution Managers",
            ["TransportationManagers", "StorageManagers", "DistributionManagers"],
        ),
        (
            "Life, Physical, and Social Science Technicians, All Other",
            ["LifeTechnicians", "PhysicalTechnicians", "SocialScienceTechnicians"],
        ),
        (
            "Environmental Science and Protection Technicians, Including Health",
            ["EnvironmentalScienceTechnicians", "ProtectionTechnicians"],
        ),
    ],
)
def test_expand_title_distributes_shared_suffix(title: str, expected: list[str]) -> None:
    assert expand_title(title) == expected


def test_title_without_conjunction_yields_itself() -> None:
    assert expand_title("Software Developers") == ["SoftwareDevelopers"]
    assert expand_title("Chief Executives") == ["ChiefExecutives"]


def test_first_conjunct_with_own_role_is_kept() -> None:
    assert expand_title("Chefs and Head Cooks") == ["Chefs", "HeadCooks"]


def test_trailing_role_noun_is_not_shared_as_modifier() -> None:
    assert expand_title("Sales and Service Worker Supervisors") == [
        "SalesSupervisors",
        "ServiceWorkerSupervisors",
    ]
    assert expand_title("Sales and Service Team Supervisors") == [
        "SalesTeamSupervisors",
        "ServiceTeamSupervisors",
    ]


def test_multi_word_first_conjunct_takes_suffix_only() -> None:
    assert expand_title("Medical Records and Health Information Technicians") == [
        "MedicalRecordsTechnicians",
        "HealthInformationTechnicians",
    ]


def test_list_parts_with_their_own_role_are_kept() -> None:
    assert expand_title("Bookkeepers, Accounting, and Auditing Clerks") == [
        "Bookkeepers",
        "AccountingClerks",
        "AuditingClerks",
    ]


def test_or_conjunction_uses_list_split() -> None:
    assert expand_title("Heating or Cooling Mechanics") == ["HeatingMechanics", "CoolingMechanics"]


def test_role_list_requires_every_part_to_be_a_role() -> None:
    assert expand_title("Actors and Directors") == ["ActorsAndDirectors"]


def test_duplicate_expansions_are_collapsed() -> None:
    assert expand_title("Sales and Sales Managers") == ["SalesManagers"]


def test_expansion_is_deterministic() -> None:
    title = "Transportation, Storage, and Distribution Managers"
    assert expand_title(title) == expand_title(title)


@pytest.mark.parametrize("title", ["", "(withdrawn)"])
def test_empty_titles_expand_to_nothing(title: str) -> None:
    assert expand_title(title) == []
