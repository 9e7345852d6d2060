"""Pydantic models for occupation source rows and output records."""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.identifiers import is_identifier

OCCUPATION_NS = "occupations.org.ai"
CONCEPT_NS = "concept.org.ai"
OCCUPATION_TYPE = "Occupation"
OCCUPATION_CATEGORY_TYPE = "OccupationCategory"
EXPANSION_TYPE = "OccupationExpansion"
CONCEPT_TYPE = "Concept"
CONJUNCTION_EXPANSION = "conjunction"
RELATED_TO = "relatedTo"
ONET_SOURCE_TYPE = "ONETOccupation"


def _validate_identifier(value: str) -> str:
    if not is_identifier(value):
        raise ValueError(f"{value!r} is not a valid identifier")
    return value


class SourceRow(BaseModel):
    """One occupation row as supplied by the source reader.

    Columns beyond ``code``, ``title`` and ``description`` are kept as extras
    and passed through to the occupation record.
    """

    model_config = ConfigDict(extra="allow", str_strip_whitespace=True)

    code: str = ""
    title: str = ""
    description: str = ""

    @field_validator("code", "title", "description", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def extras(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})

    @property
    def is_complete(self) -> bool:
        return bool(self.code and self.title)


class _Record(BaseModel):
    """Shared behaviour for TSV output records."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    COLUMNS: ClassVar[Tuple[str, ...]] = ()

    def to_row(self) -> Dict[str, Any]:
        """Return the record keyed by its TSV column names."""

        return self.model_dump(by_alias=True)


class OccupationRecord(_Record):
    """Root occupation keyed by its external source code."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="allow")

    COLUMNS: ClassVar[Tuple[str, ...]] = (
        "ns",
        "type",
        "id",
        "name",
        "description",
        "code",
        "shortName",
        "sourceType",
        "sourceCode",
        "jobZone",
        "category",
    )

    ns: str = OCCUPATION_NS
    type: str = OCCUPATION_TYPE
    id: str
    name: str
    description: str = ""
    code: str
    short_name: str = Field(default="", alias="shortName")
    source_type: str = Field(default=ONET_SOURCE_TYPE, alias="sourceType")
    source_code: str = Field(default="", alias="sourceCode")
    job_zone: str = Field(default="", alias="jobZone")
    category: str = OCCUPATION_TYPE

    @field_validator("id")
    @classmethod
    def _check_id(cls, value: str) -> str:
        return _validate_identifier(value)


class ExpansionRecord(_Record):
    """Sibling identifier derived from an occupation title."""

    COLUMNS: ClassVar[Tuple[str, ...]] = (
        "ns",
        "type",
        "id",
        "name",
        "parentCode",
        "parentId",
        "expansionType",
    )

    ns: str = OCCUPATION_NS
    type: str = EXPANSION_TYPE
    id: str
    name: str
    parent_code: str = Field(alias="parentCode")
    parent_id: str = Field(alias="parentId")
    expansion_type: str = Field(default=CONJUNCTION_EXPANSION, alias="expansionType")

    @field_validator("id", "parent_id")
    @classmethod
    def _check_ids(cls, value: str) -> str:
        return _validate_identifier(value)


class ConceptRecord(_Record):
    """Domain or role concept shared across occupations."""

    COLUMNS: ClassVar[Tuple[str, ...]] = ("ns", "type", "id", "name")

    ns: str = CONCEPT_NS
    type: str = CONCEPT_TYPE
    id: str
    name: str

    @field_validator("id")
    @classmethod
    def _check_id(cls, value: str) -> str:
        return _validate_identifier(value)


class ConceptRelationshipRecord(_Record):
    """Edge from an occupation to one of its concepts."""

    COLUMNS: ClassVar[Tuple[str, ...]] = (
        "fromNs",
        "fromType",
        "fromId",
        "toNs",
        "toType",
        "toId",
        "relationshipType",
    )

    from_ns: str = Field(default=OCCUPATION_NS, alias="fromNs")
    from_type: str = Field(default=OCCUPATION_TYPE, alias="fromType")
    from_id: str = Field(alias="fromId")
    to_ns: str = Field(default=CONCEPT_NS, alias="toNs")
    to_type: str = Field(default=CONCEPT_TYPE, alias="toType")
    to_id: str = Field(alias="toId")
    relationship_type: str = Field(default=RELATED_TO, alias="relationshipType")

    @field_validator("from_id", "to_id")
    @classmethod
    def _check_ids(cls, value: str) -> str:
        return _validate_identifier(value)

    @property
    def key(self) -> Tuple[str, str]:
        return (self.from_id, self.to_id)


__all__ = [
    "CONCEPT_NS",
    "CONCEPT_TYPE",
    "CONJUNCTION_EXPANSION",
    "ConceptRecord",
    "ConceptRelationshipRecord",
    "EXPANSION_TYPE",
    "ExpansionRecord",
    "OCCUPATION_CATEGORY_TYPE",
    "OCCUPATION_NS",
    "OCCUPATION_TYPE",
    "ONET_SOURCE_TYPE",
    "OccupationRecord",
    "RELATED_TO",
    "SourceRow",
]
