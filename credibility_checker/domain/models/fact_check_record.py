"""Domain models for fact-check records and their verdicts."""

from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

DEFAULT_SOURCE_NAME = "Unknown Source"
FALLBACK_SOURCE_NAME = "Fallback Verification System"


class Rating(str, Enum):
    """Categorical outcome of a fact check."""

    TRUE = "True"
    FALSE = "False"
    MIXED = "Mixed"
    UNKNOWN = "Unknown"
    ERROR = "Error"

    @classmethod
    def from_label(cls, label: Optional[str]) -> "Rating":
        """Map a free-text label onto a rating, defaulting to UNKNOWN."""
        try:
            return cls(label)
        except ValueError:
            return cls.UNKNOWN


class SourceRecord(BaseModel):
    """One publisher's review of a claim."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default=DEFAULT_SOURCE_NAME, description="Publisher name")
    url: Optional[str] = Field(None, description="Link to the published review")
    date: Optional[str] = Field(None, description="ISO date of the review")
    conclusion: Optional[str] = Field(None, description="Publisher's textual rating")


class Verdict(BaseModel):
    """Normalized summary of what the upstream service said about a query.

    ``primary_source_name``, ``review_date`` and ``source_url`` predate
    multi-source support. When they are all left unset and ``sources`` is not
    empty, they are filled from the first source so both views agree.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    claim_text: Optional[str] = Field(None, description="Restated claim, if supplied")
    claimant: Optional[str] = Field(None, description="Who made the claim")
    rating: Rating = Field(..., description="Categorical rating")
    rating_label: Optional[str] = Field(
        None,
        description="Raw upstream label when it could not be classified",
    )
    confidence: float = Field(..., ge=0.0, le=1.0, description="Confidence in [0, 1]")
    sources: Tuple[SourceRecord, ...] = Field(default=(), description="Reviews in upstream order")

    # Legacy single-source fields
    primary_source_name: Optional[str] = None
    review_date: Optional[str] = None
    source_url: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _mirror_primary_source(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        sources = data.get("sources") or ()
        legacy_fields = (
            ("primary_source_name", "primarySourceName"),
            ("review_date", "reviewDate"),
            ("source_url", "sourceUrl"),
        )
        if not sources or any(
            data.get(name) is not None or data.get(alias) is not None
            for name, alias in legacy_fields
        ):
            return data

        first = sources[0]
        if isinstance(first, SourceRecord):
            first = first.model_dump()
        elif not isinstance(first, dict):
            return data

        data = dict(data)
        data["primary_source_name"] = first.get("name") or DEFAULT_SOURCE_NAME
        data["review_date"] = first.get("date")
        data["source_url"] = first.get("url")
        return data


class FactCheckDraft(BaseModel):
    """A fact-check result that has not been stored yet."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    query: str = Field(..., description="Original user input")
    is_url_query: bool = Field(..., description="Whether the input parsed as an absolute URL")
    verdict: Verdict


class FactCheckRecord(FactCheckDraft):
    """A stored fact-check result."""

    id: str = Field(..., description="Unique record identifier")
    created_at: int = Field(..., description="Creation time in milliseconds since epoch")

    @property
    def is_fallback(self) -> bool:
        """Whether the record came from the simulated fallback and is not authoritative."""
        return self.verdict.primary_source_name == FALLBACK_SOURCE_NAME
