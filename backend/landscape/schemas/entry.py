"""Entry schemas."""
from pydantic import BaseModel, Field, field_validator
from typing import Optional, Union

DEFAULT_SCORE = 3


class FiveCriteria(BaseModel):
    """
    Landscape-intelligence scores, each 0-5.

    Unparseable scores fall back to 3; out-of-range ones are clamped.
    """
    closure: int = Field(DEFAULT_SCORE, ge=0, le=5)
    metabolic: int = Field(DEFAULT_SCORE, ge=0, le=5)
    timescale: int = Field(DEFAULT_SCORE, ge=0, le=5)
    pattern: int = Field(DEFAULT_SCORE, ge=0, le=5)
    recognition: int = Field(DEFAULT_SCORE, ge=0, le=5)

    @field_validator("closure", "metabolic", "timescale", "pattern", "recognition", mode="before")
    @classmethod
    def _lenient_score(cls, value):
        try:
            score = int(float(value))
        except (TypeError, ValueError, OverflowError):
            return DEFAULT_SCORE
        return min(max(score, 0), 5)


class EntryBase(BaseModel):
    year: str = ""  # display string, e.g. "4.5 Ga" or "1859"
    title: str
    description: str = ""
    location: str = ""
    citation: str = ""

    category: str
    source: str
    sphere_interface: str = Field("", alias="sphereInterface")
    element_function: str = Field("", alias="elementFunction")
    indeterminacy: str = ""
    temporal_phase: str = Field("", alias="temporalPhase")

    is_anchor: bool = Field(False, alias="isAnchor")
    keywords: list[str] = []
    five_criteria: FiveCriteria = Field(default_factory=FiveCriteria, alias="fiveCriteria")

    @field_validator("year", mode="before")
    @classmethod
    def _year_as_text(cls, value):
        return "" if value is None else str(value)

    class Config:
        populate_by_name = True


class Entry(EntryBase):
    """A catalogued record. Negative sort keys are years before present."""
    id: int
    sort_key: float = Field(alias="sortKey")
    connections: list[int] = []

    def search_text(self) -> str:
        """Lowercased haystack for free-text search."""
        return " ".join([
            self.title,
            self.description,
            " ".join(self.keywords),
            self.location,
        ]).lower()


class EntryCreate(BaseModel):
    """
    Record submitted through the add-entry form.

    `keywords` arrives as comma-separated text and `sortKey` may be
    missing or unparseable; the Entry Store resolves both on append.
    """
    year: str = ""
    sort_key: Optional[Union[float, str]] = Field(None, alias="sortKey")
    location: str = ""
    title: str = ""
    description: str = ""
    keywords: str = ""
    citation: str = ""
    category: str
    sphere_interface: str = Field("", alias="sphereInterface")
    element_function: str = Field("", alias="elementFunction")
    indeterminacy: str = ""
    temporal_phase: str = Field("", alias="temporalPhase")
    five_criteria: FiveCriteria = Field(default_factory=FiveCriteria, alias="fiveCriteria")
    is_anchor: bool = Field(False, alias="isAnchor")

    @field_validator("year", mode="before")
    @classmethod
    def _year_as_text(cls, value):
        return "" if value is None else str(value)

    class Config:
        populate_by_name = True

