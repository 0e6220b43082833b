from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _none_as_empty(value: Any) -> Any:
    # The API sends null instead of [] for empty lists
    return [] if value is None else value


class DateParts(BaseModel):
    day: int | None = None
    month: int | None = None
    year: int | None = None

    model_config = ConfigDict(extra="ignore")


class SearchHit(BaseModel):
    linkedin_profile_url: str | None = None

    model_config = ConfigDict(extra="ignore")


class SearchResponse(BaseModel):
    """API payload: /api/v2/search/person."""

    results: list[SearchHit] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    @field_validator("results", mode="before")
    @classmethod
    def results_none_as_empty(cls, value: Any) -> Any:
        return _none_as_empty(value)

    @property
    def first_profile_url(self) -> str | None:
        if not self.results:
            return None
        return self.results[0].linkedin_profile_url or None


class Experience(BaseModel):
    title: str | None = None
    company: str | None = None
    location: str | None = None
    starts_at: DateParts | None = None
    ends_at: DateParts | None = None

    model_config = ConfigDict(extra="ignore")

    @property
    def is_ongoing(self) -> bool:
        return self.ends_at is None


class PersonProfile(BaseModel):
    """API payload: /api/v2/profile. Most fields are optional in practice."""

    first_name: str | None = None
    last_name: str | None = None
    full_name: str | None = None
    occupation: str | None = None
    location_str: str | None = None
    summary: str | None = None
    experiences: list[Experience] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    @field_validator("experiences", mode="before")
    @classmethod
    def experiences_none_as_empty(cls, value: Any) -> Any:
        return _none_as_empty(value)

    def current_experience(self) -> Experience | None:
        """Ongoing position if any, else the first entry in API order."""
        if not self.experiences:
            return None
        for exp in self.experiences:
            if exp.is_ongoing:
                return exp
        return self.experiences[0]


class CreditBalance(BaseModel):
    credit_balance: float

    model_config = ConfigDict(extra="ignore")
