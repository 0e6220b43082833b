from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


NOT_FOUND = "Not found"


class ProfileRecord(BaseModel):
    """Outcome of one name lookup: an enriched profile or an error sentinel.

    Serialized with camelCase aliases; that is the shape of the on-disk cache
    files (plus a ``cachedAt`` stamp added by the cache).
    """

    name: str
    first_name: str | None = Field(default=None, alias="firstName")
    current_title: str | None = Field(default=None, alias="currentTitle")
    current_company: str | None = Field(default=None, alias="currentCompany")
    location: str | None = None
    linkedin_url: str | None = Field(default=None, alias="linkedinUrl")
    is_target_contact: bool | None = Field(default=None, alias="isTargetContact")
    summary: str | None = None
    condensed_summary: str | None = Field(default=None, alias="condensedSummary")
    error: str | None = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @classmethod
    def not_found(cls, name: str) -> "ProfileRecord":
        return cls(name=name, error=NOT_FOUND)

    @classmethod
    def failed(cls, name: str, message: str) -> "ProfileRecord":
        return cls(name=name, error=message)

    @property
    def is_error(self) -> bool:
        return bool(self.error)

    @property
    def is_not_found(self) -> bool:
        return self.error == NOT_FOUND

    def to_cache_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
