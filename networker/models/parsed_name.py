from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ParsedName(BaseModel):
    """One line of the attendee list. First/last name are set only when valid."""

    original: str
    first_name: str | None = None
    last_name: str | None = None
    is_valid: bool = False

    model_config = ConfigDict(frozen=True)
