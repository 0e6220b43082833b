from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class EventInfo(BaseModel):
    event_name: str
    file_name: str

    model_config = ConfigDict(frozen=True)
