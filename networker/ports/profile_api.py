from __future__ import annotations

from typing import Optional, Protocol

from networker.models import PersonProfile, SearchResponse


class ProfileApiError(RuntimeError):
    """Transport or non-2xx failure talking to the people-data provider."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ProfileApiPort(Protocol):
    """People-data provider used by the enricher.

    ``search_person`` and ``fetch_profile`` raise ``ProfileApiError`` on
    transport faults; ``get_credit_balance`` never raises.
    """

    def search_person(self, first_name: str, last_name: str, city: str) -> SearchResponse:
        ...

    def fetch_profile(self, linkedin_profile_url: str) -> PersonProfile:
        ...

    def get_credit_balance(self) -> Optional[float]:
        ...
