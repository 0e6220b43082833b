from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Dict, Optional, Tuple

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'networker.services.enricher'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    # Relative defaults (cache dir, LLM trace path) land in tmp_path
    monkeypatch.chdir(tmp_path)
    for var in ("ENRICHLAYER_API_TOKEN", "OPENAI_API_KEY", "BATCH_SIZE", "SEARCH_CITY", "CACHE_DIR", "LLM_TRACE", "RUN_ID"):
        monkeypatch.delenv(var, raising=False)
    from networker.config.settings import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class StubProfileApi:
    """In-process stand-in for the EnrichLayer client.

    ``hits`` maps (first, last) to a profile URL, ``profiles`` maps URL to an
    API profile payload, ``errors`` maps (first, last) to an exception.
    """

    def __init__(
        self,
        hits: Optional[Dict[Tuple[str, str], str]] = None,
        profiles: Optional[Dict[str, dict]] = None,
        errors: Optional[Dict[Tuple[str, str], Exception]] = None,
        balances: Optional[list] = None,
    ):
        self.hits = hits or {}
        self.profiles = profiles or {}
        self.errors = errors or {}
        self.balances = list(balances or [])
        self.search_calls = []
        self.fetch_calls = []

    def search_person(self, first_name, last_name, city):
        from networker.models import SearchHit, SearchResponse

        self.search_calls.append((first_name, last_name, city))
        if (first_name, last_name) in self.errors:
            raise self.errors[(first_name, last_name)]
        url = self.hits.get((first_name, last_name))
        return SearchResponse(results=[SearchHit(linkedin_profile_url=url)] if url else [])

    def fetch_profile(self, linkedin_profile_url):
        from networker.models import PersonProfile

        self.fetch_calls.append(linkedin_profile_url)
        return PersonProfile.model_validate(self.profiles[linkedin_profile_url])

    def get_credit_balance(self):
        if not self.balances:
            return None
        return self.balances.pop(0)


@pytest.fixture
def stub_api_cls():
    return StubProfileApi
