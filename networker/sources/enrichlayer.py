"""
EnrichLayer people-data API integration: person search, profile detail and
credit balance.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests
from pydantic import ValidationError

from networker.config.settings import Settings, get_settings
from networker.models import CreditBalance, PersonProfile, SearchResponse
from networker.ports.profile_api import ProfileApiError

logger = logging.getLogger(__name__)

SEARCH_PATH = "/api/v2/search/person"
PROFILE_PATH = "/api/v2/profile"
CREDIT_BALANCE_PATH = "/api/v2/credit-balance"


class EnrichLayerClient:
    """Thin requests wrapper returning typed payloads.

    Every call costs credits, so there is no retry here; a failed lookup is
    retried on the next run instead.
    """

    provider = "enrichlayer"

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or get_settings()
        self.api_token = self.settings.enrichlayer_api_token
        self.base_url = self.settings.enrichlayer_base_url.rstrip("/")
        self.session = session or requests.Session()

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None, headers: Optional[Dict[str, str]] = None) -> Any:
        if not self.api_token:
            raise ProfileApiError("ENRICHLAYER_API_TOKEN not set in .env file")

        request_headers = {"Authorization": f"Bearer {self.api_token}"}
        request_headers.update(headers or {})
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(
                url,
                params=params,
                headers=request_headers,
                timeout=self.settings.http_timeout_seconds,
            )
        except requests.exceptions.RequestException as exc:
            raise ProfileApiError(f"API error: {exc}") from exc

        if not response.ok:
            reason = response.reason or "request failed"
            raise ProfileApiError(f"API error: {response.status_code} - {reason}", status_code=response.status_code)
        try:
            return response.json()
        except ValueError as exc:
            raise ProfileApiError(f"API error: invalid JSON from {path}") from exc

    def search_person(self, first_name: str, last_name: str, city: str) -> SearchResponse:
        params = {
            "first_name": first_name,
            "last_name": last_name,
            # The API matches the city as a quoted phrase
            "city": f'"{city}"',
            "page_size": 1,
        }
        data = self._get(SEARCH_PATH, params=params, headers={"Accept": "application/json"})
        try:
            return SearchResponse.model_validate(data)
        except ValidationError as exc:
            raise ProfileApiError(f"API error: unexpected search payload ({exc.error_count()} errors)") from exc

    def fetch_profile(self, linkedin_profile_url: str) -> PersonProfile:
        data = self._get(
            PROFILE_PATH,
            params={"linkedin_profile_url": linkedin_profile_url},
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        try:
            return PersonProfile.model_validate(data)
        except ValidationError as exc:
            raise ProfileApiError(f"API error: unexpected profile payload ({exc.error_count()} errors)") from exc

    def get_credit_balance(self) -> Optional[float]:
        """Current credit balance, or None when it cannot be fetched."""
        if not self.api_token:
            logger.error("ENRICHLAYER_API_TOKEN not set in .env file", extra={"provider": self.provider})
            return None
        try:
            data = self._get(CREDIT_BALANCE_PATH)
            return CreditBalance.model_validate(data).credit_balance
        except ProfileApiError as exc:
            logger.error("Failed to fetch credit balance: %s", exc, extra={"provider": self.provider, "status": "error"})
        except ValidationError as exc:
            logger.error("Failed to fetch credit balance: unexpected payload (%s)", exc.error_count(), extra={"provider": self.provider})
        return None
