from __future__ import annotations

import logging
import time
from typing import Iterable, List, Optional

from networker.config.settings import Settings
from networker.db.repos.profile_cache import ProfileCache
from networker.models import ParsedName, PersonProfile, ProfileRecord
from networker.ports.llm import SummaryCondenserPort
from networker.ports.profile_api import ProfileApiError, ProfileApiPort
from networker.services.classifier import TargetContactClassifier

logger = logging.getLogger(__name__)


class ProfileEnricher:
    """Turns a first/last name into a ProfileRecord.

    Per name: cache check, search, profile fetch, current-role extraction,
    target classification, optional summary condensation, cache write.
    Confirmed "Not found" results are cached; transport failures are not, so
    they are retried on the next run.
    """

    def __init__(
        self,
        api: ProfileApiPort,
        cache: ProfileCache,
        classifier: Optional[TargetContactClassifier] = None,
        condenser: Optional[SummaryCondenserPort] = None,
        search_city: str = "San Francisco",
    ) -> None:
        self.api = api
        self.cache = cache
        self.classifier = classifier or TargetContactClassifier()
        self.condenser = condenser
        self.search_city = search_city

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        api: ProfileApiPort,
        cache: ProfileCache,
        condenser: Optional[SummaryCondenserPort] = None,
    ) -> "ProfileEnricher":
        return cls(
            api=api,
            cache=cache,
            classifier=TargetContactClassifier(settings.target_contact_pattern),
            condenser=condenser,
            search_city=settings.search_city,
        )

    def lookup_profile(self, first_name: str, last_name: str, event: str) -> ProfileRecord:
        cached = self.cache.get(first_name, last_name, event)
        if cached is not None:
            logger.info("[CACHED] %s %s", first_name, last_name, extra={"step": "cache", "status": "hit"})
            return cached

        display_name = f"{first_name} {last_name}"
        t0 = time.time()
        try:
            logger.info(
                "Looking up: %s (%s)...", display_name, self.search_city,
                extra={"step": "search", "provider": "enrichlayer"},
            )
            search = self.api.search_person(first_name, last_name, self.search_city)
            profile_url = search.first_profile_url
            if not profile_url:
                not_found = ProfileRecord.not_found(display_name)
                # Cache confirmed misses to avoid paying for them again
                self.cache.put(first_name, last_name, not_found, event)
                logger.info("Not found: %s", display_name, extra={"step": "search", "status": "not_found"})
                return not_found

            profile = self.api.fetch_profile(profile_url)
            record = self._build_record(first_name, last_name, profile_url, profile)
        except ProfileApiError as exc:
            logger.warning(
                "Lookup failed for %s: %s", display_name, exc,
                extra={"step": "fetch", "status": "error", "error": exc.status_code or "-"},
            )
            return ProfileRecord.failed(display_name, str(exc))
        except Exception as exc:
            logger.exception("Unexpected error looking up %s", display_name, extra={"status": "error"})
            return ProfileRecord.failed(display_name, str(exc) or exc.__class__.__name__)

        self.cache.put(first_name, last_name, record, event)
        logger.info(
            "Enriched %s", record.name,
            extra={"step": "fetch", "status": "ok", "duration_ms": int((time.time() - t0) * 1000)},
        )
        return record

    def _build_record(self, first_name: str, last_name: str, profile_url: str, profile: PersonProfile) -> ProfileRecord:
        title = company = location = None
        current = profile.current_experience()
        if current is not None:
            title = current.title
            company = current.company
            location = current.location

        title = title or profile.occupation or "Not available"
        is_target = self.classifier.is_target(title, company)

        condensed = None
        if is_target and profile.summary and self.condenser is not None:
            logger.info("Target contact - condensing summary for %s", first_name, extra={"step": "condense", "provider": "openai"})
            condensed = self.condenser.condense(profile.summary)
            if condensed:
                logger.info("Condensed to: %r", condensed, extra={"step": "condense", "status": "ok"})
            else:
                logger.info("Condensation skipped or failed", extra={"step": "condense", "status": "skipped"})

        return ProfileRecord(
            name=profile.full_name or f"{first_name} {last_name}",
            first_name=first_name,
            current_title=title,
            current_company=company,
            location=location or profile.location_str,
            linkedin_url=profile_url,
            is_target_contact=is_target,
            summary=profile.summary,
            condensed_summary=condensed,
        )

    def lookup_profiles(self, names: Iterable[ParsedName], event: str) -> List[ProfileRecord]:
        """Look up every valid name, one at a time, in input order."""
        results: List[ProfileRecord] = []
        for parsed in names:
            if not (parsed.is_valid and parsed.first_name and parsed.last_name):
                logger.info('Skipping: "%s" (needs first and last name)', parsed.original, extra={"status": "skipped"})
                continue
            results.append(self.lookup_profile(parsed.first_name, parsed.last_name, event))
        return results
