from __future__ import annotations

import logging

from networker.db.repos.profile_cache import ProfileCache
from networker.pipelines.runner import RunContext
from networker.services.enricher import ProfileEnricher

logger = logging.getLogger(__name__)


class EnrichBatch:
    def __init__(self, enricher: ProfileEnricher, event: str) -> None:
        self.enricher = enricher
        self.event = event

    def run(self, ctx: RunContext) -> RunContext:
        ctx.profiles = self.enricher.lookup_profiles(ctx.batch, self.event)
        ctx.meta["profiles_enriched"] = len(ctx.profiles)
        ctx.meta["profiles_failed"] = sum(1 for p in ctx.profiles if p.is_error and not p.is_not_found)
        return ctx


class LoadCachedTargets:
    """Re-use previously enriched target contacts when there are no new names."""

    def __init__(self, cache: ProfileCache, event: str) -> None:
        self.cache = cache
        self.event = event

    def run(self, ctx: RunContext) -> RunContext:
        cached = self.cache.load_all(self.event)
        ctx.profiles = [
            p for p in cached
            if p.is_target_contact and not p.error and p.linkedin_url
        ]
        ctx.meta["cached_targets"] = len(ctx.profiles)
        logger.info("Loaded %s cached target contacts for %s", len(ctx.profiles), self.event, extra={"step": "cache"})
        return ctx
