from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from networker.config.settings import ConfigurationError
from networker.db.repos.profile_cache import ProfileCache
from networker.models import ParsedName
from networker.pipelines.runner import Pipeline, RunContext
from networker.pipelines.steps import (
    EnrichBatch,
    LoadCachedTargets,
    ReadNameList,
    SelectBatch,
    WriteRemainder,
)
from networker.services.enricher import ProfileEnricher

logger = logging.getLogger(__name__)


class BatchCoordinator:
    """Pages through an attendee file, ``batch_size`` names per run.

    The file doubles as the work queue: after each run it holds only the
    names that were not processed yet, and is empty once drained.
    """

    def __init__(self, enricher: ProfileEnricher, cache: ProfileCache, batch_size: int = 10) -> None:
        if batch_size < 1:
            raise ConfigurationError(f"Batch size must be a positive integer, got {batch_size}")
        self.enricher = enricher
        self.cache = cache
        self.batch_size = batch_size

    def run(self, source_path: str | Path, event: str, names: Optional[List[ParsedName]] = None) -> RunContext:
        ctx = RunContext(event=event)
        if names is None:
            ctx = Pipeline([ReadNameList(source_path)]).run(ctx)
        else:
            ctx.names = list(names)
            ctx.meta["names_total"] = len(ctx.names)

        if not ctx.names:
            logger.info("No new names to process; using cached target contacts", extra={"step": "batch"})
            ctx.meta["mode"] = "cached"
            return Pipeline([LoadCachedTargets(self.cache, event)]).run(ctx)

        ctx.meta["mode"] = "enrich"
        return Pipeline([
            SelectBatch(self.batch_size),
            EnrichBatch(self.enricher, event),
            WriteRemainder(source_path),
        ]).run(ctx)
