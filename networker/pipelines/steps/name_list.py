from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence, Tuple

from networker.config.settings import ConfigurationError
from networker.models import ParsedName
from networker.pipelines.runner import RunContext
from networker.services.name_parser import parse_name_list

logger = logging.getLogger(__name__)


def split_batch(names: Sequence[ParsedName], batch_size: int) -> Tuple[List[ParsedName], List[ParsedName]]:
    """Split into (this run, remainder) at ``batch_size``."""
    if batch_size < 1:
        raise ConfigurationError(f"Batch size must be a positive integer, got {batch_size}")
    return list(names[:batch_size]), list(names[batch_size:])


class ReadNameList:
    """Load and parse the attendee file. Read errors propagate to the caller."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def run(self, ctx: RunContext) -> RunContext:
        content = self.path.read_text(encoding="utf-8")
        ctx.names = parse_name_list(content)
        ctx.meta["source_path"] = str(self.path)
        ctx.meta["names_total"] = len(ctx.names)
        return ctx


class SelectBatch:
    def __init__(self, batch_size: int) -> None:
        self.batch_size = batch_size

    def run(self, ctx: RunContext) -> RunContext:
        ctx.batch, ctx.remainder = split_batch(ctx.names, self.batch_size)
        ctx.meta["batch_size"] = len(ctx.batch)
        ctx.meta["remaining"] = len(ctx.remainder)
        if ctx.remainder:
            logger.info("Processing %s of %s names; %s left for later runs", len(ctx.batch), len(ctx.names), len(ctx.remainder))
        return ctx


class WriteRemainder:
    """Rewrite the attendee file with the unprocessed names (empty when drained)."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def run(self, ctx: RunContext) -> RunContext:
        lines = [parsed.original for parsed in ctx.remainder]
        content = "\n".join(lines) + "\n" if lines else ""
        self.path.write_text(content, encoding="utf-8")
        if lines:
            logger.info("Updated %s with %s remaining names", self.path, len(lines), extra={"step": "batch"})
        else:
            logger.info("All names processed; cleared %s", self.path, extra={"step": "batch", "status": "drained"})
        return ctx
