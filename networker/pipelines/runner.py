from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from networker.models import ParsedName, ProfileRecord
from networker.utils.logging_setup import init_logging


@dataclass
class RunContext:
    event: Optional[str] = None
    names: List[ParsedName] = field(default_factory=list)
    batch: List[ParsedName] = field(default_factory=list)
    remainder: List[ParsedName] = field(default_factory=list)
    profiles: List[ProfileRecord] = field(default_factory=list)
    meta: dict = field(default_factory=dict)


class Step(Protocol):
    def run(self, ctx: RunContext) -> RunContext:
        ...


class Pipeline:
    def __init__(self, steps: List[Step]):
        self.steps = steps

    def run(self, ctx: RunContext) -> RunContext:
        # Make logging idempotent for any direct runner use
        init_logging()
        for step in self.steps:
            ctx = step.run(ctx)
        return ctx
