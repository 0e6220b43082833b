from __future__ import annotations

import re
from typing import Optional

from networker.config.settings import DEFAULT_TARGET_PATTERN, ConfigurationError


class TargetContactClassifier:
    """Flags VCs, partners, investors and senior executives by title/company text."""

    def __init__(self, pattern: str = DEFAULT_TARGET_PATTERN):
        try:
            self.pattern = re.compile(pattern, re.IGNORECASE)
        except re.error as exc:
            raise ConfigurationError(f"Invalid TARGET_CONTACT_PATTERN {pattern!r}: {exc}") from exc

    def is_target(self, title: Optional[str], company: Optional[str]) -> bool:
        combined = f"{title or ''} {company or ''}"
        return self.pattern.search(combined) is not None
