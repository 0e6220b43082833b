from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable

from dotenv import load_dotenv


DEFAULT_TARGET_PATTERN = (
    r"Partner|Capital|VC|Investor|C[TEOFMPI]O|Chief\s+\w+\s+Officer|VP|VPE|Director|DIR\s+ENG"
)

# Placeholder shipped in .env.example; treated the same as a missing key
OPENAI_KEY_PLACEHOLDER = "your_openai_api_key_here"


class ConfigurationError(RuntimeError):
    """Raised when a configuration value cannot be used."""


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _env_number(name: str, default: str, cast: Callable[[str], Any]) -> Any:
    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError as exc:
        kind = "an integer" if cast is int else "a number"
        raise ConfigurationError(f"{name} must be {kind}, got {raw!r}") from exc


def _as_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # EnrichLayer people-data API
    enrichlayer_api_token: str | None = None
    enrichlayer_base_url: str = "https://enrichlayer.com"
    search_city: str = "San Francisco"

    # Batching / classification
    batch_size: int = 10
    target_contact_pattern: str = DEFAULT_TARGET_PATTERN

    # Cache
    cache_dir: str = "logs"
    cache_cross_event_lookup: bool = True

    # AI condensation
    openai_api_key: str | None = None
    openai_model: str | None = "gpt-4o-mini"

    # Runtime
    http_timeout_seconds: int = 30
    log_level: str = "INFO"
    run_env: str = "local"

    # Logging/tracing
    llm_trace: bool = False
    llm_log_path: str = "logs/llm_calls.jsonl"

    # Browser automation pacing (seconds)
    automation_min_delay: float = 2.0
    automation_max_delay: float = 5.0
    automation_page_load_seconds: float = 2.0

    @property
    def ai_enabled(self) -> bool:
        key = (self.openai_api_key or "").strip()
        return bool(key) and key != OPENAI_KEY_PLACEHOLDER


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    return Settings(
        enrichlayer_api_token=os.getenv("ENRICHLAYER_API_TOKEN"),
        enrichlayer_base_url=os.getenv("ENRICHLAYER_BASE_URL", "https://enrichlayer.com"),
        search_city=os.getenv("SEARCH_CITY") or "San Francisco",
        batch_size=_env_number("BATCH_SIZE", "10", int),
        target_contact_pattern=os.getenv("TARGET_CONTACT_PATTERN") or DEFAULT_TARGET_PATTERN,
        cache_dir=os.getenv("CACHE_DIR", "logs"),
        cache_cross_event_lookup=_as_bool(os.getenv("CACHE_CROSS_EVENT_LOOKUP"), default=True),
        openai_api_key=os.getenv("OPENAI_API_KEY"),
        openai_model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
        http_timeout_seconds=_env_number("HTTP_TIMEOUT_SECONDS", "30", int),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
        llm_trace=_as_bool(os.getenv("LLM_TRACE")),
        llm_log_path=os.getenv("LLM_LOG_PATH", "logs/llm_calls.jsonl"),
        automation_min_delay=_env_number("AUTOMATION_MIN_DELAY", "2", float),
        automation_max_delay=_env_number("AUTOMATION_MAX_DELAY", "5", float),
        automation_page_load_seconds=_env_number("AUTOMATION_PAGE_LOAD_SECONDS", "2", float),
    )
