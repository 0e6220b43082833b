from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from networker.models import ProfileRecord
from networker.ports.cache_store import ProfileStorePort

logger = logging.getLogger(__name__)

CACHED_AT_FIELD = "cachedAt"

_INVALID_CHARS = re.compile(r"[^a-z0-9-]")
_DASH_RUNS = re.compile(r"-+")


def _normalize(text: str) -> str:
    return _DASH_RUNS.sub("-", _INVALID_CHARS.sub("-", text.lower()))


def get_cache_key(first_name: str, last_name: str) -> str:
    """Case/space-insensitive identity key, e.g. ``("John", "Doe")`` -> ``"john-doe"``."""
    return _normalize(f"{first_name}-{last_name}")


def normalize_event(event_name: str) -> str:
    return _normalize(event_name)


class ProfileCache:
    """Event-scoped profile cache with a cross-event read fallback.

    Never raises: storage faults and corrupt records are logged and reported
    as a cache miss.
    """

    def __init__(self, store: ProfileStorePort, cross_event_lookup: bool = True):
        self.store = store
        self.cross_event_lookup = cross_event_lookup

    @staticmethod
    def _to_record(payload: Dict[str, Any]) -> ProfileRecord:
        data = dict(payload)
        data.pop(CACHED_AT_FIELD, None)
        return ProfileRecord.model_validate(data)

    def get(self, first_name: str, last_name: str, event: str) -> Optional[ProfileRecord]:
        namespace = normalize_event(event)
        key = get_cache_key(first_name, last_name)

        fault = self.store.ensure_namespace(namespace)
        if fault:
            logger.warning("Cache unavailable for event %s: %s", event, fault, extra={"step": "cache", "status": "fault"})
            return None

        result = self.store.read(namespace, key)
        if result.fault:
            logger.warning(
                "Could not read cache for %s %s: %s", first_name, last_name, result.fault,
                extra={"step": "cache", "status": "fault"},
            )
            return None
        if result.found:
            try:
                return self._to_record(result.payload)
            except ValidationError as exc:
                logger.warning(
                    "Could not read cache for %s %s: %s", first_name, last_name, exc,
                    extra={"step": "cache", "status": "fault"},
                )
                return None

        if not self.cross_event_lookup:
            return None
        return self._find_in_other_events(namespace, key)

    def _find_in_other_events(self, namespace: str, key: str) -> Optional[ProfileRecord]:
        namespaces, fault = self.store.namespaces()
        if fault:
            logger.warning("Cross-event cache scan failed: %s", fault, extra={"step": "cache", "status": "fault"})
            return None

        hits: List[Tuple[str, ProfileRecord]] = []
        for other in namespaces:
            if other == namespace:
                continue
            result = self.store.read(other, key)
            if not result.found:
                if result.fault:
                    logger.debug("Skipping unreadable cache entry: %s", result.fault)
                continue
            try:
                hits.append((other, self._to_record(result.payload)))
            except ValidationError as exc:
                logger.debug("Skipping invalid cache entry %s/%s: %s", other, key, exc)

        if not hits:
            return None
        chosen_namespace, chosen = hits[0]
        divergent = [ns for ns, record in hits[1:] if record != chosen]
        if divergent:
            # Listing order is filesystem-dependent, so the winner is arbitrary
            logger.warning(
                "Cache key %s found with differing data in events %s; using %s",
                key, [ns for ns, _ in hits], chosen_namespace,
                extra={"step": "cache", "status": "ambiguous"},
            )
        logger.debug("Cross-event cache hit for %s in %s", key, chosen_namespace)
        return chosen

    def put(self, first_name: str, last_name: str, profile: ProfileRecord, event: str) -> None:
        namespace = normalize_event(event)
        payload = profile.to_cache_payload()
        payload[CACHED_AT_FIELD] = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
        fault = self.store.write(namespace, get_cache_key(first_name, last_name), payload)
        if fault:
            logger.warning(
                "Could not save cache for %s %s: %s", first_name, last_name, fault,
                extra={"step": "cache", "status": "fault"},
            )

    def load_all(self, event: str) -> List[ProfileRecord]:
        namespace = normalize_event(event)
        keys, fault = self.store.keys(namespace)
        if fault:
            logger.warning("Could not list cache for event %s: %s", event, fault, extra={"step": "cache", "status": "fault"})
            return []

        records: List[ProfileRecord] = []
        for key in keys:
            result = self.store.read(namespace, key)
            if not result.found:
                if result.fault:
                    logger.warning("Skipping unreadable cache entry: %s", result.fault)
                continue
            try:
                records.append(self._to_record(result.payload))
            except ValidationError as exc:
                logger.warning("Skipping invalid cache entry %s/%s: %s", namespace, key, exc)
        return records
