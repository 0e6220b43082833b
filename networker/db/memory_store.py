from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional, Tuple

from networker.ports.cache_store import CacheFault, CacheRead


class InMemoryProfileStore:
    """Dict-backed store with the same contract as ``FileProfileStore``.

    Namespaces are listed in creation order.
    """

    def __init__(self) -> None:
        self._data: Dict[str, Dict[str, Dict[str, Any]]] = {}

    def ensure_namespace(self, namespace: str) -> Optional[CacheFault]:
        self._data.setdefault(namespace, {})
        return None

    def read(self, namespace: str, key: str) -> CacheRead:
        payload = self._data.get(namespace, {}).get(key)
        if payload is None:
            return CacheRead()
        return CacheRead(payload=copy.deepcopy(payload))

    def write(self, namespace: str, key: str, payload: Dict[str, Any]) -> Optional[CacheFault]:
        self._data.setdefault(namespace, {})[key] = copy.deepcopy(payload)
        return None

    def namespaces(self) -> Tuple[List[str], Optional[CacheFault]]:
        return list(self._data), None

    def keys(self, namespace: str) -> Tuple[List[str], Optional[CacheFault]]:
        return list(self._data.get(namespace, {})), None
