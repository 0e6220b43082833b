from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol, Tuple


@dataclass(frozen=True)
class CacheFault:
    """A storage failure, reported as a value instead of raised."""

    location: str
    reason: str

    def __str__(self) -> str:
        return f"{self.location}: {self.reason}"


@dataclass(frozen=True)
class CacheRead:
    """Result of reading one record.

    Exactly one of three shapes: found (``payload``), missing (both ``None``),
    or faulted (``fault``).
    """

    payload: Optional[Dict[str, Any]] = None
    fault: Optional[CacheFault] = None

    @property
    def found(self) -> bool:
        return self.payload is not None

    @property
    def missing(self) -> bool:
        return self.payload is None and self.fault is None


class ProfileStorePort(Protocol):
    def ensure_namespace(self, namespace: str) -> Optional[CacheFault]:
        ...

    def read(self, namespace: str, key: str) -> CacheRead:
        ...

    def write(self, namespace: str, key: str, payload: Dict[str, Any]) -> Optional[CacheFault]:
        ...

    def namespaces(self) -> Tuple[List[str], Optional[CacheFault]]:
        """All namespaces in storage listing order."""
        ...

    def keys(self, namespace: str) -> Tuple[List[str], Optional[CacheFault]]:
        ...
