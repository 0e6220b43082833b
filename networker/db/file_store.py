"""
Filesystem adapter for the profile cache.

Layout: ``<root>/<namespace>/<key>.json``, one JSON object per record.
Every failure comes back as a ``CacheFault`` value; nothing here raises.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from networker.ports.cache_store import CacheFault, CacheRead


RECORD_SUFFIX = ".json"


class FileProfileStore:
    def __init__(self, root: str | Path):
        self.root = Path(root)

    def _record_path(self, namespace: str, key: str) -> Path:
        return self.root / namespace / f"{key}{RECORD_SUFFIX}"

    def ensure_namespace(self, namespace: str) -> Optional[CacheFault]:
        directory = self.root / namespace
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            return CacheFault(str(directory), f"cannot create directory: {exc}")
        return None

    def read(self, namespace: str, key: str) -> CacheRead:
        path = self._record_path(namespace, key)
        if not path.exists():
            return CacheRead()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            return CacheRead(fault=CacheFault(str(path), f"unreadable record: {exc}"))
        if not isinstance(data, dict):
            return CacheRead(fault=CacheFault(str(path), "record is not a JSON object"))
        return CacheRead(payload=data)

    def write(self, namespace: str, key: str, payload: Dict[str, Any]) -> Optional[CacheFault]:
        path = self._record_path(namespace, key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            return CacheFault(str(path), f"cannot write record: {exc}")
        return None

    def namespaces(self) -> Tuple[List[str], Optional[CacheFault]]:
        if not self.root.is_dir():
            return [], None
        try:
            # os.scandir keeps the filesystem's listing order
            with os.scandir(self.root) as entries:
                names = [entry.name for entry in entries if entry.is_dir()]
        except OSError as exc:
            return [], CacheFault(str(self.root), f"cannot list cache root: {exc}")
        return names, None

    def keys(self, namespace: str) -> Tuple[List[str], Optional[CacheFault]]:
        directory = self.root / namespace
        if not directory.is_dir():
            return [], None
        try:
            with os.scandir(directory) as entries:
                keys = [
                    entry.name[: -len(RECORD_SUFFIX)]
                    for entry in entries
                    if entry.is_file() and entry.name.endswith(RECORD_SUFFIX)
                ]
        except OSError as exc:
            return [], CacheFault(str(directory), f"cannot list namespace: {exc}")
        return keys, None
