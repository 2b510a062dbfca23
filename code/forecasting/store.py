"""
store.py

Snapshot repositories. The engine never touches storage; callers inject one
of these (or anything with the same load/save shape) and persist a Snapshot
per user key.

JsonFileRepository layout:
    <root>/<sha1(key)>.json   {"transactions": [...], "balance": ..., "region": ...}
"""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

from .errors import SnapshotError
from .logging_setup import get_logger
from .models import Snapshot

logger = get_logger(__name__)


class SnapshotRepository(Protocol):
    def load(self, key: str) -> Optional[Snapshot]:
        ...

    def save(self, key: str, snapshot: Snapshot) -> None:
        ...


class MemoryRepository:
    """Dict-backed repository; snapshots are stored as plain dicts."""

    def __init__(self) -> None:
        self._data: Dict[str, dict] = {}

    def load(self, key: str) -> Optional[Snapshot]:
        raw = self._data.get(key)
        return Snapshot.from_dict(raw) if raw is not None else None

    def save(self, key: str, snapshot: Snapshot) -> None:
        self._data[key] = snapshot.to_dict()


class JsonFileRepository:
    def __init__(self, root: Union[str, Path]) -> None:
        self.root = Path(root)

    def path_for(self, key: str) -> Path:
        digest = hashlib.sha1(key.encode("utf-8")).hexdigest()
        return self.root / f"{digest}.json"

    def load(self, key: str) -> Optional[Snapshot]:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise SnapshotError(f"Could not read snapshot {path.name}: {exc}") from exc
        if not isinstance(data, dict):
            raise SnapshotError(f"Snapshot {path.name} is not a JSON object")
        try:
            return Snapshot.from_dict(data)
        except (AttributeError, TypeError, ValueError) as exc:
            raise SnapshotError(f"Snapshot {path.name} has malformed fields: {exc}") from exc

    def save(self, key: str, snapshot: Snapshot) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        path = self.path_for(key)
        path.write_text(json.dumps(snapshot.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8")
        logger.debug("Saved snapshot (%d transactions) to %s", len(snapshot.transactions), path)
