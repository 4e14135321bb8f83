# teambuilder/db/store.py
from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

from teambuilder.core.errors import Conflict

logger = logging.getLogger(__name__)

Record = Dict[str, Any]

KEY_FIELD = "teamName"


class RecordStore(Protocol):
    """Keyed access to account records ({teamName, passwordHash, teamPlayers?})."""

    def get(self, key: str) -> Optional[Record]: ...

    def add(self, key: str, value: Record) -> None: ...

    def put(self, key: str, value: Record) -> None: ...

    def delete(self, key: str) -> bool: ...

    def all(self) -> List[Record]: ...


class JsonFileRecordStore:
    """
    The whole user list lives in one JSON array on disk. Every call reads
    the file; every mutation rewrites it in full. A missing file means no
    accounts yet.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        # serialises read-modify-write within this process only
        self._lock = threading.Lock()

    def _read(self) -> List[Record]:
        if not self.path.exists():
            return []
        with open(self.path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"{self.path} must contain a JSON array of account records")
        return data

    def _write(self, records: List[Record]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".users-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2)
            os.replace(tmp, self.path)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise

    def get(self, key: str) -> Optional[Record]:
        for rec in self._read():
            if rec.get(KEY_FIELD) == key:
                return dict(rec)
        return None

    def add(self, key: str, value: Record) -> None:
        """Insert a new record; Conflict if the key already exists."""
        rec = {**value, KEY_FIELD: key}
        with self._lock:
            records = self._read()
            if any(r.get(KEY_FIELD) == key for r in records):
                raise Conflict("Team name already exists")
            records.append(rec)
            self._write(records)
        logger.debug("added record %r to %s (%d total)", key, self.path, len(records))

    def put(self, key: str, value: Record) -> None:
        rec = {**value, KEY_FIELD: key}
        with self._lock:
            records = self._read()
            for i, existing in enumerate(records):
                if existing.get(KEY_FIELD) == key:
                    records[i] = rec
                    break
            else:
                records.append(rec)
            self._write(records)
        logger.debug("wrote record %r to %s (%d total)", key, self.path, len(records))

    def delete(self, key: str) -> bool:
        with self._lock:
            records = self._read()
            kept = [r for r in records if r.get(KEY_FIELD) != key]
            if len(kept) == len(records):
                return False
            self._write(kept)
        return True

    def all(self) -> List[Record]:
        return [dict(r) for r in self._read()]
