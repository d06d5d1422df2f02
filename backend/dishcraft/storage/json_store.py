"""
JSON-file record store: data/<name>.json holding {"version": ..., "<name>": [records]}.
Optionally enforces a case-sensitive unique name key like a database unique index.
"""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional

from dishcraft.errors import DuplicateRecordError, StoreError
from .base import Record, RecordStore

logger = logging.getLogger(__name__)

_FORMAT_VERSION = "1.0"


class JsonRecordStore(RecordStore):
    """
    File-backed collection. Each insert replaces the whole file atomically, so a bulk insert
    either lands completely or not at all.
    """

    def __init__(self, path: Path, name: str, unique_name: bool = False):
        self._path = Path(path)
        self.name = name
        self._unique_name = unique_name
        self._records: Optional[List[Record]] = None

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> List[Record]:
        if self._records is not None:
            return self._records
        if not self._path.exists():
            self._records = []
            return self._records
        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StoreError(f"Failed to load {self.name} store {self._path}: {e}") from e
        records = data.get(self.name, []) if isinstance(data, dict) else []
        self._records = list(records)
        logger.info("STORE loaded %s records=%d path=%s", self.name, len(self._records), self._path)
        return self._records

    def _save(self, records: List[Record]) -> None:
        # write a sibling temp file, then swap it in; a failed write leaves the old file intact
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent)
        except OSError as e:
            raise StoreError(f"Failed to write {self.name} store {self._path}: {e}") from e
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump({"version": _FORMAT_VERSION, self.name: records}, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self._path)
        except OSError as e:
            raise StoreError(f"Failed to write {self.name} store {self._path}: {e}") from e
        finally:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)

    def find_all(self) -> List[Record]:
        return [dict(r) for r in self._load()]

    def insert_many(self, records: List[Record]) -> List[Record]:
        existing = self._load()
        new_records = [dict(r) for r in records]
        if self._unique_name:
            taken = {r.get("name") for r in existing}
            dupes = []
            for r in new_records:
                if r.get("name") in taken:
                    dupes.append(r.get("name"))
                taken.add(r.get("name"))
            if dupes:
                raise DuplicateRecordError(dupes)
        combined = existing + new_records
        self._save(combined)
        self._records = combined
        logger.info("STORE inserted %s records=%d total=%d", self.name, len(new_records), len(combined))
        return [dict(r) for r in new_records]

    def count(self) -> int:
        return len(self._load())

    def close(self) -> None:
        self._records = None
