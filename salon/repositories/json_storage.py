"""
Record storage: whole-table JSON arrays, one file per table.

Every call re-reads the table; nothing is cached between calls. ``insert``,
``update`` and ``delete`` serialize their read-modify-write through a
per-table lock, but a caller doing its own ``read`` then ``write`` can still
lose a concurrent change (last writer wins).
"""

from __future__ import annotations

import json
import logging
import threading
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping, Optional

from salon.domain.records import TABLES, iso_timestamp, millis, same_id, utcnow

logger = logging.getLogger(__name__)

Record = dict[str, Any]


class UnknownTableError(KeyError):
    """Raised when an operation names a table the store does not manage."""


class RecordStore(ABC):
    """CRUD over named tables of schema-less records."""

    def __init__(self, tables: Iterable[str] = TABLES, clock: Callable[[], datetime] = utcnow) -> None:
        self.tables = tuple(tables)
        self.clock = clock
        self._locks = {name: threading.RLock() for name in self.tables}

    def _check_table(self, table: str) -> None:
        if table not in self._locks:
            raise UnknownTableError(table)

    @abstractmethod
    def initialize(self) -> None:
        """Make sure every table exists; must not touch populated tables."""

    @abstractmethod
    def read(self, table: str) -> list[Record]:
        """Return the whole table, or an empty list if it cannot be loaded."""

    @abstractmethod
    def write(self, table: str, records: list[Record]) -> None:
        """Replace the whole table."""

    def insert(self, table: str, record: Mapping[str, Any]) -> Record:
        self._check_table(table)
        moment = self.clock()
        created = {**record, "id": millis(moment), "created_at": iso_timestamp(moment)}
        with self._locks[table]:
            data = self.read(table)
            data.append(created)
            self.write(table, data)
        return dict(created)

    def find_by_id(self, table: str, record_id: Any) -> Optional[Record]:
        self._check_table(table)
        data = self.read(table)
        index = self._index_of(data, record_id)
        return None if index is None else data[index]

    def update(self, table: str, record_id: Any, fields: Mapping[str, Any]) -> Optional[Record]:
        self._check_table(table)
        with self._locks[table]:
            data = self.read(table)
            index = self._index_of(data, record_id)
            logger.debug("update table=%s id=%s index=%s size=%d", table, record_id, index, len(data))
            if index is None:
                return None
            data[index] = {**data[index], **fields, "updated_at": iso_timestamp(self.clock())}
            self.write(table, data)
            return dict(data[index])

    def delete(self, table: str, record_id: Any) -> bool:
        self._check_table(table)
        with self._locks[table]:
            data = self.read(table)
            index = self._index_of(data, record_id)
            logger.debug("delete table=%s id=%s index=%s size=%d", table, record_id, index, len(data))
            if index is None:
                return False
            del data[index]
            self.write(table, data)
            return True

    @staticmethod
    def _index_of(data: list[Record], record_id: Any) -> Optional[int]:
        for index, item in enumerate(data):
            if isinstance(item, Mapping) and same_id(item.get("id"), record_id):
                return index
        return None


class JsonFileStore(RecordStore):
    """Tables persisted as ``<data_dir>/<table>.json``, pretty-printed."""

    def __init__(self, data_dir: str | Path, tables: Iterable[str] = TABLES, clock: Callable[[], datetime] = utcnow) -> None:
        super().__init__(tables, clock)
        self.data_dir = Path(data_dir)

    def path_for(self, table: str) -> Path:
        self._check_table(table)
        return self.data_dir / f"{table}.json"

    def initialize(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        for table in self.tables:
            path = self.path_for(table)
            if not path.exists():
                path.write_text("[]", encoding="utf-8")
                logger.info("Created empty table %s", path)

    def read(self, table: str) -> list[Record]:
        path = self.path_for(table)
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read table %s (%s); treating it as empty", table, exc)
            return []
        if not isinstance(data, list):
            logger.warning("Table %s does not hold a JSON array; treating it as empty", table)
            return []
        return data

    def write(self, table: str, records: list[Record]) -> None:
        path = self.path_for(table)
        path.write_text(json.dumps(list(records), ensure_ascii=False, indent=2), encoding="utf-8")
