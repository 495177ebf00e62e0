"""In-process RecordStore used by tests and throwaway runs."""

from __future__ import annotations

import copy
from datetime import datetime
from typing import Any, Callable, Iterable

from salon.domain.records import TABLES, utcnow
from salon.repositories.json_storage import Record, RecordStore


class MemoryStore(RecordStore):
    """Keeps each table as a private list; reads and writes hand out copies."""

    def __init__(self, tables: Iterable[str] = TABLES, clock: Callable[[], datetime] = utcnow) -> None:
        super().__init__(tables, clock)
        self._tables: dict[str, list[Record]] = {}

    def initialize(self) -> None:
        for table in self.tables:
            self._tables.setdefault(table, [])

    def read(self, table: str) -> list[Record]:
        self._check_table(table)
        return copy.deepcopy(self._tables.get(table, []))

    def write(self, table: str, records: list[Any]) -> None:
        self._check_table(table)
        self._tables[table] = copy.deepcopy(list(records))
