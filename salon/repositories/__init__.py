"""
Persistence adapters.

Record tables live behind the RecordStore interface (JSON files on disk, or
memory for tests); admin sessions live in SQL. Services depend on these
adapters rather than touching files or sessions directly.
"""

from .json_storage import JsonFileStore, RecordStore, UnknownTableError
from .memory_storage import MemoryStore

__all__ = ["JsonFileStore", "MemoryStore", "RecordStore", "UnknownTableError"]
