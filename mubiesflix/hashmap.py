"""Fixed-size hash map with separate chaining; each key keeps every value put under it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

MAX_TABLE = 11


@dataclass
class HashEntry:
    """A key and the values stored under it, in insertion order."""

    key: int
    values: list = field(default_factory=list)

    def add_value(self, value: Any) -> None:
        """Append a value to this entry."""
        self.values.append(value)

    def __str__(self) -> str:
        return f"Clau: {self.key} | Valors: " + "".join(f"{value} " for value in self.values)


class HashMap:
    """Hash table of integer keys; a key's cell is the key modulo the table size."""

    def __init__(self, table_size: int = MAX_TABLE) -> None:
        if table_size < 1:
            raise ValueError("table_size must be at least 1")
        self.table_size = table_size
        self._table: list[list[HashEntry]] = [[] for _ in range(table_size)]
        self._size = 0
        self._cells = 0
        self._max_collision = 0

    def hash_code(self, key: int) -> int:
        """Index of the cell that holds key."""
        return key % self.table_size

    def put(self, key: int, value: Any) -> None:
        """Store value under key, adding it to the key's existing values."""
        bucket = self._table[self.hash_code(key)]
        self._size += 1
        if not bucket:
            bucket.append(HashEntry(key, [value]))
            self._cells += 1
            return
        for depth, entry in enumerate(bucket, start=1):
            if entry.key == key:
                entry.add_value(value)
                self._max_collision = max(self._max_collision, depth)
                return
        bucket.append(HashEntry(key, [value]))
        self._max_collision = max(self._max_collision, len(bucket))

    def position(self, key: int) -> HashEntry | None:
        """Return the entry for key, or None."""
        for entry in self._table[self.hash_code(key)]:
            if entry.key == key:
                return entry
        return None

    def get(self, key: int) -> list | None:
        """Return a copy of the values stored under key, or None if it is absent."""
        entry = self.position(key)
        return None if entry is None else list(entry.values)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.position(key) is not None

    def __len__(self) -> int:
        """Total number of values put into the map."""
        return self._size

    def cell(self, index: int) -> tuple[HashEntry, ...]:
        """Entries chained in a cell; empty for an empty or out-of-range index."""
        if 0 <= index < self.table_size:
            return tuple(self._table[index])
        return ()

    def cells(self) -> int:
        """Number of occupied cells."""
        return self._cells

    def collisions(self) -> int:
        """Deepest chain position reached by any put after the first in a cell."""
        return self._max_collision

    def lines(self) -> list[str]:
        """Text lines describing every occupied cell and its chained entries."""
        result = []
        for index, bucket in enumerate(self._table):
            for depth, entry in enumerate(bucket):
                result.append(f"Índex {index}: {entry}" if depth == 0 else str(entry))
        return result

    def print(self) -> None:
        """Print the map's contents to standard output."""
        for line in self.lines():
            print(line)