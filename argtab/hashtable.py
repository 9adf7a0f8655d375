"""Chained hash table with prime-sized buckets and a removable cursor."""

from __future__ import annotations

import math
import operator
import struct
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

_PRIMES = (
    53, 97, 193, 389, 769, 1543, 3079, 6151, 12289,
    24593, 49157, 98317, 196613, 393241, 786433, 1572869, 3145739, 6291469,
    12582917, 25165843, 50331653, 100663319, 201326611, 402653189, 805306457,
    1610612741,
)

# The load factor is a single-precision 0.65, widened to double.
_MAX_LOAD_FACTOR = struct.unpack("f", struct.pack("f", 0.65))[0]
_MASK = 0xFFFFFFFF
_MAX_MINSIZE = 1 << 30


def _load_limit(size: int) -> int:
    return math.ceil(size * _MAX_LOAD_FACTOR)


@dataclass(slots=True)
class _Entry:
    hashvalue: int
    key: Any
    value: Any


class HashTable:
    """Hash table that takes its hash and equality functions from the caller.

    Duplicate keys may be inserted; lookups find the most recent one in a chain.
    """

    def __init__(
        self,
        minsize: int = 0,
        hashfn: Callable[[Any], int] = hash,
        eqfn: Callable[[Any, Any], bool] = operator.eq,
    ) -> None:
        if minsize > _MAX_MINSIZE:
            raise ValueError(f"requested hash table size {minsize} is too large")
        self._prime_index = next(i for i, p in enumerate(_PRIMES) if p > minsize)
        size = _PRIMES[self._prime_index]
        self._buckets: list[list[_Entry]] = [[] for _ in range(size)]
        self._count = 0
        self._hashfn = hashfn
        self._eqfn = eqfn
        self._load_limit = _load_limit(size)

    @property
    def capacity(self) -> int:
        """Number of buckets."""
        return len(self._buckets)

    @property
    def load_limit(self) -> int:
        """Entry count beyond which the table grows."""
        return self._load_limit

    def _hash(self, key: Any) -> int:
        i = self._hashfn(key) & _MASK
        i = (i + (~(i << 9) & _MASK)) & _MASK
        i ^= ((i >> 14) | (i << 18)) & _MASK
        i = (i + (i << 4)) & _MASK
        i ^= ((i >> 10) | (i << 22)) & _MASK
        return i

    def _expand(self) -> bool:
        if self._prime_index == len(_PRIMES) - 1:
            return False
        self._prime_index += 1
        newsize = _PRIMES[self._prime_index]
        newbuckets: list[list[_Entry]] = [[] for _ in range(newsize)]
        # Entries are pushed onto the head of their new chain, reversing order.
        for bucket in self._buckets:
            for entry in bucket:
                newbuckets[entry.hashvalue % newsize].insert(0, entry)
        self._buckets = newbuckets
        self._load_limit = _load_limit(newsize)
        return True

    def _locate(self, key: Any) -> tuple[int, int] | None:
        hashvalue = self._hash(key)
        index = hashvalue % len(self._buckets)
        for pos, entry in enumerate(self._buckets[index]):
            if entry.hashvalue == hashvalue and self._eqfn(key, entry.key):
                return index, pos
        return None

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.key

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield (key, value) pairs in bucket order."""
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.key, entry.value

    def insert(self, key: Any, value: Any) -> None:
        """Add an entry, growing the table when the load limit is passed."""
        if self._count + 1 > self._load_limit:
            self._expand()
        hashvalue = self._hash(key)
        self._buckets[hashvalue % len(self._buckets)].insert(
            0, _Entry(hashvalue, key, value)
        )
        self._count += 1

    def search(self, key: Any) -> Any:
        """Return the value stored under key, or None."""
        found = self._locate(key)
        if found is None:
            return None
        index, pos = found
        return self._buckets[index][pos].value

    def remove(self, key: Any) -> None:
        """Remove the first entry matching key, if any."""
        found = self._locate(key)
        if found is not None:
            index, pos = found
            del self._buckets[index][pos]
            self._count -= 1

    def change(self, key: Any, value: Any) -> bool:
        """Replace the value under key; return False if key is absent."""
        found = self._locate(key)
        if found is None:
            return False
        index, pos = found
        self._buckets[index][pos].value = value
        return True

    def cursor(self) -> HashTableCursor:
        """Return a cursor on the first entry (exhausted if the table is empty)."""
        cur = HashTableCursor(self, len(self._buckets), 0)
        if self._count:
            cur._seek(0)
        return cur

    def find(self, key: Any) -> HashTableCursor | None:
        """Return a cursor positioned on key, or None if key is absent."""
        found = self._locate(key)
        if found is None:
            return None
        index, pos = found
        return HashTableCursor(self, index, pos)


class HashTableCursor:
    """Position within a HashTable that can step forward and delete entries."""

    def __init__(self, table: HashTable, index: int, pos: int) -> None:
        self._table = table
        self._index = index
        self._pos = pos

    def _entry(self) -> _Entry | None:
        buckets = self._table._buckets
        if self._index >= len(buckets):
            return None
        bucket = buckets[self._index]
        if self._pos >= len(bucket):
            return None
        return bucket[self._pos]

    def _current(self) -> _Entry:
        entry = self._entry()
        if entry is None:
            raise LookupError("cursor is not positioned on an entry")
        return entry

    def _seek(self, start: int) -> bool:
        buckets = self._table._buckets
        for index in range(start, len(buckets)):
            if buckets[index]:
                self._index = index
                self._pos = 0
                return True
        self._index = len(buckets)
        self._pos = 0
        return False

    def __bool__(self) -> bool:
        return self._entry() is not None

    def key(self) -> Any:
        """Key of the current entry."""
        return self._current().key

    def value(self) -> Any:
        """Value of the current entry."""
        return self._current().value

    def advance(self) -> bool:
        """Move to the next entry; return False once past the last one."""
        if self._entry() is None:
            return False
        if self._pos + 1 < len(self._table._buckets[self._index]):
            self._pos += 1
            return True
        return self._seek(self._index + 1)

    def remove(self) -> bool:
        """Delete the current entry and move to the next; False if none is left."""
        self._current()
        bucket = self._table._buckets[self._index]
        del bucket[self._pos]
        self._table._count -= 1
        if self._pos < len(bucket):
            return True
        return self._seek(self._index + 1)