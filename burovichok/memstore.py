"""Thread-safe in-memory accumulation of imported blocks."""

from __future__ import annotations

import copy
import threading
from typing import Iterable, TypeVar

from .models import TableFour, TableOne, TableThree, TableTwo

T = TypeVar("T")


def _copies(records: Iterable[T]) -> list[T]:
    return [copy.copy(record) for record in records]


class BlocksStorage:
    """Keeps imported records in memory; repeated imports accumulate.

    Records are copied on the way in and on the way out, so callers cannot
    change what is stored.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._block_one: list[TableOne] = []
        self._block_two: list[TableTwo] = []
        self._block_three: list[TableThree] = []
        self._inclinometry: list[TableFour] = []

    def add_block_one_data(self, data: Iterable[TableOne]) -> None:
        """Append block 1 records."""
        records = _copies(data)
        with self._lock:
            self._block_one.extend(records)

    def add_block_two_data(self, data: Iterable[TableTwo]) -> None:
        """Append block 2 records."""
        records = _copies(data)
        with self._lock:
            self._block_two.extend(records)

    def add_block_three_data(self, data: Iterable[TableThree]) -> None:
        """Append block 3 records."""
        records = _copies(data)
        with self._lock:
            self._block_three.extend(records)

    def add_block_four_data(self, data: Iterable[TableFour]) -> None:
        """Append block 4 (inclinometry) records."""
        records = _copies(data)
        with self._lock:
            self._inclinometry.extend(records)

    def get_all_block_one_data(self) -> list[TableOne]:
        """Return copies of all block 1 records."""
        with self._lock:
            return _copies(self._block_one)

    def get_all_block_two_data(self) -> list[TableTwo]:
        """Return copies of all block 2 records."""
        with self._lock:
            return _copies(self._block_two)

    def get_all_block_three_data(self) -> list[TableThree]:
        """Return copies of all block 3 records."""
        with self._lock:
            return _copies(self._block_three)

    def clear_all(self) -> None:
        """Remove all block 1, 2 and 3 records; inclinometry is kept."""
        with self._lock:
            self._block_one = []
            self._block_two = []
            self._block_three = []

    def count_block_one(self) -> int:
        """Number of stored block 1 records."""
        with self._lock:
            return len(self._block_one)

    def count_block_two(self) -> int:
        """Number of stored block 2 records."""
        with self._lock:
            return len(self._block_two)

    def count_block_three(self) -> int:
        """Number of stored block 3 records."""
        with self._lock:
            return len(self._block_three)