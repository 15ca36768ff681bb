"""Base repository for in-memory tables."""
from typing import Dict, Generic, List, Optional, TypeVar

RowT = TypeVar("RowT")


class BaseRepository(Generic[RowT]):
    """Base class for all repositories.

    Each repository owns one keyed table and its id counter. Ids start at 1
    and are never reused.
    """

    def __init__(self) -> None:
        self._rows: Dict[int, RowT] = {}
        self._next_id = 1

    def _next(self) -> int:
        new_id = self._next_id
        self._next_id += 1
        return new_id

    def _store(self, row_id: int, row: RowT) -> RowT:
        self._rows[row_id] = row
        return row

    def get_all(self) -> List[RowT]:
        return list(self._rows.values())

    def get_by_id(self, row_id: int) -> Optional[RowT]:
        return self._rows.get(row_id)

    def count(self) -> int:
        return len(self._rows)

    def clear(self) -> None:
        self._rows.clear()
        self._next_id = 1
