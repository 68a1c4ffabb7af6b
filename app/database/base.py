from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

Row = dict[str, Any]


class RecordStore(ABC):
    """Contract for table-oriented persistence backends.

    Filters are equality-only: every key must match its value exactly.
    All methods raise StoreError on constraint violations or connectivity
    failures.
    """

    @abstractmethod
    def insert(self, table: str, fields: Mapping[str, Any]) -> Row:
        """Insert one row and return it as stored, including generated columns."""

    @abstractmethod
    def update(self, table: str, record_id: str, fields: Mapping[str, Any]) -> None:
        """Update columns of the row with this id.

        Raises:
            RecordNotFoundError: if no row has this id.
        """

    @abstractmethod
    def delete(self, table: str, record_id: str) -> None:
        """Delete the row with this id.

        Raises:
            RecordNotFoundError: if no row has this id.
        """

    @abstractmethod
    def delete_where(self, table: str, filters: Mapping[str, Any]) -> int:
        """Delete all rows matching filters (all rows when empty). Returns the count."""

    @abstractmethod
    def select_one(
        self,
        table: str,
        filters: Mapping[str, Any],
        columns: Sequence[str] | None = None,
    ) -> Row | None:
        """Return the first matching row, or None."""

    @abstractmethod
    def select_many(
        self,
        table: str,
        filters: Mapping[str, Any],
        order_by: str | None = None,
        descending: bool = True,
        columns: Sequence[str] | None = None,
    ) -> list[Row]:
        """Return all matching rows, optionally ordered by one column."""
