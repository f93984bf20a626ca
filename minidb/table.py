"""Tables made of typed columns and rows of string values."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import IO, Mapping

Row = dict[str, str]

_ID_WIDTH = 10
_COLUMN_WIDTH = 15


class DataType(enum.Enum):
    """The types a column may be declared with."""

    INT = 0
    STRING = 1
    DOUBLE = 2
    FLOAT = 3

    @classmethod
    def parse(cls, name):
        """Return the type called ``name``; raise ValueError for unknown names."""
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Invalid data type: {name!r}") from None


@dataclass(frozen=True)
class Column:
    """A named, typed column, optionally the table's primary key."""

    name: str
    type: DataType
    is_primary_key: bool = False


class DatabaseTable:
    """An in-memory table; each row maps column names to string values."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.columns: list[Column] = []
        self.rows: list[Row] = []

    def __repr__(self) -> str:
        return (
            f"DatabaseTable(name={self.name!r}, columns={len(self.columns)}, "
            f"rows={len(self.rows)})"
        )

    @property
    def primary_key(self) -> Column | None:
        """The first column marked as primary key, if any."""
        return next((col for col in self.columns if col.is_primary_key), None)

    def create_column(self, name: str, type_name: str, is_primary_key: bool = False) -> Column:
        """Append a column whose type is given by name (INT, STRING, DOUBLE, FLOAT)."""
        column = Column(name, DataType.parse(type_name), bool(is_primary_key))
        self.columns.append(column)
        return column

    def insert_row(self, row_data: Mapping[str, str]) -> None:
        """Append a row, enforcing presence and uniqueness of the primary key."""
        key = self.primary_key
        if key is not None:
            if key.name not in row_data:
                raise ValueError(f"Primary key column {key.name} not found in row data.")
            value = row_data[key.name]
            if any(row.get(key.name) == value for row in self.rows):
                raise ValueError(f"Duplicate primary key value: {value}")
        self.rows.append(dict(row_data))

    def _first_with_id(self, row_id: int) -> Row | None:
        wanted = str(row_id)
        return next((row for row in self.rows if row["id"] == wanted), None)

    def delete_row(self, row_id: int) -> None:
        """Remove the first row with this id, together with every row equal to it."""
        target = self._first_with_id(row_id)
        if target is None:
            return
        target = dict(target)
        self.rows = [row for row in self.rows if row != target]

    def find_row(self, row_id: int) -> Row | None:
        """Return a copy of the first row with this id, or None."""
        row = self._first_with_id(row_id)
        return dict(row) if row is not None else None

    def update_row(self, row_id: int, row_data: Mapping[str, str]) -> None:
        """Overwrite the known columns of the first row with this id."""
        row = self._first_with_id(row_id)
        if row is None:
            raise KeyError(f"No row with id {row_id}")
        for column in self.columns:
            if column.name in row_data:
                row[column.name] = row_data[column.name]

    def format_table(self) -> str:
        """Render the table as right-aligned text, one line per row."""
        if not self.columns:
            return "No columns in the table.\n"
        header = f"{'ID':>{_ID_WIDTH}}" + "".join(
            f"{col.name:>{_COLUMN_WIDTH}}" for col in self.columns
        )
        lines = [header]
        for row in self.rows:
            lines.append(
                f"{row['id']:>{_ID_WIDTH}}"
                + "".join(f"{row[col.name]:>{_COLUMN_WIDTH}}" for col in self.columns)
            )
        return "".join(f"{line}\n" for line in lines)

    def print_table(self, file: IO[str] | None = None) -> None:
        """Write :meth:`format_table` to ``file`` (standard output by default)."""
        print(self.format_table(), end="", file=file)