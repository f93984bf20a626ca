"""A collection of named tables persisted as ``.tbl`` text files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Sequence

from minidb.table import Column, DatabaseTable, DataType

logger = logging.getLogger(__name__)

_TABLE_PREFIX = "TableName: "
_COLUMN_PREFIX = "Column: "
_SUFFIX = ".tbl"


def _parse_column(definition: str, filename: str) -> Column:
    parts = definition.split(",", 2)
    if len(parts) < 3 or not parts[2]:
        raise ValueError(f"Invalid column format in {filename}")
    name, type_name, primary = parts
    try:
        data_type = DataType.parse(type_name)
    except ValueError:
        raise ValueError(f"Unknown column type '{type_name}' in {filename}") from None
    return Column(name, data_type, primary == "1")


def _split_fields(line: str) -> list[str]:
    fields = line.split(",")
    if fields and fields[-1] == "":
        fields.pop()
    return fields


class Database:
    """Named tables kept in memory, saved to and loaded from a directory."""

    def __init__(self, directory: str | Path = ".") -> None:
        self.directory = Path(directory)
        self.tables: dict[str, DatabaseTable] = {}

    def _path(self, name: str) -> Path:
        return self.directory / f"{name}{_SUFFIX}"

    def create_table(self, name: str) -> DatabaseTable:
        """Create an empty table; raise ValueError if the name is taken."""
        if name in self.tables:
            raise ValueError(f"Table {name} already exists.")
        table = DatabaseTable(name)
        self.tables[name] = table
        logger.info("Table %s created successfully.", name)
        return table

    def drop_table(self, name: str) -> None:
        """Forget a table and delete its file if there is one."""
        try:
            del self.tables[name]
        except KeyError:
            raise KeyError(f"Table {name} doesn't exist.") from None
        path = self._path(name)
        if path.exists():
            path.unlink()
            logger.info("File %s deleted successfully.", path)
        else:
            logger.warning("File %s does not exist.", path)
        logger.info("Table %s dropped successfully.", name)

    def get_table(self, name: str) -> DatabaseTable:
        """Return the table called ``name``; raise KeyError if absent."""
        try:
            return self.tables[name]
        except KeyError:
            raise KeyError(f"Table {name} doesn't exist.") from None

    def print_all_tables(self, file: IO[str] | None = None) -> None:
        """Print every table in name order."""
        if not self.tables:
            print("No tables in the database.", file=file)
            return
        for index, name in enumerate(sorted(self.tables)):
            print(f"Table {index}:{name}", file=file)
            self.tables[name].print_table(file)
            print("-" * 24, file=file)

    def save(self) -> list[Path]:
        """Write each table to ``<name>.tbl``; return the paths written."""
        if not self.tables:
            raise ValueError("No tables to save.")
        written = []
        for name in sorted(self.tables):
            table = self.tables[name]
            lines = [f"{_TABLE_PREFIX}{table.name}"]
            lines += [
                f"{_COLUMN_PREFIX}{col.name},{col.type.name},{int(col.is_primary_key)}"
                for col in table.columns
            ]
            lines += [",".join(row[col.name] for col in table.columns) for row in table.rows]
            path = self._path(name)
            path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
            logger.info("Table %s saved to %s", name, path)
            written.append(path)
        return written

    def load(self) -> list[DatabaseTable]:
        """Load every ``.tbl`` file in the directory, in name order."""
        return [
            self.load_table_from_file(path.name)
            for path in sorted(self.directory.glob(f"*{_SUFFIX}"))
            if path.is_file()
        ]

    def load_table_from_file(self, filename: str) -> DatabaseTable:
        """Read one table file; raise ValueError if it is malformed or the table exists."""
        with (self.directory / filename).open(encoding="utf-8") as handle:
            lines = [line.rstrip("\n") for line in handle]
        if not lines or not lines[0].startswith(_TABLE_PREFIX):
            raise ValueError(f"Invalid table name in {filename}")
        table_name = lines[0][len(_TABLE_PREFIX):]

        rest = lines[1:]
        columns: list[Column] = []
        for line in rest:
            if not line.startswith(_COLUMN_PREFIX):
                break
            columns.append(_parse_column(line[len(_COLUMN_PREFIX):], filename))
        if not columns:
            raise ValueError(f"No columns defined in {filename}")
        if table_name in self.tables:
            raise ValueError(f"Table {table_name} already exists.")

        table = DatabaseTable(table_name)
        self.tables[table_name] = table
        for column in columns:
            table.create_column(column.name, column.type.name, column.is_primary_key)
        for line in rest[len(columns):]:
            if line:
                self.process_data_line(line, table, columns)
        return table

    def process_data_line(
        self, line: str, table: DatabaseTable, columns: Sequence[Column]
    ) -> None:
        """Insert one comma-separated data line, logging and skipping bad ones."""
        fields = _split_fields(line)
        if len(fields) != len(columns):
            logger.error(
                "Error: Data line has %d fields, expected %d", len(fields), len(columns)
            )
            return
        row = {column.name: value for column, value in zip(columns, fields)}
        try:
            table.insert_row(row)
        except ValueError as exc:
            logger.error("Error: Failed to insert row into table %s: %s", table.name, exc)