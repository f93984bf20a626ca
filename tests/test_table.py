import io

import pytest

from minidb.table import Column, DatabaseTable, DataType


@pytest.fixture
def users():
    table = DatabaseTable("Users")
    table.create_column("id", "INT", True)
    table.create_column("name", "STRING")
    table.create_column("age", "INT")
    table.insert_row({"id": "1", "name": "Alice", "age": "30"})
    table.insert_row({"id": "2", "name": "Bob", "age": "25"})
    return table


@pytest.mark.parametrize("name", ["INT", "STRING", "DOUBLE", "FLOAT"])
def test_parse_known_types(name):
    assert DataType.parse(name).name == name


@pytest.mark.parametrize("name", ["int", "TEXT", "", "UNKNOWN"])
def test_parse_unknown_type_raises(name):
    with pytest.raises(ValueError):
        DataType.parse(name)


def test_create_column_records_column():
    table = DatabaseTable("T")
    column = table.create_column("price", "DOUBLE", False)
    assert column == Column("price", DataType.DOUBLE, False)
    assert table.columns == [column]


def test_create_column_invalid_type_raises():
    table = DatabaseTable("T")
    with pytest.raises(ValueError):
        table.create_column("x", "BLOB")
    assert table.columns == []


def test_primary_key_is_first_marked_column(users):
    assert users.primary_key.name == "id"


def test_duplicate_primary_key_rejected(users):
    with pytest.raises(ValueError):
        users.insert_row({"id": "1", "name": "Carol", "age": "40"})
    assert len(users.rows) == 2


def test_missing_primary_key_rejected(users):
    with pytest.raises(ValueError):
        users.insert_row({"name": "Carol", "age": "40"})
    assert len(users.rows) == 2


def test_no_primary_key_allows_duplicates():
    table = DatabaseTable("T")
    table.create_column("id", "INT")
    table.insert_row({"id": "1"})
    table.insert_row({"id": "1"})
    assert table.rows == [{"id": "1"}, {"id": "1"}]


def test_find_row(users):
    assert users.find_row(2) == {"id": "2", "name": "Bob", "age": "25"}
    assert users.find_row(99) is None


def test_find_row_returns_copy(users):
    found = users.find_row(1)
    found["name"] = "Changed"
    assert users.find_row(1)["name"] == "Alice"


def test_update_row_only_known_columns(users):
    users.update_row(1, {"age": "31", "unknown": "x"})
    assert users.find_row(1) == {"id": "1", "name": "Alice", "age": "31"}


def test_update_missing_row_raises(users):
    with pytest.raises(KeyError):
        users.update_row(42, {"age": "1"})


def test_delete_row(users):
    users.delete_row(1)
    assert users.find_row(1) is None
    assert [row["id"] for row in users.rows] == ["2"]


def test_delete_missing_row_is_noop(users):
    users.delete_row(42)
    assert len(users.rows) == 2


def test_delete_removes_identical_rows_only():
    table = DatabaseTable("T")
    table.create_column("id", "INT")
    table.create_column("v", "STRING")
    table.insert_row({"id": "1", "v": "a"})
    table.insert_row({"id": "1", "v": "b"})
    table.insert_row({"id": "1", "v": "a"})
    table.delete_row(1)
    assert table.rows == [{"id": "1", "v": "b"}]


def test_row_without_id_raises_on_lookup():
    table = DatabaseTable("T")
    table.create_column("name", "STRING")
    table.insert_row({"name": "Alice"})
    with pytest.raises(KeyError):
        table.find_row(1)


def test_format_table_without_columns():
    assert DatabaseTable("Empty").format_table() == "No columns in the table.\n"


def test_format_table_contents(users):
    lines = users.format_table().splitlines()
    assert len(lines) == 3
    assert lines[0].split() == ["ID", "id", "name", "age"]
    assert lines[1].split() == ["1", "1", "Alice", "30"]
    assert lines[2].split() == ["2", "2", "Bob", "25"]
    assert lines[0].startswith("        ID")
    assert len({len(line) for line in lines}) == 1


def test_print_table_matches_format(users):
    buffer = io.StringIO()
    users.print_table(buffer)
    assert buffer.getvalue() == users.format_table()