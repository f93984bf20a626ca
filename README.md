# minidb

A small table store. You define tables and their typed columns in memory.
You can insert, find, update and delete rows, and print tables as
right-aligned text. Each table can be saved to a plain-text `<table>.tbl`
file and loaded back later.

## Installing

```
pip install .
```

## Using it from Python

```python
from minidb.database import Database

db = Database()            # files go in the current directory; Database("data") uses ./data
users = db.create_table("Users")

users.create_column("id", "INT", True)
users.create_column("name", "STRING")
users.create_column("age", "INT")

users.insert_row({"id": "1", "name": "Alice", "age": "30"})
users.insert_row({"id": "2", "name": "Bob", "age": "25"})

print(users.format_table())   # or users.print_table()

users.update_row(2, {"age": "26"})
print(users.find_row(2))      # {'id': '2', 'name': 'Bob', 'age': '26'}
users.delete_row(1)

db.save()                     # writes Users.tbl, returns the paths written
```

### Tables (`minidb.table`)

- `DataType` lists the column types: `INT`, `STRING`, `DOUBLE` and `FLOAT`.
  `DataType.parse(name)` raises `ValueError` for any other name.
- `Column` is a frozen dataclass with the fields `name`, `type` and
  `is_primary_key`.
- `DatabaseTable` has the attributes `name`, `columns` and `rows`. Each row is
  a `dict` that maps column names to strings.
  - `create_column(name, type_name, is_primary_key=False)` appends a column and
    returns it.
  - `primary_key` is the first column marked as the primary key, or `None`.
  - `insert_row(row_data)` raises `ValueError` in two cases: the table has a
    primary key and the row has no value for it, or the row repeats a value
    that is already in the table.
  - `find_row(row_id)`, `update_row(row_id, row_data)` and
    `delete_row(row_id)` find rows by their `"id"` field, compared with
    `str(row_id)`.
    - `find_row` returns a copy of the row, or `None`.
    - `update_row` changes only the fields that belong to the table's columns.
      It raises `KeyError` if no row has that id.
    - `delete_row` does nothing if no row has that id. Otherwise it removes
      that row and every row equal to it.
  - `format_table()` returns the table as text: an `ID` column 10 characters
    wide, then one column 15 characters wide for each table column.
    `print_table(file=None)` writes the same text to `file`, or to standard
    output if no file is given.

### Databases (`minidb.database`)

`Database(directory=".")` keeps its tables in the `tables` dict.

- `create_table(name)` returns the new table. It raises `ValueError` if the
  name is taken.
- `get_table(name)` returns the table. `drop_table(name)` removes the table
  and deletes its `.tbl` file if there is one. Both raise `KeyError` for an
  unknown name.
- `print_all_tables(file=None)` prints every table in name order.
- `save()` writes one file for each table and returns the paths. It raises
  `ValueError` when there are no tables.
- `load()` reads every `.tbl` file in the directory, in name order, and
  returns the loaded tables.
- `load_table_from_file(filename)` reads one file. It raises `ValueError` in
  these cases:
  - the header is invalid;
  - a column line is malformed;
  - a column type is unknown;
  - there are no column lines;
  - a table of that name is already loaded.
- `process_data_line(line, table, columns)` inserts one data line. If the
  line has the wrong number of fields, or its primary key is missing or
  duplicated, the line is logged and skipped.

Messages about what happened are written through the standard `logging`
module.

## File format

```
TableName: Users
Column: id,INT,1
Column: name,STRING,0
Column: age,INT,0
1,Alice,30
2,Bob,25
```

Each `Column:` line gives the column name, the type name and a primary-key
flag (`1` or `0`). After the column lines come the data rows, one per line,
with fields in column order and separated by commas. Empty lines are ignored.

## Demo

```
minidb-demo [--directory DIR]
```

The demo does the following:

1. It creates a `Users` table and a `Products` table, and fills `Users` with
   two rows.
2. It prints the tables.
3. It saves them as `.tbl` files in `DIR` (the current directory by default).
4. It tries to load them back into the same database. `Products.tbl` has no
   columns, so the load reports an error. The command still exits with
   status 0.

## What it does not do

- There is no query language, no indexing and no server. Tables are used only
  through the Python API.
- Column types are recorded, but values are stored as strings and are never
  checked against their column's type.
- Values are written to `.tbl` files without quoting. A value that contains a
  comma or a newline will not load back correctly.

## Running the tests

```
pip install .[test]
pytest
```