"""Command that builds a small sample database, shows it, saves and reloads it."""

from __future__ import annotations

import argparse
import logging

from minidb.database import Database

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    """Run the sample session; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="minidb", description="Build, print, save and reload a sample database."
    )
    parser.add_argument(
        "--directory", default=".", help="where the .tbl files are written and read"
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    db = Database(args.directory)
    users = db.create_table("Users")
    db.create_table("Products")

    users.create_column("id", "INT", True)
    users.create_column("name", "STRING")
    users.create_column("age", "INT")
    users.insert_row({"id": "1", "name": "Alice", "age": "30"})
    users.insert_row({"id": "2", "name": "Bob", "age": "25"})

    users.print_table()
    db.print_all_tables()
    print("The Products table has no columns, so reloading below reports an error.")
    db.save()
    try:
        db.load()
    except ValueError as exc:
        logger.error("Error: %s", exc)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())