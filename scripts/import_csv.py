#!/usr/bin/env python3
"""
Import (or re-import) the persons seed file into the database.

Usage:
  python scripts/import_csv.py [--csv data/sample-input.csv] [--create-tables] [--dry-run]
"""
from __future__ import annotations

import argparse
import sys

from persons_api.core.config import get_settings
from persons_api.core.logging import configure_logging
from persons_api.db.create_tables import create_all
from persons_api.services.csv_source import CsvImportError
from persons_api.services.importer import import_persons
from persons_api.services.seeding import run_csv_import


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Import persons from the CSV seed file")
    ap.add_argument("--csv", default=settings.csv_path, help="Path to the seed file (default: CSV_PATH)")
    ap.add_argument("--create-tables", action="store_true", help="Create missing tables first")
    ap.add_argument("--dry-run", action="store_true", help="Parse and validate only, write nothing")
    args = ap.parse_args()

    configure_logging(settings.log_level)
    try:
        if args.dry_run:
            persons = import_persons(args.csv)
            for person in persons:
                print(f"{person.id:>4}  {person.last_name}, {person.first_name}  "
                      f"{person.zip_code} {person.city}  [{person.colour}]")
            print(f"OK: {len(persons)} persons parsed")
            return
        if args.create_tables:
            for table in create_all():
                print(f"Created table {table}")
        count = run_csv_import(args.csv)
    except CsvImportError as exc:
        where = f" (line {exc.line_number})" if exc.line_number else ""
        raise SystemExit(f"Invalid seed file{where}: {exc}")
    print(f"OK: {count} persons imported/updated")


if __name__ == "__main__":
    try:
        main()
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
