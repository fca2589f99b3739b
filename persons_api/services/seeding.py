"""Startup seeding: import the CSV file and upsert every person."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Optional

from persons_api.core.config import get_settings
from persons_api.repositories.person_repository import SQLPersonRepository
from persons_api.services.csv_source import CsvPersonSource
from persons_api.services.importer import CsvPersonImporter

logger = logging.getLogger(__name__)


def run_csv_import(
    path: str | Path | None = None,
    *,
    repository: Optional[SQLPersonRepository] = None,
    cancel: Optional[threading.Event] = None,
) -> int:
    """
    Import the seed file and upsert the result by identifier.

    The whole file is parsed before anything is written, so a malformed record
    leaves the store untouched. Re-running updates existing rows in place.
    Returns the number of persons imported or updated.
    """
    csv_path = path or get_settings().csv_path
    repository = repository or SQLPersonRepository()
    logger.info("CSV import seeding started (%s).", csv_path)
    persons = CsvPersonImporter(CsvPersonSource(csv_path)).import_persons(cancel=cancel)
    count = repository.upsert_persons(persons)
    logger.info("CSV import seeding finished. Imported/updated %d persons.", count)
    return count
