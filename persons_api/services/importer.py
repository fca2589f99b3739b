"""Turns seed file records into validated Person entities."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Optional

from persons_api.domain.colours import colour_from_code
from persons_api.domain.persons import Person
from persons_api.services.csv_source import CsvPersonSource, split_zip_city


class CsvPersonImporter:
    """Reads every record from the source and assigns ids by position (1..N)."""

    def __init__(self, source: CsvPersonSource) -> None:
        if source is None:
            raise ValueError("source is required")
        self.source = source

    def import_persons(self, *, cancel: Optional[threading.Event] = None) -> list[Person]:
        records = self.source.read_all(cancel=cancel)
        persons: list[Person] = []
        for index, record in enumerate(records):
            zip_code, city = split_zip_city(record.zip_and_city)
            persons.append(
                Person(
                    id=index + 1,
                    first_name=record.first_name.strip(),
                    last_name=record.last_name.strip(),
                    zip_code=zip_code,
                    city=city,
                    colour=colour_from_code(record.colour_code),
                )
            )
        return persons


def import_persons(path: str | Path, *, cancel: Optional[threading.Event] = None) -> list[Person]:
    return CsvPersonImporter(CsvPersonSource(path)).import_persons(cancel=cancel)
