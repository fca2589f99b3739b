"""
Seed file reader.

The seed file has no header and no quoting: each logical record is
``LastName,FirstName,Zip City,ColourCode``, but a record may be wrapped over
several physical lines. Lines are accumulated until the buffer holds at least
three commas, then the buffer is split into its four fields. A comma inside a
field cannot be told apart from a field boundary.
"""

from __future__ import annotations

import codecs
import logging
import re
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, Optional

logger = logging.getLogger(__name__)

DELIMITER = ","
FIELD_COUNT = 4
_COLOUR_CODE_PATTERN = re.compile(r"[+-]?[0-9]+")
# colour codes are 32-bit signed integers in the seed file format
_COLOUR_CODE_MIN = -(2**31)
_COLOUR_CODE_MAX = 2**31 - 1


class CsvImportError(Exception):
    """Base exception for seed file parsing."""

    def __init__(self, message: str, *, record: str | None = None, line_number: int | None = None):
        super().__init__(message)
        self.record = record
        self.line_number = line_number


class MalformedRecordError(CsvImportError):
    """Raised when a reconstructed record cannot be split into valid fields."""


class TruncatedInputError(CsvImportError):
    """Raised when the input ends in the middle of a record."""


class ImportCancelledError(CsvImportError):
    """Raised when the caller's cancel event is set while reading."""


@dataclass(frozen=True)
class RawCsvRecord:
    last_name: str
    first_name: str
    zip_and_city: str
    colour_code: int
    line_number: int = field(default=0, compare=False)


def _parse_record(buffer: str, line_number: int) -> RawCsvRecord:
    parts = [part.strip() for part in buffer.split(DELIMITER)]
    if len(parts) != FIELD_COUNT:
        raise MalformedRecordError(
            f"Invalid CSV record (expected {FIELD_COUNT} fields): '{buffer}'",
            record=buffer,
            line_number=line_number,
        )
    code = parts[3]
    if not _COLOUR_CODE_PATTERN.fullmatch(code) or not _COLOUR_CODE_MIN <= int(code) <= _COLOUR_CODE_MAX:
        raise MalformedRecordError(
            f"Invalid colour code (expected int): '{buffer}'",
            record=buffer,
            line_number=line_number,
        )
    return RawCsvRecord(
        last_name=parts[0],
        first_name=parts[1],
        zip_and_city=parts[2],
        colour_code=int(code),
        line_number=line_number,
    )


def read_records(lines: Iterable[str], *, cancel: Optional[threading.Event] = None) -> list[RawCsvRecord]:
    """Reconstruct four-field records from physical lines, skipping blank ones."""
    records: list[RawCsvRecord] = []
    buffer = ""
    line_number = 0
    for line_number, line in enumerate(lines, start=1):
        if cancel is not None and cancel.is_set():
            raise ImportCancelledError("CSV import cancelled", record=buffer or None, line_number=line_number)
        if not line.strip():
            continue
        trimmed = line.strip()
        buffer = f"{buffer} {trimmed}" if buffer else trimmed
        if buffer.count(DELIMITER) < FIELD_COUNT - 1:
            continue
        records.append(_parse_record(buffer, line_number))
        buffer = ""
    if buffer:
        raise TruncatedInputError(
            f"Incomplete CSV record at end of file: '{buffer}'",
            record=buffer,
            line_number=line_number,
        )
    return records


def split_zip_city(value: str) -> tuple[str, str]:
    """Split "67742 Lauterecken" into ("67742", "Lauterecken")."""
    if value is None or not value.strip():
        raise MalformedRecordError("Zip and city must not be empty.", record=value)
    tokens = value.split()
    if len(tokens) < 2:
        raise MalformedRecordError(f"Zip and city must contain zip and city: '{value}'", record=value)
    zip_code = tokens[0].strip()
    city = " ".join(tokens[1:]).strip()
    if not zip_code or not city:
        raise MalformedRecordError(f"Invalid zip and city value: '{value}'", record=value)
    return zip_code, city


def _decode_lines(handle: BinaryIO, encoding: str) -> Iterator[str]:
    """
    Decode a binary file line by line, splitting on \\n, \\r\\n and \\r.

    Undecodable bytes raise MalformedRecordError carrying the physical line
    number, instead of a UnicodeDecodeError from somewhere inside a read chunk.
    """
    decoder = codecs.getincrementaldecoder(encoding)()
    line_number = 0

    def _decode(raw: bytes, final: bool = False) -> list[str]:
        try:
            text = decoder.decode(raw, final=final)
        except UnicodeDecodeError as exc:
            # bytes left pending at end of file belong to the last line read
            bad_line = line_number if final and line_number else line_number + 1
            raise MalformedRecordError(
                f"Invalid {encoding} byte sequence on line {bad_line}: {exc.reason}",
                record=raw.decode(encoding, errors="replace").strip() or None,
                line_number=bad_line,
            ) from exc
        pieces = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        if pieces[-1] == "":
            pieces.pop()
        return pieces

    for raw in handle:
        for piece in _decode(raw):
            line_number += 1
            yield piece
    for piece in _decode(b"", final=True):
        line_number += 1
        yield piece


class CsvPersonSource:
    """Reads RawCsvRecords from a seed file on disk."""

    def __init__(self, path: str | Path, encoding: str = "utf-8-sig") -> None:
        if not str(path or "").strip():
            raise ValueError("CSV file path must not be empty.")
        self.path = Path(path)
        self.encoding = encoding

    def read_all(self, *, cancel: Optional[threading.Event] = None) -> list[RawCsvRecord]:
        if not self.path.is_file():
            raise FileNotFoundError(f"CSV file not found at '{self.path}'.")
        with self.path.open("rb") as handle:
            records = read_records(_decode_lines(handle, self.encoding), cancel=cancel)
        logger.debug("Read %d records from %s", len(records), self.path)
        return records
