"""Decoding and parsing of delimited text files."""

import csv
import io
from collections.abc import Iterator
from dataclasses import dataclass, field

from charset_normalizer import from_bytes

from filekit.files.models import InputFile
from filekit.tabular.exceptions import ParseError
from filekit.tabular.models import RawRow

_CANDIDATE_DELIMITERS = ",;\t|"
_DEFAULT_DELIMITER = ","
_SNIFF_SAMPLE_CHARS = 4096


@dataclass(frozen=True)
class ParsedTable:
    """Header set plus the non-empty records of one file."""

    headers: list[str] = field(default_factory=list)
    rows: list[RawRow] = field(default_factory=list)


def decode_text(file: InputFile) -> str:
    """Decode raw bytes as UTF-8, dropping a BOM, or with the detected encoding.

    Encoding detection only runs when the bytes are not valid UTF-8.

    Raises:
        ParseError: if the bytes cannot be decoded.
    """
    raw = file.data
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        pass

    match = from_bytes(raw).best()
    if match is None:
        raise ParseError(f"Cannot decode '{file.name}': no matching text encoding")
    try:
        return raw.decode(match.encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise ParseError(f"Cannot decode '{file.name}': {exc}") from exc


def detect_delimiter(text: str) -> str:
    try:
        dialect = csv.Sniffer().sniff(
            text[:_SNIFF_SAMPLE_CHARS], delimiters=_CANDIDATE_DELIMITERS
        )
    except csv.Error:
        return _DEFAULT_DELIMITER
    return dialect.delimiter


def unique_headers(record: list[str]) -> list[str]:
    """Rename repeated header names to ``name_1``, ``name_2``... in record order.

    A generated name never collides with another header of the record.
    """
    taken = set(record)
    seen: set[str] = set()
    headers: list[str] = []
    for name in record:
        candidate = name
        suffix = 0
        while candidate in seen or (candidate != name and candidate in taken):
            suffix += 1
            candidate = f"{name}_{suffix}"
        seen.add(candidate)
        headers.append(candidate)
    return headers


def read_headers(file: InputFile) -> list[str]:
    """Return the header set of ``file`` without materializing its rows.

    Raises:
        ParseError: if the file is not decodable or not valid delimited text.
    """
    for record in _records(file):
        return unique_headers(record)
    return []


def parse_table(file: InputFile) -> ParsedTable:
    """Parse ``file`` with its first non-empty record as the header row.

    Repeated header names are made unique, short records are padded with
    empty strings and extra cells are ignored.

    Raises:
        ParseError: if the file is not decodable or not valid delimited text.
    """
    records = _records(file)
    first = next(records, None)
    if first is None:
        return ParsedTable()
    headers = unique_headers(first)
    rows = [
        {header: (record[i] if i < len(record) else "") for i, header in enumerate(headers)}
        for record in records
    ]
    return ParsedTable(headers=headers, rows=rows)


def _records(file: InputFile) -> Iterator[list[str]]:
    text = decode_text(file)
    reader = csv.reader(
        io.StringIO(text, newline=""),
        delimiter=detect_delimiter(text),
        strict=True,
    )
    try:
        for record in reader:
            if any(record):
                yield record
    except csv.Error as exc:
        raise ParseError(f"Cannot parse '{file.name}' (line {reader.line_num}): {exc}") from exc
