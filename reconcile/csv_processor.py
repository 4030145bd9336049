#!/usr/bin/env python3
"""
CSV Processor - Read POS receipt exports saved as delimited text

The delimiter is detected from the first line only (comma, semicolon or tab,
ignoring anything inside quotes). Every following row is parsed with that
delimiter; rows may have a variable number of fields.
"""

import csv
import logging
from typing import Iterator, Tuple

from .config import RECEIPT_PROCESSING
from .errors import StructuralError
from .tabular_source import RawRow, TabularSource

logger = logging.getLogger(__name__)


def detect_delimiter_from_line(line: str) -> str:
    """
    Pick the delimiter of a header line

    Counts unquoted commas, semicolons and tabs ('""' inside quotes is an
    escaped quote). Semicolon wins when it beats commas and is not beaten by
    tabs; tab wins when it strictly beats both; comma otherwise.

    Args:
        line: First line of the file

    Returns:
        One of ',', ';', '\\t'
    """
    comma = semi = tab = 0
    in_quotes = False

    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch == '"':
            if in_quotes and i + 1 < n and line[i + 1] == '"':
                i += 2
                continue
            in_quotes = not in_quotes
        elif not in_quotes:
            if ch == ',':
                comma += 1
            elif ch == ';':
                semi += 1
            elif ch == '\t':
                tab += 1
        i += 1

    if semi > comma and semi >= tab:
        return ';'
    if tab > comma and tab > semi:
        return '\t'
    return ','


class CSVRowSource(TabularSource):
    """Delimited text adapter"""

    def __init__(self, file_path, encoding: str = None):
        super().__init__(file_path)
        self.encoding = encoding or RECEIPT_PROCESSING['csv_encoding']
        self.delimiter = ','
        self._file = None

    def open(self) -> 'CSVRowSource':
        try:
            self._file = open(self.file_path, 'r', encoding=self.encoding, newline='')
        except OSError as e:
            raise StructuralError(f"open file: {e}") from e

        try:
            first_line = self._file.readline()
            self._file.seek(0)
        except (OSError, UnicodeDecodeError) as e:
            self.close()
            raise StructuralError(f"detect delimiter: {e}") from e

        self.delimiter = detect_delimiter_from_line(first_line)
        logger.debug(f"Detected delimiter {self.delimiter!r} for {self.file_path.name}")

        reader = csv.reader(self._file, delimiter=self.delimiter)
        records = self._records(reader)
        try:
            _, self.header = next(records)
        except StopIteration:
            self.close()
            raise StructuralError("empty sheet")
        except StructuralError:
            self.close()
            raise
        self._rows = records
        return self

    def _records(self, reader) -> Iterator[Tuple[int, RawRow]]:
        # Blank lines are not records
        row_number = 0
        while True:
            try:
                record = next(reader)
            except StopIteration:
                return
            except (csv.Error, UnicodeDecodeError) as e:
                if row_number == 0:
                    raise StructuralError(f"read header: {e}") from e
                raise StructuralError(f"read row {row_number + 1}: {e}") from e
            if not record:
                continue
            row_number += 1
            yield row_number, record

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
