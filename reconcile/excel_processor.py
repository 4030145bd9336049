#!/usr/bin/env python3
"""
Excel Processor - Read POS receipt exports saved as .xlsx

Only the first sheet is read. The workbook is opened in read-only mode so
large exports stream row by row; cell values are turned into the same text
the CSV export would contain.
"""

import logging
import zipfile
from datetime import date, datetime, time
from decimal import Decimal
from typing import Iterator, Tuple
from xml.etree.ElementTree import ParseError

import openpyxl
from openpyxl.utils.exceptions import InvalidFileException

from .errors import StructuralError
from .tabular_source import RawRow, TabularSource

logger = logging.getLogger(__name__)


def cell_to_text(value: object) -> str:
    """
    Render a cell value as text

    - None -> ''
    - 2.0 -> '2', 0.5 -> '0.5', 1e-05 -> '0.00001' (never an exponent)
    - datetime -> 'YYYY-MM-DD HH:MM:SS'
    """
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'TRUE' if value else 'FALSE'
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), 'f')
    if isinstance(value, datetime):
        return value.strftime('%Y-%m-%d %H:%M:%S')
    if isinstance(value, (date, time)):
        return value.isoformat()
    return str(value)


class ExcelRowSource(TabularSource):
    """Spreadsheet adapter (first sheet only)"""

    def __init__(self, file_path):
        super().__init__(file_path)
        self._workbook = None
        self.sheet_name = None

    def open(self) -> 'ExcelRowSource':
        try:
            self._workbook = openpyxl.load_workbook(self.file_path, read_only=True, data_only=True)
        except (InvalidFileException, zipfile.BadZipFile, ParseError, KeyError, ValueError,
                OSError) as e:
            raise StructuralError(f"open file: {e}") from e

        try:
            if not self._workbook.worksheets:
                raise StructuralError("no sheets found")
            sheet = self._workbook.worksheets[0]
            self.sheet_name = sheet.title

            records = self._records(sheet)
            try:
                _, self.header = next(records)
            except StopIteration:
                raise StructuralError("empty sheet")
        except StructuralError:
            self.close()
            raise

        logger.debug(f"Reading sheet '{self.sheet_name}' of {self.file_path.name}")
        self._rows = records
        return self

    def _records(self, sheet) -> Iterator[Tuple[int, RawRow]]:
        try:
            rows = sheet.iter_rows(values_only=True)
        except Exception as e:
            raise StructuralError(f"open rows: {e}") from e

        row_number = 0
        while True:
            try:
                values = next(rows)
            except StopIteration:
                return
            except Exception as e:
                raise StructuralError(f"read row {row_number + 1}: {e}") from e
            row_number += 1
            yield row_number, [cell_to_text(v) for v in values]

    def close(self) -> None:
        if self._workbook is not None:
            self._workbook.close()
            self._workbook = None
