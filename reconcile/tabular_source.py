"""
Tabular Source - shared contract of the CSV and Excel readers

Usage:
    with CSVRowSource(path) as source:
        columns = map_headers(source.header)
        for row_number, cells in source.rows():
            ...

The header is row 1; data rows are numbered from 2. Rows are produced lazily
and can only be read once per open.
"""

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

RawRow = List[str]


class TabularSource:
    """Base class for readers that yield a header and raw string rows"""

    def __init__(self, file_path):
        self.file_path = Path(file_path)
        self.header: Optional[RawRow] = None
        self._rows: Optional[Iterator[Tuple[int, RawRow]]] = None

    def open(self) -> 'TabularSource':
        raise NotImplementedError

    def close(self) -> None:
        raise NotImplementedError

    def rows(self) -> Iterator[Tuple[int, RawRow]]:
        """Data rows as (row_number, cells)"""
        if self._rows is None:
            raise RuntimeError(f"{type(self).__name__} is not open")
        rows, self._rows = self._rows, iter(())
        return rows

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
