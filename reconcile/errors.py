"""
Reconciliation errors.
Every error is terminal for the file being processed.
"""

from typing import List, Optional


class ReconciliationError(Exception):
    """Base class for all errors raised while reconciling a file"""


class UnsupportedFileError(ReconciliationError):
    """File extension is not .xlsx or .csv"""


class StructuralError(ReconciliationError):
    """File cannot be opened or read, or has no usable header"""


class MissingColumnsError(StructuralError):
    """One or more required columns are absent from the header row"""

    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__(f"missing required columns: {', '.join(self.missing)}")


class NumberFormatError(ReconciliationError, ValueError):
    """Quantity or size text is not a valid number"""


class RowParseError(ReconciliationError):
    """A data row has a malformed quantity or bottle size"""

    def __init__(self, row_number: int, field: str, cause: Optional[Exception] = None):
        self.row_number = row_number
        self.field = field
        message = f"row {row_number}: invalid {field}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
