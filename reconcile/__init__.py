"""
Beer vs. Bottle Reconciliation
Reads POS receipt exports (.xlsx / .csv), sums draft beer volume and PET bottle
volume per receipt and reports every receipt where they differ.
"""

from .main import process_file, process_xlsx, process_csv
from .rule_loader import RuleLoader
from .category_classifier import CategoryClassifier
from .csv_processor import CSVRowSource, detect_delimiter_from_line
from .excel_processor import ExcelRowSource
from .header_mapper import ColumnIndex, map_headers, load_column_names
from .aggregator import ReceiptAggregate, ReceiptAggregator
from .report import Report, ReceiptReport, build_report
from .messages import MessagePicker
from .number_parser import (
    parse_decimal_to_milli,
    parse_whole_number,
    parse_whole_count,
    parse_liters_from_product,
    parse_bottle_liters_ml,
)
from .errors import (
    ReconciliationError,
    UnsupportedFileError,
    StructuralError,
    MissingColumnsError,
    RowParseError,
    NumberFormatError,
)

__all__ = [
    'process_file',
    'process_xlsx',
    'process_csv',
    'RuleLoader',
    'CategoryClassifier',
    'CSVRowSource',
    'detect_delimiter_from_line',
    'ExcelRowSource',
    'ColumnIndex',
    'map_headers',
    'load_column_names',
    'ReceiptAggregate',
    'ReceiptAggregator',
    'Report',
    'ReceiptReport',
    'build_report',
    'MessagePicker',
    'parse_decimal_to_milli',
    'parse_whole_number',
    'parse_whole_count',
    'parse_liters_from_product',
    'parse_bottle_liters_ml',
    'ReconciliationError',
    'UnsupportedFileError',
    'StructuralError',
    'MissingColumnsError',
    'RowParseError',
    'NumberFormatError',
]
