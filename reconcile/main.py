#!/usr/bin/env python3
"""
Reconcile beer vs. bottles for one POS receipt export (.xlsx or .csv)

    recon exports/2026-02-06.xlsx
    recon exports/2026-02-06.csv --json output/2026-02-06.json

One file in, one report out. Any read or parse error aborts the whole file;
no partial report is produced.
"""

import json
import logging
import random
import sys
from pathlib import Path
from typing import Dict, List, Optional

from .config import LOGGING, PATHS, RECEIPT_PROCESSING, REPORT_SETTINGS, RULES_DIR, RULES_HOT_RELOAD
from .aggregator import ReceiptAggregator
from .category_classifier import CategoryClassifier
from .csv_processor import CSVRowSource
from .errors import ReconciliationError, UnsupportedFileError
from .excel_processor import ExcelRowSource
from .header_mapper import load_column_names, map_headers
from .messages import MessagePicker
from .report import Report, build_report
from .rule_loader import RuleLoader
from .tabular_source import TabularSource

logger = logging.getLogger(__name__)


def process_file(file_path, classifier: Optional[CategoryClassifier] = None,
                 columns: Optional[Dict[str, List[str]]] = None) -> Report:
    """
    Reconcile one file, chosen by extension

    Args:
        file_path: Path to a .xlsx or .csv export
        classifier: Row classifier (built-in keywords by default)
        columns: Accepted header names per role (built-in names by default)

    Returns:
        Report

    Raises:
        UnsupportedFileError: extension is neither .xlsx nor .csv
        StructuralError: file unreadable, empty, or missing required columns
        RowParseError: a row has a malformed quantity or bottle size
    """
    ext = Path(file_path).suffix.lower()
    if ext not in RECEIPT_PROCESSING['supported_formats']:
        raise UnsupportedFileError(f"unsupported file type: {ext}")
    if ext == '.xlsx':
        return process_xlsx(file_path, classifier, columns)
    return process_csv(file_path, classifier, columns)


def process_xlsx(file_path, classifier: Optional[CategoryClassifier] = None,
                 columns: Optional[Dict[str, List[str]]] = None) -> Report:
    return _process_source(ExcelRowSource(file_path), classifier, columns)


def process_csv(file_path, classifier: Optional[CategoryClassifier] = None,
                columns: Optional[Dict[str, List[str]]] = None) -> Report:
    return _process_source(CSVRowSource(file_path), classifier, columns)


def _process_source(source: TabularSource, classifier: Optional[CategoryClassifier],
                    columns: Optional[Dict[str, List[str]]]) -> Report:
    aggregator = ReceiptAggregator(classifier)
    with source:
        column_index = map_headers(source.header, columns)
        for row_number, row in source.rows():
            aggregator.add_row(row, row_number, column_index)

    report = build_report(aggregator.aggregates())
    logger.info(
        f"Processed {source.file_path.name}: {aggregator.rows_seen} rows, "
        f"{len(aggregator)} receipts, {report.total_receipts} reported, "
        f"{report.mismatch_count} mismatches"
    )
    return report


def setup_logging(log_level: str = 'INFO', log_dir: Optional[str] = None) -> logging.Logger:
    """Setup logging configuration

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for recon.log (stderr only when empty)
    """
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_dir:
        log_file = Path(log_dir) / 'recon.log'
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=LOGGING['format'],
        handlers=handlers,
        force=True,
    )
    return logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the recon command"""
    import argparse

    parser = argparse.ArgumentParser(
        description='Compare draft beer volume with PET bottle volume per receipt',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        'file',
        type=str,
        help='POS export (.xlsx or .csv)'
    )
    parser.add_argument(
        '--json',
        dest='json_output',
        type=str,
        default=None,
        help='Also write the report as JSON to this path'
    )
    parser.add_argument(
        '--rules-dir',
        type=str,
        default=RULES_DIR,
        help=f'Directory containing rule YAML files (default: {RULES_DIR})'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default=LOGGING['level'],
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (default: %(default)s)'
    )
    parser.add_argument(
        '--limit',
        type=int,
        default=REPORT_SETTINGS['message_limit'],
        help='Character budget for the mismatch list (default: %(default)s)'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed for the decorative messages (default: random)'
    )

    args = parser.parse_args(argv)
    setup_logging(args.log_level, PATHS['log_folder'])

    rule_loader = RuleLoader(Path(args.rules_dir), enable_hot_reload=RULES_HOT_RELOAD)
    logger.debug(f"Rules directory: {rule_loader.rules_dir}")

    try:
        classifier = CategoryClassifier(rule_loader)
        columns = load_column_names(rule_loader)
        report = process_file(args.file, classifier, columns)
    except ReconciliationError as e:
        logger.error(f"Failed to process {args.file}: {e}")
        print("Failed to process the file.", file=sys.stderr)
        return 1

    picker = MessagePicker(_seeded_rng(args.seed))
    print(report.format_text(picker, limit=args.limit))
    snark = report.mismatch_snark_text(picker)
    if snark:
        print(snark)

    if args.json_output:
        output_path = Path(args.json_output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(report.to_dict(), f, indent=2, ensure_ascii=False)
        logger.info(f"Report written to {output_path}")

    return 0


def _seeded_rng(seed: Optional[int]):
    if seed is None:
        return None
    return random.Random(seed)


if __name__ == "__main__":
    sys.exit(main())
