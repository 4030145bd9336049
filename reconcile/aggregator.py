#!/usr/bin/env python3
"""
Receipt Aggregator
Folds classified rows into running beer/bottle totals per receipt.

Output order is always taken from explicit insertion-order lists
(receipt_order, bottle_order), never from iterating a dict.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence

from .category_classifier import CategoryClassifier
from .errors import NumberFormatError, RowParseError
from .header_mapper import ColumnIndex, get_cell
from .number_parser import parse_bottle_liters_ml, parse_decimal_to_milli, parse_whole_count

logger = logging.getLogger(__name__)


@dataclass
class ReceiptAggregate:
    receipt_no: str
    issued_at: str = ''
    beer_ml: int = 0
    bottle_by_ml: Dict[int, int] = field(default_factory=dict)
    bottle_order: List[int] = field(default_factory=list)
    bottle_total_ml: int = 0

    def add_beer(self, ml: int) -> None:
        self.beer_ml += ml

    def add_bottles(self, size_ml: int, count: int) -> None:
        if size_ml not in self.bottle_by_ml:
            self.bottle_order.append(size_ml)
            self.bottle_by_ml[size_ml] = 0
        self.bottle_by_ml[size_ml] += count
        self.bottle_total_ml += size_ml * count

    @property
    def has_evidence(self) -> bool:
        return self.beer_ml != 0 or self.bottle_total_ml != 0 or bool(self.bottle_by_ml)


class ReceiptAggregator:
    """Accumulates rows of one file; create a new instance per file"""

    def __init__(self, classifier: Optional[CategoryClassifier] = None):
        self.classifier = classifier or CategoryClassifier()
        self._receipts: Dict[str, ReceiptAggregate] = {}
        self._receipt_order: List[str] = []
        self.rows_seen = 0
        self.rows_skipped = 0

    def add_row(self, row: Sequence[str], row_number: int, columns: ColumnIndex) -> None:
        """
        Apply one data row

        Args:
            row: Raw cells aligned to the header
            row_number: 1-based row number in the file (header is row 1)
            columns: Resolved column positions

        Raises:
            RowParseError: malformed beer quantity, bottle size or bottle count
        """
        self.rows_seen += 1
        receipt_no = get_cell(row, columns.receipt).strip()
        if not receipt_no:
            self.rows_skipped += 1
            return

        agg = self._receipts.get(receipt_no)
        if agg is None:
            agg = ReceiptAggregate(receipt_no=receipt_no)
            self._receipts[receipt_no] = agg
            self._receipt_order.append(receipt_no)

        category = get_cell(row, columns.category).strip()
        product = get_cell(row, columns.product).strip()
        issued_at = get_cell(row, columns.issued_at).strip()
        quantity = get_cell(row, columns.quantity).strip()

        if not agg.issued_at and issued_at:
            agg.issued_at = issued_at

        row_class = self.classifier.classify(category, product)

        if row_class.is_beer:
            try:
                agg.add_beer(parse_decimal_to_milli(quantity))
            except NumberFormatError as e:
                raise RowParseError(row_number, 'beer quantity', e) from e

        if row_class.is_bottle:
            try:
                size_ml = parse_bottle_liters_ml(product)
            except NumberFormatError as e:
                raise RowParseError(row_number, 'bottle size', e) from e
            if size_ml is None:
                logger.debug(f"Row {row_number}: bottle product without size '{product}', skipped")
                return
            try:
                count = parse_whole_count(quantity)
            except NumberFormatError as e:
                raise RowParseError(row_number, 'bottle quantity', e) from e
            agg.add_bottles(size_ml, count)

    def aggregates(self) -> Iterator[ReceiptAggregate]:
        """Aggregates in first-appearance order"""
        for receipt_no in self._receipt_order:
            yield self._receipts[receipt_no]

    def __len__(self) -> int:
        return len(self._receipt_order)
