#!/usr/bin/env python3
"""
Report Builder & Formatter
Turns finished receipt aggregates into a Report and renders the plain-text
summary sent back to the user.

Text layout of one mismatch card:

    ===== Receipt R1 =====
    Time: 2026-02-06 10:00:00
    Total beer: 1.00L
    Total bottles: 0.50L
    Difference: -0.50L
    Bottles: 0.50L x1
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .config import REPORT_SETTINGS
from .aggregator import ReceiptAggregate
from .messages import MessagePicker, get_picker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReceiptReport:
    receipt_no: str
    issued_at: str
    beer_ml: int
    bottle_by_ml: Dict[int, int]
    bottle_order: Tuple[int, ...]
    bottle_total_ml: int
    diff_ml: int
    match: bool

    @classmethod
    def from_aggregate(cls, agg: ReceiptAggregate) -> 'ReceiptReport':
        diff = agg.bottle_total_ml - agg.beer_ml
        return cls(
            receipt_no=agg.receipt_no,
            issued_at=agg.issued_at,
            beer_ml=agg.beer_ml,
            bottle_by_ml=dict(agg.bottle_by_ml),
            bottle_order=tuple(agg.bottle_order),
            bottle_total_ml=agg.bottle_total_ml,
            diff_ml=diff,
            match=diff == 0,
        )

    def bottles(self) -> List[Tuple[int, int]]:
        """(size_ml, count) pairs in first-seen order"""
        return [(ml, self.bottle_by_ml[ml]) for ml in self.bottle_order]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'receipt_no': self.receipt_no,
            'issued_at': self.issued_at,
            'beer_ml': self.beer_ml,
            'bottle_total_ml': self.bottle_total_ml,
            'diff_ml': self.diff_ml,
            'match': self.match,
            'bottles': [{'size_ml': ml, 'count': count} for ml, count in self.bottles()],
        }


@dataclass
class Report:
    receipts: List[ReceiptReport] = field(default_factory=list)
    total_receipts: int = 0
    mismatch_count: int = 0

    @property
    def mismatches(self) -> List[ReceiptReport]:
        return [r for r in self.receipts if not r.match]

    def format_text(self, picker: Optional[MessagePicker] = None,
                    limit: Optional[int] = None) -> str:
        """
        Human-readable summary

        Args:
            picker: Message source for the decorative line (random by default)
            limit: Character budget for mismatch cards (default from REPORT_SETTINGS)

        Returns:
            Summary text; long mismatch lists end with the truncation marker
        """
        if not self.receipts:
            return REPORT_SETTINGS['empty_report_text']

        if self.mismatch_count == 0:
            return (f"{get_picker(picker).match_message()}\n"
                    f"Checked {self.total_receipts} receipts. All beer vs bottles match.")

        limit = REPORT_SETTINGS['message_limit'] if limit is None else limit
        text = f"Checked {self.total_receipts} receipts. Found {self.mismatch_count} mismatches.\n"
        for rec in self.mismatches:
            card = format_mismatch_card(rec)
            if len(text) + len(card) > limit:
                logger.debug(f"Report text truncated at receipt {rec.receipt_no}")
                text += REPORT_SETTINGS['truncation_marker']
                break
            text += card

        return text.strip()

    def mismatch_snark_text(self, picker: Optional[MessagePicker] = None) -> str:
        """Extra line for reports with mismatches; '' otherwise"""
        if self.mismatch_count == 0:
            return ''
        picker = get_picker(picker)
        return f"{picker.mismatch_message()}\n{picker.snark(False)}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'total_receipts': self.total_receipts,
            'mismatch_count': self.mismatch_count,
            'receipts': [r.to_dict() for r in self.receipts],
        }


def build_report(aggregates: Iterable[ReceiptAggregate]) -> Report:
    """
    Build the report from aggregates given in first-appearance order.
    Receipts with neither beer nor bottles are left out.
    """
    report = Report()
    for agg in aggregates:
        if not agg.has_evidence:
            continue
        rec = ReceiptReport.from_aggregate(agg)
        if not rec.match:
            report.mismatch_count += 1
        report.receipts.append(rec)

    report.total_receipts = len(report.receipts)
    return report


def format_liters(ml: int) -> str:
    """1500 -> '1.50L'; rounds the binary float, so 1005 -> '1.00L'"""
    return f"{ml / 1000:.2f}L"


def format_diff(diff_ml: int) -> str:
    """Signed liters, '+' for zero and above"""
    if diff_ml < 0:
        return '-' + format_liters(-diff_ml)
    return '+' + format_liters(diff_ml)


def format_bottle_list(rec: ReceiptReport) -> str:
    bottles = rec.bottles()
    if not bottles:
        return '-'
    return ', '.join(f"{format_liters(ml)} x{count}" for ml, count in bottles)


def format_mismatch_card(rec: ReceiptReport) -> str:
    return (
        f"===== Receipt {rec.receipt_no} =====\n"
        f"Time: {rec.issued_at or '-'}\n"
        f"Total beer: {format_liters(rec.beer_ml)}\n"
        f"Total bottles: {format_liters(rec.bottle_total_ml)}\n"
        f"Difference: {format_diff(rec.diff_ml)}\n"
        f"Bottles: {format_bottle_list(rec)}\n\n"
    )
