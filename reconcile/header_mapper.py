#!/usr/bin/env python3
"""
Header Mapper
Resolves the five required logical columns to positions in the header row.
Header names come from 10_columns.yaml (first name per role is canonical).
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from .errors import MissingColumnsError

logger = logging.getLogger(__name__)

# Role order is also the order missing columns are reported in
COLUMN_ROLES = ('receipt', 'category', 'product', 'issued_at', 'quantity')

DEFAULT_COLUMNS: Dict[str, List[str]] = {
    'receipt': ['Receipt document number', 'Číslo daňového dokladu'],
    'category': ['Category', 'Kategorie'],
    'product': ['Product', 'Produkt'],
    'issued_at': ['Issue date', 'Datum vystavení'],
    'quantity': ['Quantity sold', 'Prodané množství'],
}


@dataclass(frozen=True)
class ColumnIndex:
    """Zero-based positions of the required columns (-1 = unresolved)"""
    receipt: int = -1
    category: int = -1
    product: int = -1
    issued_at: int = -1
    quantity: int = -1


def normalize_header(raw: object) -> str:
    """Trim whitespace and a leading byte-order mark"""
    header = str(raw).strip() if raw is not None else ''
    if header.startswith('\ufeff'):
        header = header[1:].strip()
    return header


def load_column_names(rule_loader=None) -> Dict[str, List[str]]:
    """
    Accepted header names per role

    Args:
        rule_loader: Optional RuleLoader; roles listed in 10_columns.yaml
                     replace the built-in names for that role

    Returns:
        Dictionary role -> list of names (first one canonical)
    """
    columns = {role: list(names) for role, names in DEFAULT_COLUMNS.items()}
    if rule_loader is None:
        return columns

    for role, names in rule_loader.get_column_rules().items():
        if role not in columns:
            logger.warning(f"Ignoring unknown column role in rules: {role}")
            continue
        if isinstance(names, str):
            names = [names]
        names = [str(n) for n in (names or []) if n]
        if names:
            columns[role] = names
    return columns


def map_headers(header_row: Sequence[str],
                columns: Optional[Dict[str, List[str]]] = None) -> ColumnIndex:
    """
    Map header cells to column roles

    Matching is exact and case-insensitive after normalize_header().
    When a header repeats, the last occurrence wins.

    Args:
        header_row: Cells of the first row
        columns: Accepted names per role (defaults to DEFAULT_COLUMNS)

    Returns:
        ColumnIndex with every role resolved

    Raises:
        MissingColumnsError: listing the canonical name of every missing role
    """
    columns = columns or DEFAULT_COLUMNS
    lookup = {}
    for role in COLUMN_ROLES:
        for name in columns[role]:
            lookup.setdefault(normalize_header(name).casefold(), role)

    positions = {role: -1 for role in COLUMN_ROLES}
    for i, raw in enumerate(header_row):
        role = lookup.get(normalize_header(raw).casefold())
        if role is not None:
            positions[role] = i

    missing = [columns[role][0] for role in COLUMN_ROLES if positions[role] < 0]
    if missing:
        raise MissingColumnsError(missing)

    logger.debug(f"Column positions: {positions}")
    return ColumnIndex(**positions)


def get_cell(row: Sequence[str], idx: int) -> str:
    """Cell at idx, or '' when the row is shorter"""
    if idx < 0 or idx >= len(row):
        return ''
    return row[idx]
