#!/usr/bin/env python3
"""
Header Mapper Tests
"""

import unittest
from pathlib import Path

from reconcile.errors import MissingColumnsError, StructuralError
from reconcile.header_mapper import (
    ColumnIndex,
    get_cell,
    load_column_names,
    map_headers,
    normalize_header,
)
from reconcile.rule_loader import RuleLoader

from xlsx_helpers import CZECH_HEADERS, HEADERS

PROJECT_ROOT = Path(__file__).parent.parent


class TestMapHeaders(unittest.TestCase):

    def test_english_headers(self):
        idx = map_headers(HEADERS)
        self.assertEqual(idx, ColumnIndex(receipt=0, category=1, product=2, issued_at=3, quantity=4))

    def test_czech_headers(self):
        idx = map_headers(CZECH_HEADERS)
        self.assertEqual(idx.receipt, 0)
        self.assertEqual(idx.quantity, 4)

    def test_case_whitespace_and_bom(self):
        headers = ['\ufeffRECEIPT DOCUMENT NUMBER', '  category ', 'Product', 'issue date', 'Quantity Sold']
        idx = map_headers(headers)
        self.assertEqual(idx.receipt, 0)
        self.assertEqual(idx.category, 1)

    def test_column_order_does_not_matter(self):
        headers = ['Extra', 'Quantity sold', 'Category', 'Issue date', 'Receipt document number', 'Product']
        idx = map_headers(headers)
        self.assertEqual(idx, ColumnIndex(receipt=4, category=2, product=5, issued_at=3, quantity=1))

    def test_all_missing_columns_are_listed(self):
        with self.assertRaises(MissingColumnsError) as ctx:
            map_headers(['Receipt document number', 'Product', 'Issue date'])
        self.assertEqual(ctx.exception.missing, ['Category', 'Quantity sold'])
        self.assertIn('missing required columns: Category, Quantity sold', str(ctx.exception))
        self.assertIsInstance(ctx.exception, StructuralError)

    def test_prefix_is_not_a_match(self):
        with self.assertRaises(MissingColumnsError) as ctx:
            map_headers(['Receipt document number 2', 'Category', 'Product', 'Issue date', 'Quantity sold'])
        self.assertEqual(ctx.exception.missing, ['Receipt document number'])

    def test_custom_column_names(self):
        columns = load_column_names()
        columns['quantity'] = ['Qty']
        idx = map_headers(['Receipt document number', 'Category', 'Product', 'Issue date', 'QTY'], columns)
        self.assertEqual(idx.quantity, 4)

    def test_column_rules_file(self):
        columns = load_column_names(RuleLoader(PROJECT_ROOT / 'recon_rules'))
        self.assertEqual(columns['receipt'][0], 'Receipt document number')
        self.assertIn('Prodané množství', columns['quantity'])


class TestCellHelpers(unittest.TestCase):

    def test_normalize_header(self):
        self.assertEqual(normalize_header('\ufeff Product '), 'Product')
        self.assertEqual(normalize_header(None), '')

    def test_get_cell_short_row(self):
        self.assertEqual(get_cell(['a', 'b'], 1), 'b')
        self.assertEqual(get_cell(['a', 'b'], 4), '')
        self.assertEqual(get_cell(['a'], -1), '')


if __name__ == '__main__':
    unittest.main()
