#!/usr/bin/env python3
"""
End-to-end tests: process_file on generated .xlsx files and a sample .csv export
"""

import tempfile
import unittest
from pathlib import Path

from reconcile import process_csv, process_file, process_xlsx
from reconcile.category_classifier import CategoryClassifier
from reconcile.errors import (
    MissingColumnsError,
    RowParseError,
    StructuralError,
    UnsupportedFileError,
)

from xlsx_helpers import CZECH_HEADERS, HEADERS, ISSUED, write_csv, write_xlsx

TEST_DIR = Path(__file__).parent
MISMATCH_CSV = TEST_DIR / 'data' / 'receipts_mismatch.csv'


class TestProcessXLSX(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_empty_sheet(self):
        path = write_xlsx(self.tmp, None, [])
        with self.assertRaises(StructuralError) as ctx:
            process_xlsx(path)
        self.assertIn('empty sheet', str(ctx.exception))

    def test_missing_headers(self):
        headers = ['Receipt document number', 'Product', 'Issue date']
        path = write_xlsx(self.tmp, headers, [['R1', 'Beer', ISSUED]])
        with self.assertRaises(MissingColumnsError) as ctx:
            process_xlsx(path)
        message = str(ctx.exception)
        self.assertIn('missing required columns', message)
        self.assertIn('Category', message)
        self.assertIn('Quantity sold', message)

    def test_header_bom(self):
        headers = ['\ufeff' + HEADERS[0]] + HEADERS[1:]
        path = write_xlsx(self.tmp, headers, [
            ['R1', 'Pivovar Test', 'Beer', ISSUED, '1'],
            ['R1', 'PET láhve', 'Láhev 1 l', ISSUED, '1'],
        ])
        report = process_xlsx(path)
        self.assertEqual(report.total_receipts, 1)
        self.assertEqual(report.mismatch_count, 0)

    def test_match_beer_and_bottles(self):
        headers = ['Category', 'Receipt document number', 'Product', 'Issue date', 'Quantity sold']
        path = write_xlsx(self.tmp, headers, [
            ['Pivovar Premium', 'R1', 'Beer A', ISSUED, '2'],
            ['PET láhve', 'R1', 'Láhev 1 l', ISSUED, '2'],
            ['PET láhve', 'R1', 'Taška s uchem', ISSUED, '1'],
        ])
        report = process_file(path)
        self.assertEqual(report.total_receipts, 1)
        self.assertEqual(report.mismatch_count, 0)
        rec = report.receipts[0]
        self.assertEqual(rec.beer_ml, 2000)
        self.assertEqual(rec.bottle_total_ml, 2000)
        self.assertEqual(rec.diff_ml, 0)
        self.assertTrue(rec.match)
        self.assertEqual(rec.bottle_by_ml[1000], 2)

    def test_mismatch_diff(self):
        path = write_xlsx(self.tmp, HEADERS, [
            ['R1', 'Pivovar Test', 'Beer', ISSUED, '1'],
            ['R1', 'PET láhve', 'Láhev 0,5 l', ISSUED, '1'],
        ])
        report = process_file(path)
        self.assertEqual(report.mismatch_count, 1)
        rec = report.receipts[0]
        self.assertEqual(rec.diff_ml, -500)
        self.assertFalse(rec.match)
        text = report.format_text()
        self.assertIn('===== Receipt R1 =====', text)
        self.assertIn('Difference: -0.50L', text)
        self.assertIn('Bottles: 0.50L x1', text)
        self.assertNotEqual(report.mismatch_snark_text(), '')

    def test_bottle_quantity_must_be_whole(self):
        path = write_xlsx(self.tmp, HEADERS, [
            ['R1', 'PET láhve', 'Láhev 1 l', ISSUED, '1,5'],
        ])
        with self.assertRaises(RowParseError) as ctx:
            process_xlsx(path)
        self.assertIn('expected whole number', str(ctx.exception))
        self.assertEqual(ctx.exception.row_number, 2)

    def test_parse_comma_liters(self):
        path = write_xlsx(self.tmp, HEADERS, [
            ['R1', 'Pivovar Test', 'Beer', ISSUED, '1,0'],
            ['R1', 'PET láhve', 'Láhev 0,5 l', ISSUED, '2'],
        ])
        rec = process_xlsx(path).receipts[0]
        self.assertEqual(rec.beer_ml, 1000)
        self.assertEqual(rec.bottle_total_ml, 1000)

    def test_numeric_cells(self):
        path = write_xlsx(self.tmp, HEADERS, [
            ['R1', 'Pivovar Test', 'Beer', ISSUED, 1.5],
            ['R1', 'PET láhve', 'Láhev 0,5 l', ISSUED, 3],
        ])
        report = process_xlsx(path)
        self.assertEqual(report.receipts[0].beer_ml, 1500)
        self.assertTrue(report.receipts[0].match)

    def test_pivo_na_cepu_category(self):
        path = write_xlsx(self.tmp, HEADERS, [
            ['R1', 'Pivo na čepu světlé', 'Beer', ISSUED, '1,5'],
            ['R1', 'PET láhve', 'Láhev 0,5 l', ISSUED, '3'],
        ])
        report = process_xlsx(path)
        self.assertEqual(report.mismatch_count, 0)
        self.assertEqual(report.receipts[0].beer_ml, 1500)

    def test_bottle_product_accent_strict(self):
        path = write_xlsx(self.tmp, HEADERS, [
            ['R1', 'Pivovar Test', 'Beer', ISSUED, '1'],
            ['R1', 'PET láhve', 'Lahev 1 l', ISSUED, '1'],
        ])
        rec = process_xlsx(path).receipts[0]
        self.assertEqual(rec.bottle_total_ml, 0)
        self.assertFalse(rec.match)

    def test_row_error_aborts_whole_file(self):
        path = write_xlsx(self.tmp, HEADERS, [
            ['R1', 'Pivovar Test', 'Beer', ISSUED, '1'],
            ['R2', 'Pivovar Test', 'Beer', ISSUED, 'lots'],
            ['R3', 'Pivovar Test', 'Beer', ISSUED, '1'],
        ])
        with self.assertRaises(RowParseError) as ctx:
            process_file(path)
        self.assertIn('row 3', str(ctx.exception))

    def test_czech_headers(self):
        path = write_xlsx(self.tmp, CZECH_HEADERS, [
            ['R1', 'Pivovar Test', 'Beer', ISSUED, '1'],
            ['R1', 'PET láhve', 'Láhev 1 l', ISSUED, '1'],
        ])
        self.assertEqual(process_file(path).mismatch_count, 0)

    def test_receipt_without_evidence_is_excluded(self):
        path = write_xlsx(self.tmp, HEADERS, [
            ['R1', 'Jídlo', 'Guláš', ISSUED, '1'],
            ['R2', 'Pivovar Test', 'Beer', ISSUED, '1'],
        ])
        report = process_file(path)
        self.assertEqual([r.receipt_no for r in report.receipts], ['R2'])

    def test_custom_classifier(self):
        path = write_xlsx(self.tmp, HEADERS, [
            ['R1', 'Tank', 'Beer', ISSUED, '1'],
        ])
        classifier = CategoryClassifier(beer_category_prefixes=['Tank'])
        self.assertEqual(process_file(path, classifier).receipts[0].beer_ml, 1000)


class TestProcessCSV(unittest.TestCase):

    def test_mismatch_file(self):
        report = process_csv(MISMATCH_CSV)
        expected = {
            '3001': (2000, 1500, -500, False),
            '3002': (1000, 2000, 1000, False),
            '3003': (1500, 1000, -500, False),
            '3004': (2000, 2000, 0, True),
            '3005': (1000, 1000, 0, True),
            '3006': (0, 1000, 1000, False),
            '3007': (500, 0, -500, False),
            '3008': (2500, 2500, 0, True),
            '3009': (1000, 0, -1000, False),
            '3010': (3000, 2500, -500, False),
        }
        self.assertEqual([r.receipt_no for r in report.receipts], list(expected))
        self.assertEqual(report.total_receipts, len(expected))
        self.assertEqual(report.mismatch_count, 7)
        for rec in report.receipts:
            beer, bottles, diff, match = expected[rec.receipt_no]
            self.assertEqual((rec.beer_ml, rec.bottle_total_ml, rec.diff_ml, rec.match),
                             (beer, bottles, diff, match), rec.receipt_no)

    def test_first_issued_at(self):
        report = process_file(MISMATCH_CSV)
        by_no = {r.receipt_no: r for r in report.receipts}
        self.assertEqual(by_no['3008'].issued_at, '2026-02-06 10:35:00')
        self.assertEqual(by_no['3008'].bottles(), [(1500, 1), (1000, 1)])

    def test_truncated_text_for_many_mismatches(self):
        with tempfile.TemporaryDirectory() as tmp:
            lines = [','.join(HEADERS)]
            lines += [f'R{i},Pivovar,Beer,{ISSUED},1' for i in range(100)]
            report = process_file(write_csv(tmp, lines))
        self.assertEqual(report.mismatch_count, 100)
        self.assertTrue(report.format_text().endswith('...truncated'))

    def test_tab_separated(self):
        with tempfile.TemporaryDirectory() as tmp:
            lines = ['\t'.join(HEADERS), f'R1\tPivovar\tBeer\t{ISSUED}\t1,5']
            report = process_file(write_csv(tmp, lines))
        self.assertEqual(report.receipts[0].beer_ml, 1500)

    def test_missing_quantity_column(self):
        with tempfile.TemporaryDirectory() as tmp:
            lines = [','.join(HEADERS[:4]), f'R1,Pivovar,Beer,{ISSUED}']
            with self.assertRaises(MissingColumnsError) as ctx:
                process_file(write_csv(tmp, lines))
        self.assertEqual(ctx.exception.missing, ['Quantity sold'])


class TestProcessFile(unittest.TestCase):

    def test_unsupported(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / 'test.txt'
            path.write_text('x', encoding='utf-8')
            with self.assertRaises(UnsupportedFileError) as ctx:
                process_file(path)
        self.assertIn('unsupported file type', str(ctx.exception))

    def test_unsupported_is_checked_before_reading(self):
        with self.assertRaises(UnsupportedFileError):
            process_file('/no/such/file.xls')

    def test_extension_is_case_insensitive(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = write_csv(tmp, [','.join(HEADERS), f'R1,Pivovar,Beer,{ISSUED},1'], name='EXPORT.CSV')
            self.assertEqual(process_file(path).total_receipts, 1)


if __name__ == '__main__':
    unittest.main()
