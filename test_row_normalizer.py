"""
Tests for the row normalizer: header skipping, short rows and cell coercion
"""
import unittest
import os
import sys
from datetime import date, datetime

import numpy as np
import pandas as pd

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from models import TourRecord
from row_normalizer import coerce_cell, normalize_rows, normalize_rows_with_report

HEADER = ['Date', 'Warehouse', 'Tour', 'Driver']


class TestNormalizeRows(unittest.TestCase):
    """Row filtering and record construction"""

    def test_header_row_is_always_dropped(self):
        # A header that looks like data is still dropped
        rows = [
            ['2024-01-01', 'W1', 'T0', 'Zoe'],
            ['2024-01-01', 'W1', 'T1', 'Alice'],
        ]
        records = normalize_rows(rows)
        self.assertEqual(records, [TourRecord('2024-01-01', 'W1', 'T1', 'Alice')])

    def test_only_header_gives_no_records(self):
        self.assertEqual(normalize_rows([HEADER]), [])
        self.assertEqual(normalize_rows([]), [])

    def test_short_rows_are_skipped(self):
        rows = [
            HEADER,
            ['2024-01-01', 'W1', 'T1'],
            ['2024-01-01', 'W1', 'T2', 'Bob'],
            [],
            None,
        ]
        report = normalize_rows_with_report(rows)
        self.assertEqual(report.data_rows, 4)
        self.assertEqual(report.skipped_rows, 3)
        self.assertEqual([r.tour_id for r in report.records], ['T2'])

    def test_extra_columns_are_ignored(self):
        rows = [HEADER, ['2024-01-01', 'W1', 'T1', 'Alice', 'note', 42]]
        self.assertEqual(normalize_rows(rows), [TourRecord('2024-01-01', 'W1', 'T1', 'Alice')])

    def test_driver_is_trimmed(self):
        rows = [HEADER, ['2024-01-01', 'W1', 'T1', '  Alice \r'], ['2024-01-01', 'W1', 'T2', '   ']]
        records = normalize_rows(rows)
        self.assertEqual(records[0].driver, 'Alice')
        self.assertEqual(records[1].driver, '')

    def test_other_fields_are_not_trimmed(self):
        rows = [HEADER, [' 2024-01-01 ', ' W1', 'T1 ', 'Alice']]
        record = normalize_rows(rows)[0]
        self.assertEqual(record.date, ' 2024-01-01 ')
        self.assertEqual(record.warehouse, ' W1')
        self.assertEqual(record.tour_id, 'T1 ')

    def test_order_is_preserved(self):
        rows = [HEADER] + [['2024-01-01', 'W1', f'T{i}', 'Alice'] for i in range(5)]
        self.assertEqual([r.tour_id for r in normalize_rows(rows)], ['T0', 'T1', 'T2', 'T3', 'T4'])

    def test_normalization_is_idempotent(self):
        rows = [HEADER, ['2024-01-01', 'W1', 7, ' Alice'], ['2024-01-02', 'W2', 'T3', 'Bob']]
        first = normalize_rows(rows)
        again = normalize_rows([HEADER] + [[r.date, r.warehouse, r.tour_id, r.driver] for r in first])
        self.assertEqual(first, again)

    def test_larger_min_columns(self):
        rows = [HEADER, ['2024-01-01', 'W1', 'T1', 'Alice'], ['2024-01-01', 'W1', 'T2', 'Bob', 'x']]
        records = normalize_rows(rows, min_columns=5)
        self.assertEqual([r.driver for r in records], ['Bob'])

    def test_min_columns_never_below_four(self):
        rows = [HEADER, ['2024-01-01', 'W1', 'T1']]
        self.assertEqual(normalize_rows(rows, min_columns=2), [])


class TestCoerceCell(unittest.TestCase):
    """String form of raw cells"""

    def test_empty_values(self):
        self.assertEqual(coerce_cell(None), '')
        self.assertEqual(coerce_cell(float('nan')), '')
        self.assertEqual(coerce_cell(np.nan), '')
        self.assertEqual(coerce_cell(pd.NaT), '')

    def test_strings_pass_through(self):
        self.assertEqual(coerce_cell('T-001'), 'T-001')
        self.assertEqual(coerce_cell(''), '')

    def test_numbers(self):
        self.assertEqual(coerce_cell(3), '3')
        self.assertEqual(coerce_cell(3.0), '3')
        self.assertEqual(coerce_cell(2.5), '2.5')
        self.assertEqual(coerce_cell(np.int64(101)), '101')
        self.assertEqual(coerce_cell(np.float64(4.0)), '4')
        self.assertEqual(coerce_cell(float('inf')), 'Infinity')

    def test_booleans(self):
        self.assertEqual(coerce_cell(True), 'true')
        self.assertEqual(coerce_cell(False), 'false')
        self.assertEqual(coerce_cell(np.bool_(True)), 'true')

    def test_dates(self):
        self.assertEqual(coerce_cell(datetime(2024, 1, 1)), '2024-01-01')
        self.assertEqual(coerce_cell(datetime(2024, 1, 1, 8, 30)), '2024-01-01 08:30:00')
        self.assertEqual(coerce_cell(date(2024, 2, 29)), '2024-02-29')
        self.assertEqual(coerce_cell(pd.Timestamp('2024-01-02')), '2024-01-02')


if __name__ == '__main__':
    unittest.main(verbosity=2)
