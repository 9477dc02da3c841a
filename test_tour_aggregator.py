"""
Tests for grouping tour records by driver
"""
import unittest
import os
import sys

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from models import TourRecord
from tour_aggregator import aggregate_tours, count_assigned_tours, records_to_dataframe


def tour(tour_id, driver, day='2024-01-01', warehouse='W1'):
    return TourRecord(date=day, warehouse=warehouse, tour_id=tour_id, driver=driver)


class TestAggregateTours(unittest.TestCase):
    """Counts, ordering and exclusion of unassigned tours"""

    def test_counts_per_driver(self):
        records = [tour('T1', 'Alice'), tour('T2', 'Alice'), tour('T3', 'Bob', '2024-01-02', 'W2')]
        stats = aggregate_tours(records)

        self.assertEqual([s.name for s in stats], ['Alice', 'Bob'])
        self.assertEqual(stats[0].tour_count, 2)
        self.assertEqual(stats[0].tour_ids, ['T1', 'T2'])
        self.assertEqual(stats[1].tour_count, 1)
        self.assertEqual(stats[1].tour_ids, ['T3'])

    def test_sorted_by_count_descending(self):
        records = [tour('T1', 'Bob'), tour('T2', 'Alice'), tour('T3', 'Alice'), tour('T4', 'Alice'),
                   tour('T5', 'Carol'), tour('T6', 'Carol')]
        self.assertEqual([s.name for s in aggregate_tours(records)], ['Alice', 'Carol', 'Bob'])

    def test_ties_keep_first_appearance_order(self):
        records = [tour('T1', 'Carol'), tour('T2', 'Alice'), tour('T3', 'Bob'),
                   tour('T4', 'Alice'), tour('T5', 'Carol'), tour('T6', 'Bob')]
        stats = aggregate_tours(records)
        self.assertEqual([s.name for s in stats], ['Carol', 'Alice', 'Bob'])
        self.assertEqual(aggregate_tours(records), stats)

    def test_empty_driver_is_excluded(self):
        records = [tour('T1', 'Alice'), tour('T2', ''), tour('T3', '')]
        stats = aggregate_tours(records)
        self.assertEqual(len(stats), 1)
        self.assertEqual(stats[0].name, 'Alice')

    def test_names_are_case_sensitive(self):
        stats = aggregate_tours([tour('T1', 'Alice'), tour('T2', 'alice')])
        self.assertEqual(sorted(s.name for s in stats), ['Alice', 'alice'])

    def test_duplicate_tour_ids_are_counted(self):
        stats = aggregate_tours([tour('T1', 'Alice'), tour('T1', 'Alice')])
        self.assertEqual(stats[0].tour_count, 2)
        self.assertEqual(stats[0].tour_ids, ['T1', 'T1'])

    def test_tour_count_is_conserved(self):
        records = [tour(f'T{i}', name) for i, name in enumerate(
            ['Alice', 'Bob', '', 'Alice', 'Dan', '', 'Bob', 'Alice'])]
        stats = aggregate_tours(records)
        self.assertEqual(sum(s.tour_count for s in stats), count_assigned_tours(records))
        self.assertEqual(count_assigned_tours(records), 6)
        for stat in stats:
            self.assertEqual(stat.tour_count, len(stat.tour_ids))

    def test_no_records(self):
        self.assertEqual(aggregate_tours([]), [])
        self.assertEqual(aggregate_tours([tour('T1', '')]), [])


class TestRecordsToDataFrame(unittest.TestCase):

    def test_columns(self):
        df = records_to_dataframe([tour('T1', 'Alice')])
        self.assertEqual(list(df.columns), ['date', 'warehouse', 'tour_id', 'driver'])
        self.assertEqual(df.iloc[0]['driver'], 'Alice')


if __name__ == '__main__':
    unittest.main(verbosity=2)
