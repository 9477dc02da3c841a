"""
Tests for saving and loading the payroll state
"""
import unittest
import json
import os
import sys
import tempfile
import shutil
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from models import AppState, TourRecord
from persistence import JsonFileStore, MemoryStore, PersistenceAdapter, format_price

RECORDS_KEY = 'driverApp_records'
PRICE_KEY = 'driverApp_tourPrice'
PENALTIES_KEY = 'driverApp_penalties'
FILE_NAME_KEY = 'driverApp_fileName'


def sample_state():
    return AppState(
        records=[
            TourRecord('2024-01-01', 'W1', 'T1', 'Alice'),
            TourRecord('2024-01-01', 'W1', 'T2', 'Alice'),
            TourRecord('2024-01-02', 'W2', 'T3', 'Zoë'),
        ],
        price_per_tour=82.5,
        penalties={'Alice': 50.0, 'Carol': 20.0},
        file_name='tours_january.xlsx'
    )


class TestPersistenceAdapter(unittest.TestCase):
    """Round trips and per-key defaults"""

    def setUp(self):
        self.store = MemoryStore()
        self.adapter = PersistenceAdapter(self.store)

    def test_round_trip(self):
        state = sample_state()
        self.adapter.save_state(state)
        self.assertEqual(self.adapter.load_state(), state)

    def test_round_trip_is_byte_identical(self):
        self.adapter.save_state(sample_state())
        first = dict(self.store.data)
        self.adapter.save_state(self.adapter.load_state())
        self.assertEqual(self.store.data, first)

    def test_stored_values(self):
        self.adapter.save_state(sample_state())
        self.assertEqual(self.store.get(PRICE_KEY), '82.5')
        self.assertEqual(self.store.get(FILE_NAME_KEY), 'tours_january.xlsx')
        self.assertEqual(json.loads(self.store.get(PENALTIES_KEY)), {'Alice': 50.0, 'Carol': 20.0})

        records = json.loads(self.store.get(RECORDS_KEY))
        self.assertEqual(records[0], {'date': '2024-01-01', 'warehouse': 'W1', 'tourId': 'T1', 'driver': 'Alice'})
        self.assertIn('Zoë', self.store.get(RECORDS_KEY))

    def test_empty_store_gives_defaults(self):
        state = self.adapter.load_state()
        self.assertEqual(state.records, [])
        self.assertEqual(state.price_per_tour, 80.0)
        self.assertEqual(state.penalties, {})
        self.assertIsNone(state.file_name)

    def test_keys_load_independently(self):
        self.store.set(RECORDS_KEY, '{not json')
        self.store.set(PRICE_KEY, '95')
        self.store.set(PENALTIES_KEY, '{"Bob": 15}')

        state = self.adapter.load_state()
        self.assertEqual(state.records, [])
        self.assertEqual(state.price_per_tour, 95.0)
        self.assertEqual(state.penalties, {'Bob': 15.0})

    def test_bad_price_falls_back_to_default(self):
        for raw in ['abc', 'NaN', 'Infinity', '']:
            self.store.set(PRICE_KEY, raw)
            self.assertEqual(self.adapter.load_state().price_per_tour, 80.0, raw)

    def test_bad_penalty_values_become_zero(self):
        self.store.set(PENALTIES_KEY, '{"Alice": "oops", "Bob": -5, "Carol": "12.5"}')
        self.assertEqual(self.adapter.load_state().penalties, {'Alice': 0.0, 'Bob': 0.0, 'Carol': 12.5})

    def test_malformed_record_entries_are_skipped(self):
        self.store.set(RECORDS_KEY, '[{"date": "d", "warehouse": "w", "tourId": "t", "driver": "Ann"}, 5, "x"]')
        self.assertEqual(self.adapter.load_state().records, [TourRecord('d', 'w', 't', 'Ann')])

    def test_null_record_fields_load_as_empty(self):
        self.store.set(RECORDS_KEY, '[{"date": null, "warehouse": "W1", "tourId": 7, "driver": null}, {"tourId": "T2"}]')
        self.assertEqual(self.adapter.load_state().records, [
            TourRecord('', 'W1', '7', ''),
            TourRecord('', '', 'T2', ''),
        ])

    def test_file_name_key_removed_without_file(self):
        self.adapter.save_state(sample_state())
        state = sample_state()
        state.file_name = None
        self.adapter.save_state(state)
        self.assertNotIn(FILE_NAME_KEY, self.store.data)
        self.assertIsNone(self.adapter.load_state().file_name)

    def test_clear_keeps_price(self):
        self.adapter.save_state(sample_state())
        self.adapter.clear()
        self.assertEqual(set(self.store.data), {PRICE_KEY})
        self.assertEqual(self.adapter.load_state().price_per_tour, 82.5)

    def test_custom_default_price(self):
        adapter = PersistenceAdapter(MemoryStore(), default_price=100)
        self.assertEqual(adapter.load_state().price_per_tour, 100.0)

    def test_snapshot(self):
        self.adapter.save_state(sample_state())
        snapshot = self.adapter.snapshot()
        self.assertEqual(snapshot['price'], '82.5')
        self.assertEqual(snapshot['file_name'], 'tours_january.xlsx')

    def test_format_price(self):
        self.assertEqual(format_price(80), '80')
        self.assertEqual(format_price(80.0), '80')
        self.assertEqual(format_price(82.5), '82.5')
        self.assertEqual(format_price(1234567), '1234567')
        self.assertEqual(format_price(12.345678), '12.345678')


class TestJsonFileStore(unittest.TestCase):
    """State file on disk"""

    @classmethod
    def setUpClass(cls):
        cls.test_data_dir = Path(tempfile.mkdtemp(prefix="payroll_store_test_"))

    @classmethod
    def tearDownClass(cls):
        if cls.test_data_dir.exists():
            shutil.rmtree(cls.test_data_dir)

    def test_state_survives_reopen(self):
        path = self.test_data_dir / 'nested' / 'state.json'
        PersistenceAdapter(JsonFileStore(path)).save_state(sample_state())

        self.assertTrue(path.exists())
        reloaded = PersistenceAdapter(JsonFileStore(path)).load_state()
        self.assertEqual(reloaded, sample_state())

    def test_remove_rewrites_file(self):
        path = self.test_data_dir / 'remove.json'
        store = JsonFileStore(path)
        store.set('a', '1')
        store.set('b', '2')
        store.remove('a')
        store.remove('missing')

        with open(path, 'r', encoding='utf-8') as f:
            self.assertEqual(json.load(f), {'b': '2'})

    def test_unreadable_file_starts_empty(self):
        path = self.test_data_dir / 'broken.json'
        path.write_text('{broken', encoding='utf-8')
        self.assertEqual(JsonFileStore(path).data, {})

    def test_non_string_values_are_dropped(self):
        path = self.test_data_dir / 'mixed.json'
        path.write_text('{"a": "1", "b": 2, "c": null}', encoding='utf-8')
        self.assertEqual(JsonFileStore(path).data, {'a': '1'})


if __name__ == '__main__':
    unittest.main(verbosity=2)
