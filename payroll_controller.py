#!/usr/bin/env python3
"""
Payroll Controller
Single owner of the application state. Every mutation is saved through the
persistence adapter and then reported to the registered on_change listeners.
"""

from typing import Any, Callable, Dict, List, Optional, Sequence

from config import payroll_config
from decoders import DecodeResult, decode_file, decode_file_async
from errors import EmptyImportError, PayrollError
from logger_config import main_logger
from models import AppState, Cell, DriverStat, PayrollSummary, TourRecord
from payroll_calculator import calculate_payroll, orphan_penalties, parse_amount, parse_penalty
from persistence import PersistenceAdapter
from row_normalizer import normalize_rows_with_report
from tour_aggregator import aggregate_tours

ChangeListener = Callable[[AppState], None]


class PayrollController:
    """
    Holds AppState and exposes the only operations that change it:
    import, price edit, penalty edit and reset.
    """

    def __init__(self, adapter: PersistenceAdapter, on_change: Optional[ChangeListener] = None):
        self.adapter = adapter
        self.logger = main_logger
        self._listeners: List[ChangeListener] = []
        if on_change is not None:
            self._listeners.append(on_change)

        self.state = adapter.load_state()
        self._stats: List[DriverStat] = aggregate_tours(self.state.records)
        self.logger.info("PayrollController initialized", records=len(self.state.records),
                         price=self.state.price_per_tour)

    def add_listener(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    # -------- Derived data --------

    @property
    def driver_stats(self) -> List[DriverStat]:
        return self._stats

    def summary(self) -> PayrollSummary:
        return calculate_payroll(self._stats, self.state.price_per_tour, self.state.penalties)

    def orphan_penalties(self) -> Dict[str, float]:
        """Penalties counted in the totals although their driver has no tours"""
        return orphan_penalties(self._stats, self.state.penalties)

    # -------- Mutations --------

    def import_rows(self, file_name: str, rows: Sequence[Optional[Sequence[Cell]]]) -> List[TourRecord]:
        """
        Replace all records with the rows of a newly decoded file.

        Raises:
            EmptyImportError: no row produced a record; the state is left unchanged
        """
        report = normalize_rows_with_report(rows)
        if not report.records:
            raise EmptyImportError(payroll_config.get('data_structure.expected_columns'))

        self.state.records = report.records
        self.state.file_name = file_name
        self._stats = aggregate_tours(self.state.records)
        self.logger.log_processing_step("Imported tours", {
            'file': file_name,
            'records': len(report.records),
            'skipped_rows': report.skipped_rows,
            'drivers': len(self._stats)
        })
        self._commit()
        return report.records

    def apply_decode_result(self, result: DecodeResult) -> None:
        """
        Completion handler for a file read.

        Raises the decode error, or EmptyImportError, without touching the state.
        """
        if not result.ok:
            raise result.error
        self.import_rows(result.file_name, result.rows)

    def import_file(self, file_path: str) -> List[TourRecord]:
        """Decode and import a file synchronously"""
        result = decode_file(file_path)
        if not result.ok:
            raise result.error
        return self.import_rows(result.file_name, result.rows)

    def import_file_async(self, file_path: str,
                          on_done: Callable[[DecodeResult], None]):
        """Decode on a worker thread; on_done receives the DecodeResult and should call apply_decode_result"""
        self.logger.log_processing_step("Reading file in background", {'file': file_path})
        return decode_file_async(file_path, on_done)

    def set_price(self, value: Any) -> float:
        """Set the price per tour; non-numeric input becomes 0"""
        price = parse_amount(value)
        self.state.price_per_tour = price
        self.logger.info("Price per tour updated", price=price)
        self._commit()
        return price

    def set_penalty(self, driver: str, value: Any) -> float:
        """Set one driver's penalty; invalid input is stored as 0"""
        amount = parse_penalty(value)
        penalties = dict(self.state.penalties)
        penalties[driver] = amount
        self.state.penalties = penalties
        self.logger.info("Penalty updated", driver=driver, amount=amount)
        self._commit()
        return amount

    def reset(self) -> None:
        """Clear records, penalties and file name; keep the price per tour"""
        self.state.records = []
        self.state.penalties = {}
        self.state.file_name = None
        self._stats = []
        self.adapter.clear()
        self.logger.info("State reset", price=self.state.price_per_tour)
        self._commit()

    # -------- Internals --------

    def _commit(self) -> None:
        self.adapter.save_state(self.state)
        self._notify()

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self.state)


def describe_error(error: PayrollError) -> str:
    """Message shown to the user for a failed operation"""
    if error.detail:
        return f"{error.user_message()}\n{error.detail}"
    return error.user_message()
