#!/usr/bin/env python3
"""
Driver Payroll - Python API
Simple programmatic interface for importing tours and computing payroll
"""

from typing import Any, Dict, List, Mapping, Optional, Union
from pathlib import Path

from errors import PayrollError
from export_formatter import build_export_document, write_workbook
from models import PayrollSummary
from payroll_controller import PayrollController, describe_error
from persistence import JsonFileStore, KeyValueStore, MemoryStore, PersistenceAdapter


def summary_to_dict(summary: PayrollSummary) -> Dict[str, Any]:
    """Plain-dict form of a payroll summary (JSON friendly)"""
    return {
        'price_per_tour': summary.price_per_tour,
        'drivers': [
            {
                'name': row.name,
                'tour_count': row.tour_count,
                'gross_pay': row.gross_pay,
                'penalty': row.penalty,
                'net_pay': row.net_pay
            }
            for row in summary.rows
        ],
        'totals': {
            'total_tours': summary.total_tours,
            'total_gross': summary.total_gross,
            'total_penalties': summary.total_penalties,
            'total_payout': summary.total_payout
        }
    }


class PayrollAutomator:
    """
    Main class for automated payroll runs
    Wraps a PayrollController over a chosen store
    """

    def __init__(self, store: Optional[KeyValueStore] = None):
        """
        Args:
            store: Where state is kept. Defaults to an in-memory store, so nothing
                   is shared with the desktop application unless a JsonFileStore is passed.
        """
        self.controller = PayrollController(PersistenceAdapter(store or MemoryStore()))
        self.results_history: List[Dict[str, Any]] = []

    @classmethod
    def with_state_file(cls, state_file: Union[str, Path]) -> 'PayrollAutomator':
        return cls(JsonFileStore(Path(state_file)))

    def process_file(self, file_path: Union[str, Path]) -> Dict[str, Any]:
        """
        Import a tour file and return the resulting payroll

        Example:
            >>> automator = PayrollAutomator()
            >>> result = automator.process_file('tours.xlsx')
            >>> print(result['summary']['totals']['total_payout'])
        """
        file_path = str(Path(file_path).absolute())
        try:
            records = self.controller.import_file(file_path)
            result = {
                'success': True,
                'file_path': file_path,
                'records': len(records),
                'summary': self.get_summary()
            }
        except PayrollError as e:
            result = {
                'success': False,
                'file_path': file_path,
                'error': describe_error(e)
            }

        self.results_history.append(result)
        return result

    def set_price(self, price: Any) -> float:
        return self.controller.set_price(price)

    def set_penalty(self, driver: str, amount: Any) -> float:
        return self.controller.set_penalty(driver, amount)

    def set_penalties(self, penalties: Mapping[str, Any]) -> None:
        for driver, amount in penalties.items():
            self.controller.set_penalty(driver, amount)

    def get_summary(self) -> Dict[str, Any]:
        summary = summary_to_dict(self.controller.summary())
        summary['penalties_without_tours'] = self.controller.orphan_penalties()
        return summary

    def export(self, output_dir: Union[str, Path] = '.') -> Path:
        """Write the payroll workbook and return its path"""
        state = self.controller.state
        document = build_export_document(self.controller.driver_stats, state.price_per_tour, state.penalties)
        return write_workbook(document, str(output_dir))

    def reset(self) -> None:
        self.controller.reset()

    def get_results_history(self) -> List[Dict[str, Any]]:
        return self.results_history.copy()


def quick_summary(file_path: Union[str, Path], price: Optional[float] = None,
                  penalties: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Import one file with an in-memory state and return its payroll

    Example:
        >>> from payroll_api import quick_summary
        >>> result = quick_summary('tours.csv', price=85, penalties={'Alice': 50})
    """
    automator = PayrollAutomator()
    if price is not None:
        automator.set_price(price)
    if penalties:
        automator.set_penalties(penalties)
    return automator.process_file(file_path)
