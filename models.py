"""
Data structures shared by the normalizer, aggregator, calculator and persistence layers
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, List, Optional, Union

Cell = Union[str, int, float, bool, date, datetime, None]


@dataclass(frozen=True)
class TourRecord:
    """One delivery tour as read from an input row"""
    date: str
    warehouse: str
    tour_id: str
    driver: str

    def to_dict(self) -> Dict[str, str]:
        return {
            'date': self.date,
            'warehouse': self.warehouse,
            'tourId': self.tour_id,
            'driver': self.driver,
        }


@dataclass
class DriverStat:
    """Tours grouped under one driver; tour_count always equals len(tour_ids)"""
    name: str
    tour_count: int = 0
    tour_ids: List[str] = field(default_factory=list)

    def add_tour(self, tour_id: str) -> None:
        self.tour_ids.append(tour_id)
        self.tour_count = len(self.tour_ids)


@dataclass
class PayrollRow:
    name: str
    tour_count: int
    gross_pay: float
    penalty: float
    net_pay: float


@dataclass
class PayrollSummary:
    """
    Per-driver payroll rows plus grand totals.

    total_penalties sums every entry of the penalty map, including drivers
    that have no row in this summary, so total_payout can differ from the
    sum of the rows' net_pay.
    """
    rows: List[PayrollRow]
    price_per_tour: float
    total_tours: int
    total_gross: float
    total_penalties: float
    total_payout: float


@dataclass
class AppState:
    """Everything that is persisted between sessions"""
    records: List[TourRecord] = field(default_factory=list)
    price_per_tour: float = 80.0
    penalties: Dict[str, float] = field(default_factory=dict)
    file_name: Optional[str] = None
