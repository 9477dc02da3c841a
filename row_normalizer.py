#!/usr/bin/env python3
"""
Row Normalizer
Turns raw decoded rows (lists of heterogeneous cells) into TourRecord objects.

Expected column order: Date, Warehouse, Tour, Driver.
The first row is always a header and is dropped without being inspected.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable, List, Optional, Sequence

import numpy as np
import pandas as pd

from config import payroll_config
from logger_config import data_logger
from models import Cell, TourRecord


@dataclass
class NormalizationReport:
    """Counts collected while normalizing one import"""
    data_rows: int = 0
    skipped_rows: int = 0
    records: List[TourRecord] = field(default_factory=list)


def coerce_cell(value: Cell) -> str:
    """
    Convert one raw cell to its string form.

    Rules:
        None, NaN, NaT      -> ''
        str                 -> unchanged
        bool                -> 'true' / 'false'
        integral number     -> digits only ('3', not '3.0')
        other float         -> shortest repr ('2.5')
        datetime at midnight-> 'YYYY-MM-DD'; with a time part 'YYYY-MM-DD HH:MM:SS'
        date                -> 'YYYY-MM-DD'
        anything else       -> str(value)
    """
    if value is None or value is pd.NaT:
        return ''
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, np.bool_)):
        return 'true' if value else 'false'
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    if isinstance(value, (float, np.floating)):
        number = float(value)
        if np.isnan(number):
            return ''
        if np.isinf(number):
            return 'Infinity' if number > 0 else '-Infinity'
        if number.is_integer():
            return str(int(number))
        return repr(number)
    if isinstance(value, datetime):
        if (value.hour, value.minute, value.second, value.microsecond) == (0, 0, 0, 0):
            return value.strftime('%Y-%m-%d')
        return value.strftime('%Y-%m-%d %H:%M:%S')
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _cell_at(row: Sequence[Cell], index: int) -> str:
    return coerce_cell(row[index])


def normalize_rows_with_report(rows: Iterable[Optional[Sequence[Cell]]],
                               min_columns: Optional[int] = None) -> NormalizationReport:
    """Normalize rows and keep track of how many were skipped"""
    if min_columns is None:
        min_columns = payroll_config.get('data_structure.min_columns', 4)
    # Columns 0-3 are always read
    min_columns = max(int(min_columns), 4)

    report = NormalizationReport()
    for index, row in enumerate(rows):
        if index == 0:
            continue
        report.data_rows += 1

        if row is None or len(row) < min_columns:
            report.skipped_rows += 1
            continue

        report.records.append(
            TourRecord(
                date=_cell_at(row, 0),
                warehouse=_cell_at(row, 1),
                tour_id=_cell_at(row, 2),
                driver=_cell_at(row, 3).strip(),
            )
        )

    data_logger.log_data_stats({
        'data_rows': report.data_rows,
        'records': len(report.records),
        'skipped_rows': report.skipped_rows
    }, "NORMALIZED")
    return report


def normalize_rows(rows: Iterable[Optional[Sequence[Cell]]],
                   min_columns: Optional[int] = None) -> List[TourRecord]:
    """
    Convert decoded rows into tour records.

    Args:
        rows: Rows of cells; row 0 is the header. Rows may be None (sparse input).
        min_columns: Minimum cells a row needs to be kept (defaults to config, 4)

    Returns:
        List of TourRecord in input order, header and short rows removed
    """
    return normalize_rows_with_report(rows, min_columns).records
