#!/usr/bin/env python3
"""
Payroll Calculator
Applies the price per tour and the penalty map to driver statistics
"""

import math
from typing import Any, Dict, List, Mapping, Sequence

import pandas as pd

from config import payroll_config
from models import DriverStat, PayrollRow, PayrollSummary


def parse_amount(value: Any) -> float:
    """
    Parse a user-entered amount.

    Numbers pass through; strings are stripped of spaces and currency signs and
    may use a decimal comma. Anything that is not a finite number gives 0.0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip().replace('€', '').replace('$', '').replace(' ', '')
        if text.count(',') == 1 and '.' not in text:
            text = text.replace(',', '.')
        try:
            number = float(text)
        except ValueError:
            return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def parse_penalty(value: Any) -> float:
    """Penalties are never negative"""
    return max(parse_amount(value), 0.0)


def calculate_payroll(stats: Sequence[DriverStat], price_per_tour: float,
                      penalties: Mapping[str, float]) -> PayrollSummary:
    """
    Compute gross, penalty and net pay per driver plus grand totals.

    Args:
        stats: Aggregated driver statistics (already ordered)
        price_per_tour: Amount paid per tour
        penalties: Driver name -> penalty amount

    Returns:
        PayrollSummary. total_penalties covers the whole penalty map, including
        drivers that have no tours in stats.
    """
    price = parse_amount(price_per_tour)

    rows: List[PayrollRow] = []
    for stat in stats:
        gross = stat.tour_count * price
        penalty = penalties.get(stat.name, 0) or 0
        rows.append(PayrollRow(
            name=stat.name,
            tour_count=stat.tour_count,
            gross_pay=gross,
            penalty=penalty,
            net_pay=gross - penalty
        ))

    total_tours = sum(stat.tour_count for stat in stats)
    total_penalties = sum(penalties.values())
    total_gross = total_tours * price

    return PayrollSummary(
        rows=rows,
        price_per_tour=price,
        total_tours=total_tours,
        total_gross=total_gross,
        total_penalties=total_penalties,
        total_payout=total_gross - total_penalties
    )


def orphan_penalties(stats: Sequence[DriverStat], penalties: Mapping[str, float]) -> Dict[str, float]:
    """Penalty entries whose driver has no tours in the current data"""
    present = {stat.name for stat in stats}
    return {name: amount for name, amount in penalties.items() if name not in present}


def summary_to_dataframe(summary: PayrollSummary) -> pd.DataFrame:
    """Tabular view of the summary: one row per driver, then the totals row"""
    data = [
        [row.name, row.tour_count, row.gross_pay, row.penalty, row.net_pay]
        for row in summary.rows
    ]
    data.append([
        payroll_config.get('formatting.total_label', 'TOTAL'), summary.total_tours, summary.total_gross,
        summary.total_penalties, summary.total_payout
    ])
    return pd.DataFrame(data, columns=payroll_config.get('formatting.headers'))


def format_currency(amount: float) -> str:
    """Display form matching the export number format: 1,234.50 €"""
    symbol = payroll_config.get('formatting.currency_symbol', '€')
    return f"{parse_amount(amount):,.2f} {symbol}"
