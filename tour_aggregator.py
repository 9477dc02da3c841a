#!/usr/bin/env python3
"""
Tour Aggregator
Groups tour records by driver and ranks drivers by number of tours
"""

from typing import List, Sequence

import pandas as pd

from logger_config import data_logger
from models import DriverStat, TourRecord


def records_to_dataframe(records: Sequence[TourRecord]) -> pd.DataFrame:
    """Build a DataFrame with one row per tour record"""
    return pd.DataFrame(
        [(r.date, r.warehouse, r.tour_id, r.driver) for r in records],
        columns=['date', 'warehouse', 'tour_id', 'driver']
    )


def aggregate_tours(records: Sequence[TourRecord]) -> List[DriverStat]:
    """
    Count tours per driver.

    Records with an empty driver are ignored. Drivers are matched by exact,
    case-sensitive name. Tour ids keep their encounter order and duplicates.

    Ordering: tour count descending. groupby(sort=False) yields groups in
    order of first appearance and the stable sort keeps that order between
    drivers with the same count.
    """
    df = records_to_dataframe(records)
    df = df[df['driver'] != '']
    if df.empty:
        return []

    tours = df.groupby('driver', sort=False)['tour_id'].agg(list)
    ranked = pd.DataFrame({
        'name': tours.index,
        'tour_ids': tours.values,
        'tour_count': tours.map(len).values
    }).sort_values('tour_count', ascending=False, kind='stable')

    stats = [
        DriverStat(name=str(row.name), tour_count=int(row.tour_count), tour_ids=list(row.tour_ids))
        for row in ranked.itertuples(index=False)
    ]

    data_logger.log_data_stats({
        'drivers': len(stats),
        'tours': sum(stat.tour_count for stat in stats),
        'ignored_without_driver': len(records) - len(df)
    }, "AGGREGATED")
    return stats


def count_assigned_tours(records: Sequence[TourRecord]) -> int:
    """Number of records that carry a driver name"""
    return sum(1 for record in records if record.driver != '')
