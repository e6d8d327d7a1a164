"""Derived price metrics for the historical chart.

All values are recomputed on every render from the series as given;
samples are never re-sorted.
"""

import math
from dataclasses import dataclass

import polars as pl
from loguru import logger

from src.core.domain_models import ChangeSign


def classify_change(value: float) -> ChangeSign:
    """Classify a change for styling. Zero counts as positive."""
    return ChangeSign.POSITIVE if value >= 0 else ChangeSign.NEGATIVE


def percent_change(first_price: float, last_price: float) -> float:
    """Percent change between two prices, 0.0 if the base price is not positive."""
    if first_price > 0:
        return (last_price - first_price) / first_price * 100
    return 0.0


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves go up."""
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class PriceSeriesStats:
    """Summary statistics of a non-empty price series.

    `volatility` is the absolute percent change over the window. It is a
    simple indicator shown next to the chart, not a standard deviation.
    """

    first_price: float
    last_price: float
    net_change: float
    percent_change: float
    sign: ChangeSign
    min_price: float
    max_price: float
    average_volume: int
    volatility: float
    sample_count: int

    @property
    def is_positive(self) -> bool:
        return self.sign == ChangeSign.POSITIVE


def compute_series_stats(df_series: pl.DataFrame) -> PriceSeriesStats | None:
    """Compute the derived metrics of a price series.

    Args:
        df_series: Price series with columns [date, price, volume] in
            chronological order

    Returns:
        PriceSeriesStats, or None if the series is empty
    """
    if df_series.is_empty():
        logger.debug("Empty price series, skipping statistics")
        return None

    prices = df_series.get_column("price")
    first_price = float(prices.item(0))
    last_price = float(prices.item(-1))
    net_change = last_price - first_price
    change_pct = percent_change(first_price, last_price)

    summary = df_series.select(
        pl.col("price").min().alias("min_price"),
        pl.col("price").max().alias("max_price"),
        pl.col("volume").sum().alias("total_volume"),
        pl.len().alias("count"),
    ).row(0, named=True)

    stats = PriceSeriesStats(
        first_price=first_price,
        last_price=last_price,
        net_change=net_change,
        percent_change=change_pct,
        sign=classify_change(net_change),
        min_price=float(summary["min_price"]),
        max_price=float(summary["max_price"]),
        average_volume=round_half_up(summary["total_volume"] / summary["count"]),
        volatility=abs(change_pct),
        sample_count=summary["count"],
    )
    logger.debug(
        f"Series stats: {stats.sample_count} samples, change {stats.net_change:+.2f} "
        f"({stats.percent_change:+.2f}%), range {stats.min_price:.2f}-{stats.max_price:.2f}"
    )
    return stats
