"""Logic layer for the historical price chart.

Prepares the display series and the header/statistics texts.
Pure Python/Polars - no Streamlit UI calls.
"""

from dataclasses import dataclass

import polars as pl

from src.analysis.metrics import PriceSeriesStats, compute_series_stats
from src.app.logic.formatting import (
    ITALIAN_MONTHS_SHORT,
    format_price,
    format_signed,
    format_volume,
    format_with_sign,
)
from src.config.settings import Settings


def prepare_display_series(df_series: pl.DataFrame) -> pl.DataFrame:
    """Add a short date label and round prices for plotting.

    Args:
        df_series: Price series with columns [date, price, volume]

    Returns:
        DataFrame with columns [date, price, volume, formatted_date],
        rows in the input order
    """
    return df_series.with_columns(
        pl.format(
            "{} {}",
            pl.col("date").dt.day(),
            pl.col("date").dt.month().replace_strict(ITALIAN_MONTHS_SHORT, return_dtype=pl.Utf8),
        ).alias("formatted_date"),
        pl.col("price").round(2),
    )


def value_axis_range(stats: PriceSeriesStats, padding: float) -> tuple[float, float]:
    """Value axis bounds: data range widened by `padding` on both ends."""
    return stats.min_price - padding, stats.max_price + padding


@dataclass
class PriceChartContext:
    title: str
    display_series: pl.DataFrame
    stats: PriceSeriesStats | None
    currency_symbol: str = "$"
    currency_code: str = "USD"
    window_days: int = 30

    @property
    def is_empty(self) -> bool:
        return self.stats is None

    def require_stats(self) -> PriceSeriesStats:
        """Statistics of a non-empty series, ValueError for an empty one."""
        if self.stats is None:
            raise ValueError(f"No price data for '{self.title}'")
        return self.stats

    @property
    def net_change_text(self) -> str:
        return f"{format_signed(self.require_stats().net_change)} {self.currency_code}"

    @property
    def percent_change_text(self) -> str:
        stats = self.require_stats()
        change = format_with_sign(stats.percent_change, stats.sign)
        return f"({change}%) ultimi {self.window_days} giorni"

    @property
    def min_price_text(self) -> str:
        return format_price(self.require_stats().min_price, self.currency_symbol)

    @property
    def max_price_text(self) -> str:
        return format_price(self.require_stats().max_price, self.currency_symbol)

    @property
    def average_volume_text(self) -> str:
        return format_volume(self.require_stats().average_volume)

    @property
    def volatility_text(self) -> str:
        return f"{self.require_stats().volatility:.1f}%"


def build_price_chart_context(
    df_series: pl.DataFrame,
    company_name: str,
    settings: Settings,
) -> PriceChartContext:
    """Build the chart context. An empty series yields an empty context."""
    title = f"Grafico Storico - {company_name}"
    if df_series.is_empty():
        return PriceChartContext(title=title, display_series=df_series, stats=None)

    return PriceChartContext(
        title=title,
        display_series=prepare_display_series(df_series),
        stats=compute_series_stats(df_series),
        currency_symbol=settings.currency_symbol,
        currency_code=settings.currency_code,
        window_days=settings.chart_window_days,
    )
