"""Chart rendering components for the price history card.

Pure visualization functions using Plotly for interactive charts.
"""

import plotly.graph_objects as go
import polars as pl
import streamlit as st
from loguru import logger

from src.app.logic.price_chart import PriceChartContext, build_price_chart_context, value_axis_range
from src.app.views.colors import Colors, sign_color
from src.app.views.common import (
    GLOBAL_FONT,
    GLOBAL_MARGINS,
    labeled_value_html,
    render_html,
)
from src.app.views.constants import (
    LABEL_AVERAGE_VOLUME,
    LABEL_DATE,
    LABEL_MAX_PRICE,
    LABEL_MIN_PRICE,
    LABEL_PRICE,
    LABEL_VOLATILITY,
    NO_CHART_DATA_MESSAGE,
)
from src.config.settings import Settings

# translucent blue under the price line
FILL_COLOR = "rgba(37, 99, 235, 0.15)"
MAX_X_TICKS = 8


def make_price_area_chart(context: PriceChartContext, settings: Settings) -> go.Figure:
    """Build the filled price area chart for a non-empty context.

    Args:
        context: Chart context with display series and statistics
        settings: Display settings (padding, height, currency)

    Returns:
        Plotly figure, x axis labels are the formatted dates
    """
    df_display = context.display_series
    y_min, y_max = value_axis_range(context.require_stats(), settings.chart_padding)
    dates = df_display["date"].to_list()
    labels = df_display["formatted_date"].to_list()
    # thin out tick labels on long series
    step = max(1, len(dates) // MAX_X_TICKS)

    fig = go.Figure(
        go.Scatter(
            x=dates,
            y=df_display["price"].to_list(),
            mode="lines",
            name=LABEL_PRICE,
            line=dict(color=Colors.blue, width=3, shape="spline"),
            fill="tozeroy",
            fillcolor=FILL_COLOR,
            connectgaps=True,
            customdata=labels,
            hovertemplate=(
                f"{LABEL_DATE}: %{{customdata}}<br>{LABEL_PRICE}: "
                f"{settings.currency_symbol}%{{y:.2f}}<extra></extra>"
            ),
        )
    )

    fig.update_xaxes(
        showline=False,
        ticks="",
        showgrid=False,
        tickmode="array",
        tickvals=dates[::step],
        ticktext=labels[::step],
    )
    fig.update_yaxes(
        range=[y_min, y_max],
        showline=False,
        ticks="",
        gridcolor=Colors.grid,
        griddash="dash",
        tickprefix=settings.currency_symbol,
        tickformat=".0f",
    )
    fig.update_layout(
        template="plotly_white",
        height=settings.chart_height,
        margin=GLOBAL_MARGINS,
        font=GLOBAL_FONT,
        showlegend=False,
        hovermode="x",
    )
    return fig


def render_chart_statistics(context: PriceChartContext) -> None:
    """Render min/max price, average volume and volatility below the chart."""
    st.divider()
    cols = st.columns(4)
    stats = [
        (LABEL_MIN_PRICE, context.min_price_text),
        (LABEL_MAX_PRICE, context.max_price_text),
        (LABEL_AVERAGE_VOLUME, context.average_volume_text),
        (LABEL_VOLATILITY, context.volatility_text),
    ]
    for col, (label, value) in zip(cols, stats):
        with col:
            render_html(labeled_value_html(label, value, align="center", size="0.875rem"))


def render_price_chart(df_series: pl.DataFrame, company_name: str, settings: Settings) -> None:
    """Render price history card with change header and statistics strip.

    Args:
        df_series: Price series with columns [date, price, volume], chronological
        company_name: Company name for the card title
        settings: Display settings
    """
    context = build_price_chart_context(df_series, company_name, settings)

    with st.container(border=True):
        stats = context.stats
        if stats is None:
            logger.warning(f"No price data available for {company_name}")
            st.subheader(context.title)
            st.info(NO_CHART_DATA_MESSAGE)
            return

        change_color = sign_color(stats.sign)
        col1, col2 = st.columns([3, 2])
        with col1:
            st.subheader(context.title)
        with col2:
            render_html(
                f"<div style='text-align: right; color: {change_color};'>"
                f"<div style='font-size: 0.875rem; font-weight: 500;'>"
                f"{context.net_change_text}</div>"
                f"<div style='font-size: 0.75rem;'>{context.percent_change_text}</div></div>"
            )

        fig = make_price_area_chart(context, settings)
        st.plotly_chart(fig, use_container_width=True)

        render_chart_statistics(context)
