"""Company summary card."""

import streamlit as st

from src.app.logic.company_info import build_company_info_context
from src.app.views.colors import sign_color
from src.app.views.common import labeled_value_html, render_html, solid_badge_html
from src.app.views.constants import (
    LABEL_DAILY_CHANGE,
    LABEL_MARKET_CAP,
    LABEL_PE_RATIO,
    LABEL_VOLUME,
)
from src.config.settings import Settings
from src.core.domain_models import CompanySnapshot


def render_company_info(company: CompanySnapshot, settings: Settings) -> None:
    """Render name, price, daily change and headline metrics of a company.

    Args:
        company: Snapshot supplied by the caller, rendered as is
        settings: Display settings (currency symbol)
    """
    context = build_company_info_context(company, settings.currency_symbol)
    change_color = sign_color(context.sign)

    with st.container(border=True):
        col1, col2 = st.columns([3, 2])
        with col1:
            st.header(context.name)
            st.subheader(context.symbol)
        with col2:
            render_html(
                f"<div style='text-align: right; font-size: 1.875rem; font-weight: 700;'>"
                f"{context.price_text}</div>"
            )
            render_html(
                "<div style='text-align: right;'>"
                f"{solid_badge_html(context.change_text, change_color)} "
                f"<span style='color: {change_color}; font-size: 0.875rem;'>"
                f"{context.change_percent_text}</span></div>"
            )

        cols = st.columns(4)
        with cols[0]:
            render_html(labeled_value_html(LABEL_MARKET_CAP, context.market_cap))
        with cols[1]:
            render_html(labeled_value_html(LABEL_PE_RATIO, context.pe_ratio_text))
        with cols[2]:
            render_html(labeled_value_html(LABEL_VOLUME, context.volume_text))
        with cols[3]:
            render_html(
                labeled_value_html(LABEL_DAILY_CHANGE, context.change_text, color=change_color)
            )
