"""AI recommendation card."""

import streamlit as st

from src.app.logic.recommendation import build_recommendation_context
from src.app.views.colors import Colors, action_color, confidence_style
from src.app.views.common import (
    labeled_value_html,
    outline_badge_html,
    preformatted_block_html,
    render_html,
    solid_badge_html,
)
from src.app.views.constants import (
    DISCLAIMER_TEXT,
    LABEL_ANALYSIS,
    LABEL_CONFIDENCE,
    LABEL_RECOMMENDATION_TITLE,
    LABEL_RISK_MANAGEMENT,
    LABEL_STOP_LOSS,
    LABEL_TARGET_PRICE,
    LABEL_TIMEFRAME,
)
from src.config.settings import Settings
from src.core.domain_models import TradeRecommendation


def render_recommendation(recommendation: TradeRecommendation, settings: Settings) -> None:
    """Render the recommendation with action/confidence badges and narratives.

    Stop loss is always red and target price always green, whatever
    their values.
    """
    context = build_recommendation_context(recommendation, settings.currency_symbol)
    action_badge = solid_badge_html(
        context.action_label, action_color(context.action), large=True
    )
    confidence_badge = outline_badge_html(
        f"{LABEL_CONFIDENCE}: {context.confidence_label}",
        confidence_style(context.confidence),
    )

    with st.container(border=True):
        col1, col2 = st.columns([1, 1])
        with col1:
            st.header(LABEL_RECOMMENDATION_TITLE)
        with col2:
            render_html(
                "<div style='text-align: right; padding-top: 1rem;'>"
                f"{action_badge} {confidence_badge}</div>"
            )

        cols = st.columns(3)
        with cols[0]:
            render_html(
                labeled_value_html(
                    LABEL_STOP_LOSS, context.stop_loss_text, color=Colors.red, size="1.5rem"
                )
            )
        with cols[1]:
            render_html(
                labeled_value_html(
                    LABEL_TARGET_PRICE, context.target_price_text, color=Colors.green, size="1.5rem"
                )
            )
        with cols[2]:
            render_html(labeled_value_html(LABEL_TIMEFRAME, context.timeframe, size="1.5rem"))

        st.divider()
        st.subheader(LABEL_ANALYSIS)
        render_html(preformatted_block_html(context.analysis))

        st.divider()
        st.subheader(LABEL_RISK_MANAGEMENT)
        render_html(
            preformatted_block_html(
                context.risk_management,
                background=Colors.light_amber,
                text_color=Colors.dark_amber,
                border=Colors.border_amber,
            )
        )

        render_html(
            f"<div style='background-color: {Colors.light_red}; "
            f"border: 1px solid {Colors.border_red}; padding: 1rem; border-radius: 0.5rem; "
            f"margin-top: 1.5rem;'><p style='font-size: 0.75rem; color: {Colors.red}; margin: 0;'>"
            f"{DISCLAIMER_TEXT}</p></div>"
        )
