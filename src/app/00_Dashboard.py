"""Stock Insight Dashboard - Main Entry Point.

Wiring layer: loads the analysis report and renders the company card,
the price history chart and the AI recommendation.
"""

from pathlib import Path

import streamlit as st
from loguru import logger

from src.app.logic.data_loader import chart_frame, load_report_cached
from src.app.views.common import render_empty_state, render_sidebar_header
from src.app.views.company_info import render_company_info
from src.app.views.price_chart import render_price_chart
from src.app.views.recommendation import render_recommendation
from src.config.settings import configure_logging, get_settings

settings = get_settings()
configure_logging(settings.log_level)

st.set_page_config(
    page_title="Stock Insight Dashboard",
    page_icon="📈",
    layout="wide",
    initial_sidebar_state="expanded",
)

# Sidebar
render_sidebar_header("📈 Stock Insight", "Analisi azionaria con raccomandazione AI")
report_path = Path(st.sidebar.text_input("Report", value=str(settings.report_path)))

if not report_path.exists():
    render_empty_state(f"Report non trovato: {report_path}")
    st.stop()

try:
    report = load_report_cached(str(report_path), report_path.stat().st_mtime)
except Exception as e:
    st.error(f"Failed to load report: {e}")
    logger.opt(exception=True).error("Report loading error: {}", e)
    st.stop()

render_company_info(report.company, settings)
render_price_chart(chart_frame(report.chart_data), report.company.name, settings)
render_recommendation(report.recommendation, settings)
