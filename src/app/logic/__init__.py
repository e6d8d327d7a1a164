"""App logic package.

Formatting and derived values for the dashboard cards.
Pure Python/Polars - no Streamlit UI calls, except the cached report loader.
"""

__all__ = ["company_info", "data_loader", "formatting", "price_chart", "recommendation"]
