"""Common UI components shared across the dashboard cards.

Pure rendering functions for reusable Streamlit widgets. The *_html helpers
only build markup so they can be checked without a running app.
"""

import html

import streamlit as st

from src.app.views.colors import BadgeStyle, Colors


def render_sidebar_header(title: str, description: str | None = None) -> None:
    """Render consistent sidebar header with optional description.

    Args:
        title: Main sidebar title
        description: Optional description text below title
    """
    st.sidebar.title(title)
    if description:
        st.sidebar.caption(description)
    st.sidebar.divider()


def render_empty_state(message: str, icon: str = "📊") -> None:
    """Render empty state placeholder when no data is available.

    Args:
        message: Message to display
        icon: Emoji icon to show
    """
    st.info(f"{icon} {message}")


def solid_badge_html(text: str, background: str, large: bool = False) -> str:
    """Filled badge with white text."""
    padding = "0.5rem 1rem" if large else "0.15rem 0.6rem"
    font_size = "1.125rem" if large else "0.8rem"
    return (
        f"<span style='background-color: {background}; color: {Colors.white}; "
        f"padding: {padding}; border-radius: 9999px; font-size: {font_size}; "
        f"font-weight: 600;'>{html.escape(text)}</span>"
    )


def outline_badge_html(text: str, style: BadgeStyle) -> str:
    return (
        f"<span style='background-color: {style.background}; color: {style.text}; "
        f"border: 1px solid {style.border}; padding: 0.15rem 0.6rem; "
        f"border-radius: 9999px; font-size: 0.8rem; font-weight: 600;'>"
        f"{html.escape(text)}</span>"
    )


def preformatted_block_html(
    text: str,
    background: str = Colors.light_gray,
    text_color: str = Colors.dark_gray,
    border: str | None = None,
) -> str:
    """Text box that keeps the line breaks of `text`."""
    border_css = f"border: 1px solid {border}; " if border else ""
    return (
        f"<div style='background-color: {background}; {border_css}padding: 1rem; "
        f"border-radius: 0.5rem;'>"
        f"<p style='white-space: pre-wrap; font-size: 0.875rem; line-height: 1.6; "
        f"color: {text_color}; margin: 0;'>{html.escape(text)}</p></div>"
    )


def labeled_value_html(
    label: str,
    value: str,
    color: str | None = None,
    align: str = "left",
    size: str = "1.125rem",
) -> str:
    """Muted caption above a bold value."""
    color_css = f"color: {color}; " if color else ""
    return (
        f"<div style='text-align: {align};'>"
        f"<p style='font-size: 0.8rem; color: {Colors.slate}; margin: 0;'>{html.escape(label)}</p>"
        f"<p style='{color_css}font-size: {size}; font-weight: 600; margin: 0;'>"
        f"{html.escape(value)}</p></div>"
    )


def render_html(markup: str) -> None:
    st.markdown(markup, unsafe_allow_html=True)


GLOBAL_MARGINS = dict(t=5, l=20, r=30, b=5)
GLOBAL_FONT = dict(
    family="Arial",
    size=12,
    color=Colors.slate,
)
