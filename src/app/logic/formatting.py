"""Number and date formatting shared by the dashboard cards."""

from src.analysis.metrics import classify_change
from src.core.domain_models import ChangeSign

# Short Italian month names for chart labels, e.g. "5 gen"
ITALIAN_MONTHS_SHORT = {
    1: "gen",
    2: "feb",
    3: "mar",
    4: "apr",
    5: "mag",
    6: "giu",
    7: "lug",
    8: "ago",
    9: "set",
    10: "ott",
    11: "nov",
    12: "dic",
}


def format_with_sign(value: float, sign: ChangeSign, decimals: int = 2) -> str:
    """Format a value with a leading '+' if `sign` is positive.

    The sign is passed in so a percentage can follow the classification
    of its absolute change.
    """
    # normalize -0.0 so zero renders as "0.00"
    value = value + 0.0
    prefix = "+" if sign == ChangeSign.POSITIVE else ""
    return f"{prefix}{value:.{decimals}f}"


def format_signed(value: float, decimals: int = 2) -> str:
    """Format a change with a leading '+' when it classifies as positive.

    Negative values keep their native minus sign.
    """
    return format_with_sign(value, classify_change(value + 0.0), decimals)


def format_price(value: float, currency_symbol: str = "$") -> str:
    return f"{currency_symbol}{value:.2f}"


def format_volume(value: int) -> str:
    """Group thousands, e.g. 1234567 -> '1,234,567'."""
    return f"{value:,}"

