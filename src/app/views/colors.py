# Define a static color class for consistent use across the app

from dataclasses import dataclass

from src.core.domain_models import ChangeSign, ConfidenceLevel, TradeAction


class Colors:
    # Primary (chart line and fill)
    blue = "#2563eb"  # Royal Blue
    slate = "#64748b"  # axis ticks
    grid = "#e2e8f0"

    # Semantic: Success / Growth
    green = "#059669"  # Emerald 600
    light_green = "#dcfce7"
    dark_green = "#166534"
    border_green = "#bbf7d0"

    # Semantic: Danger / Loss
    red = "#dc2626"  # Red 600
    light_red = "#fee2e2"
    dark_red = "#991b1b"
    border_red = "#fecaca"

    # Semantic: Warning / Attention (Amber instead of Yellow!)
    # Pure yellow (#FF0) is invisible on a white background.
    amber = "#d97706"  # Amber 600
    light_amber = "#fef9c3"
    dark_amber = "#854d0e"
    border_amber = "#fef08a"

    # Urgent
    orange = "#ea580c"  # Burnt Orange

    # Neutral
    gray = "#4b5563"  # Cool Gray
    light_gray = "#f3f4f6"
    dark_gray = "#1f2937"
    border_gray = "#e5e7eb"
    white = "#ffffff"


@dataclass(frozen=True)
class BadgeStyle:
    background: str
    text: str
    border: str


SIGN_COLOR_MAP = {
    ChangeSign.POSITIVE: Colors.green,
    ChangeSign.NEGATIVE: Colors.red,
}

# Solid badge colors, text is always white
ACTION_COLOR_MAP = {
    TradeAction.COMPRA: Colors.green,
    TradeAction.VENDI: Colors.red,
    TradeAction.SHORT: Colors.orange,
    TradeAction.ASPETTA: Colors.amber,
    TradeAction.OTHER: Colors.gray,
}

# Outline badges
CONFIDENCE_STYLE_MAP = {
    ConfidenceLevel.ALTA: BadgeStyle(Colors.light_green, Colors.dark_green, Colors.border_green),
    ConfidenceLevel.MEDIA: BadgeStyle(Colors.light_amber, Colors.dark_amber, Colors.border_amber),
    ConfidenceLevel.BASSA: BadgeStyle(Colors.light_red, Colors.dark_red, Colors.border_red),
    ConfidenceLevel.OTHER: BadgeStyle(Colors.light_gray, Colors.dark_gray, Colors.border_gray),
}


def sign_color(sign: ChangeSign) -> str:
    return SIGN_COLOR_MAP[sign]


def action_color(action: TradeAction) -> str:
    return ACTION_COLOR_MAP[action]


def confidence_style(level: ConfidenceLevel) -> BadgeStyle:
    return CONFIDENCE_STYLE_MAP[level]
