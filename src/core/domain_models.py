from datetime import date
from enum import Enum

import polars as pl
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# --- Constants & Schemas ---

# Polars Schema for the price series feeding the chart.
# Samples stay in a DataFrame instead of a list of Pydantic objects once loaded.
PRICE_SERIES_SCHEMA = {
    "date": pl.Date,
    "price": pl.Float64,
    "volume": pl.Int64,
}


# --- Enums ---


class TradeAction(str, Enum):
    """Action suggested by the AI recommendation."""

    COMPRA = "compra"
    VENDI = "vendi"
    SHORT = "short"
    ASPETTA = "aspetta"
    OTHER = "other"


class ConfidenceLevel(str, Enum):
    """Confidence the AI attaches to its recommendation."""

    ALTA = "alta"
    MEDIA = "media"
    BASSA = "bassa"
    OTHER = "other"


class ChangeSign(str, Enum):
    """Styling bucket of a price change. Zero counts as positive."""

    POSITIVE = "positive"
    NEGATIVE = "negative"


# --- Domain Models ---


class CompanySnapshot(BaseModel):
    """
    Point-in-time view of a company as shown in the header card.

    `change` and `change_percent` are computed upstream against the previous
    close; the dashboard only formats them.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    symbol: str
    name: str
    current_price: float
    market_cap: str  # already formatted by the data source, e.g. "2.85T"
    pe_ratio: float
    volume: int
    change: float
    change_percent: float


class TradeRecommendation(BaseModel):
    """
    AI generated trade recommendation.

    The enum fields drive the badge colors, the raw labels are what the
    user sees, so an unknown action still shows up verbatim.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    action: TradeAction
    action_label: str
    stop_loss: float
    target_price: float
    confidence: ConfidenceLevel
    confidence_label: str
    timeframe: str
    analysis: str
    risk_management: str


class PriceSample(BaseModel):
    """
    A single point of the historical price series.

    Note: For the chart we convert lists of samples into a Polars DataFrame
    with `PRICE_SERIES_SCHEMA`; this model is the validation boundary only.
    """

    model_config = ConfigDict(frozen=True)

    date: date
    price: float
    volume: int
