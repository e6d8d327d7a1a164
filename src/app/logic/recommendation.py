"""Logic layer for the AI recommendation card."""

from dataclasses import dataclass

from src.app.logic.formatting import format_price
from src.core.domain_models import ConfidenceLevel, TradeAction, TradeRecommendation


@dataclass
class RecommendationContext:
    action: TradeAction
    action_label: str
    confidence: ConfidenceLevel
    confidence_label: str
    stop_loss_text: str
    target_price_text: str
    timeframe: str
    analysis: str
    risk_management: str


def build_recommendation_context(
    recommendation: TradeRecommendation,
    currency_symbol: str = "$",
) -> RecommendationContext:
    # no check that target > stop loss, both are shown as supplied
    return RecommendationContext(
        action=recommendation.action,
        action_label=recommendation.action_label,
        confidence=recommendation.confidence,
        confidence_label=recommendation.confidence_label,
        stop_loss_text=format_price(recommendation.stop_loss, currency_symbol),
        target_price_text=format_price(recommendation.target_price, currency_symbol),
        timeframe=recommendation.timeframe,
        analysis=recommendation.analysis,
        risk_management=recommendation.risk_management,
    )
