from loguru import logger

from src.core.domain_models import ConfidenceLevel, TradeAction

ACTION_SYNONYMS: dict[str, TradeAction] = {
    "compra": TradeAction.COMPRA,
    "buy": TradeAction.COMPRA,
    "long": TradeAction.COMPRA,
    "vendi": TradeAction.VENDI,
    "vendita": TradeAction.VENDI,
    "sell": TradeAction.VENDI,
    "short": TradeAction.SHORT,
    "aspetta": TradeAction.ASPETTA,
    "attendi": TradeAction.ASPETTA,
    "wait": TradeAction.ASPETTA,
    "hold": TradeAction.ASPETTA,
}

CONFIDENCE_SYNONYMS: dict[str, ConfidenceLevel] = {
    "alta": ConfidenceLevel.ALTA,
    "high": ConfidenceLevel.ALTA,
    "media": ConfidenceLevel.MEDIA,
    "medium": ConfidenceLevel.MEDIA,
    "bassa": ConfidenceLevel.BASSA,
    "low": ConfidenceLevel.BASSA,
}


def normalize_action(label: str) -> TradeAction:
    """Normalizes a free-text action label to a TradeAction."""
    key = label.strip().lower()
    if key in ACTION_SYNONYMS:
        return ACTION_SYNONYMS[key]
    logger.debug(f"Unknown trade action '{label}', using {TradeAction.OTHER.value}")
    return TradeAction.OTHER


def normalize_confidence(label: str) -> ConfidenceLevel:
    """Normalizes a free-text confidence label to a ConfidenceLevel."""
    key = label.strip().lower()
    if key in CONFIDENCE_SYNONYMS:
        return CONFIDENCE_SYNONYMS[key]
    logger.debug(f"Unknown confidence level '{label}', using {ConfidenceLevel.OTHER.value}")
    return ConfidenceLevel.OTHER
