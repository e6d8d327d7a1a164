import pytest

from src.core.domain_models import ConfidenceLevel, TradeAction
from src.core.normalization import normalize_action, normalize_confidence


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("compra", TradeAction.COMPRA),
        ("Compra", TradeAction.COMPRA),
        ("BUY", TradeAction.COMPRA),
        ("vendi", TradeAction.VENDI),
        ("sell", TradeAction.VENDI),
        ("short", TradeAction.SHORT),
        ("SHORT", TradeAction.SHORT),
        ("  Short ", TradeAction.SHORT),
        ("aspetta", TradeAction.ASPETTA),
        ("hold", TradeAction.ASPETTA),
        ("comprra", TradeAction.OTHER),
        ("", TradeAction.OTHER),
    ],
)
def test_normalize_action(label: str, expected: TradeAction) -> None:
    assert normalize_action(label) == expected


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("alta", ConfidenceLevel.ALTA),
        ("ALTA", ConfidenceLevel.ALTA),
        ("High", ConfidenceLevel.ALTA),
        ("media", ConfidenceLevel.MEDIA),
        ("medium", ConfidenceLevel.MEDIA),
        ("Bassa", ConfidenceLevel.BASSA),
        ("low", ConfidenceLevel.BASSA),
        ("molto alta", ConfidenceLevel.OTHER),
    ],
)
def test_normalize_confidence(label: str, expected: ConfidenceLevel) -> None:
    assert normalize_confidence(label) == expected
