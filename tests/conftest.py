"""Shared fixtures for dashboard tests."""

import json
from collections.abc import Callable
from datetime import date
from pathlib import Path
from typing import Any

import polars as pl
import pytest

from src.config.settings import Settings
from src.core.domain_models import (
    PRICE_SERIES_SCHEMA,
    CompanySnapshot,
    ConfidenceLevel,
    TradeAction,
    TradeRecommendation,
)


def _make_series(prices: list[float], volumes: list[int] | None = None) -> pl.DataFrame:
    """Build a chronological price series starting 2024-01-01."""
    if volumes is None:
        volumes = [1_000] * len(prices)
    return pl.DataFrame(
        {
            "date": [date(2024, 1, day + 1) for day in range(len(prices))],
            "price": prices,
            "volume": volumes,
        },
        schema=PRICE_SERIES_SCHEMA,
    )


@pytest.fixture
def make_series() -> Callable[..., pl.DataFrame]:
    return _make_series


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def company() -> CompanySnapshot:
    return CompanySnapshot(
        symbol="AAPL",
        name="Apple Inc.",
        current_price=189.5,
        market_cap="2.95T",
        pe_ratio=29.413,
        volume=52_164_500,
        change=1.27,
        change_percent=0.67,
    )


@pytest.fixture
def recommendation() -> TradeRecommendation:
    return TradeRecommendation(
        action=TradeAction.SHORT,
        action_label="SHORT",
        stop_loss=195.0,
        target_price=170.25,
        confidence=ConfidenceLevel.ALTA,
        confidence_label="Alta",
        timeframe="1-2 settimane",
        analysis="Riga uno\nRiga due",
        risk_management="Stop stretto",
    )


@pytest.fixture
def raw_report() -> dict[str, Any]:
    """Report payload as produced upstream, camelCase keys."""
    return {
        "company": {
            "symbol": "MSFT",
            "name": "Microsoft Corporation",
            "currentPrice": 415.1,
            "marketCap": "3.08T",
            "peRatio": 36.2,
            "volume": 18_500_000,
            "change": -2.4,
            "changePercent": -0.57,
        },
        "recommendation": {
            "action": "Vendi",
            "stopLoss": 430.0,
            "targetPrice": 390.0,
            "confidence": "Bassa",
            "timeframe": "1 mese",
            "analysis": "Momentum in calo.",
            "riskManagement": "Ridurre l'esposizione.",
        },
        "chartData": [
            {"date": "2024-03-01", "price": 100.0, "volume": 1000},
            {"date": "2024-03-04", "price": 110.0, "volume": 2000},
            {"date": "2024-03-05", "price": 90.0, "volume": 4000},
        ],
    }


@pytest.fixture
def report_file(tmp_path: Path, raw_report: dict[str, Any]) -> Path:
    path = tmp_path / "report.json"
    path.write_text(json.dumps(raw_report), encoding="utf-8")
    return path
