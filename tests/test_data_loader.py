"""Tests for report loading at the input boundary."""

import json
from datetime import date
from pathlib import Path

import polars as pl
import pytest
import yaml

from src.app.logic.data_loader import AnalysisReport, chart_frame, load_report
from src.core.domain_models import PRICE_SERIES_SCHEMA, ConfidenceLevel, TradeAction
from src.core.exceptions import ReportLoadError


def test_load_json_report(report_file: Path) -> None:
    report = load_report(report_file)

    assert report.company.symbol == "MSFT"
    assert report.company.current_price == 415.1
    assert report.company.change_percent == -0.57
    assert report.recommendation.action == TradeAction.VENDI
    assert report.recommendation.action_label == "Vendi"
    assert report.recommendation.confidence == ConfidenceLevel.BASSA
    assert report.recommendation.risk_management == "Ridurre l'esposizione."
    assert [sample.date for sample in report.chart_data] == [
        date(2024, 3, 1),
        date(2024, 3, 4),
        date(2024, 3, 5),
    ]


def test_load_yaml_report(tmp_path: Path, raw_report) -> None:
    path = tmp_path / "report.yaml"
    path.write_text(yaml.safe_dump(raw_report), encoding="utf-8")

    report = load_report(path)

    assert report.company.name == "Microsoft Corporation"
    assert len(report.chart_data) == 3


def test_snake_case_keys_accepted(tmp_path: Path, raw_report) -> None:
    raw_report["company"] = {
        "symbol": "V",
        "name": "Visa Inc.",
        "current_price": 280.0,
        "market_cap": "560B",
        "pe_ratio": 31.0,
        "volume": 6_000_000,
        "change": 0.0,
        "change_percent": 0.0,
    }
    path = tmp_path / "report.json"
    path.write_text(json.dumps(raw_report), encoding="utf-8")

    assert load_report(path).company.market_cap == "560B"


def test_unknown_action_falls_back(raw_report) -> None:
    raw_report["recommendation"]["action"] = "Accumula"
    raw_report["recommendation"]["confidence"] = "???"

    report = AnalysisReport.model_validate(raw_report)

    assert report.recommendation.action == TradeAction.OTHER
    assert report.recommendation.action_label == "Accumula"
    assert report.recommendation.confidence == ConfidenceLevel.OTHER


def test_missing_chart_data_is_empty(raw_report) -> None:
    del raw_report["chartData"]

    report = AnalysisReport.model_validate(raw_report)

    assert report.chart_data == []
    assert chart_frame(report.chart_data).is_empty()


def test_missing_file() -> None:
    with pytest.raises(FileNotFoundError):
        load_report(Path("does/not/exist.json"))


def test_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ReportLoadError):
        load_report(path)


def test_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("company: [unclosed", encoding="utf-8")

    with pytest.raises(ReportLoadError):
        load_report(path)


def test_missing_field(tmp_path: Path, raw_report) -> None:
    del raw_report["company"]["currentPrice"]
    path = tmp_path / "report.json"
    path.write_text(json.dumps(raw_report), encoding="utf-8")

    with pytest.raises(ReportLoadError) as exc_info:
        load_report(path)

    assert exc_info.value.path == path


def test_chart_frame_keeps_order(raw_report) -> None:
    raw_report["chartData"].reverse()
    report = AnalysisReport.model_validate(raw_report)

    df_series = chart_frame(report.chart_data)

    assert df_series.schema == pl.Schema(PRICE_SERIES_SCHEMA)
    assert df_series["price"].to_list() == [90.0, 110.0, 100.0]


def test_models_are_frozen(report_file: Path) -> None:
    report = load_report(report_file)

    with pytest.raises(ValueError):
        report.company.change = 5.0
