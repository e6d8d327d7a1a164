"""Analysis report loading for the Streamlit application.

This is the only place where input data is validated. Everything downstream
receives frozen domain models and trusts them.
"""

from pathlib import Path
from typing import Any

import polars as pl
import streamlit as st
import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from src.core.domain_models import (
    PRICE_SERIES_SCHEMA,
    CompanySnapshot,
    PriceSample,
    TradeRecommendation,
)
from src.core.exceptions import ReportLoadError
from src.core.normalization import normalize_action, normalize_confidence

YAML_SUFFIXES = {".yaml", ".yml"}


class RecommendationPayload(BaseModel):
    """Recommendation as produced by the AI step, with free-text labels."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    action: str
    stop_loss: float
    target_price: float
    confidence: str
    timeframe: str
    analysis: str
    risk_management: str

    def to_domain(self) -> TradeRecommendation:
        return TradeRecommendation(
            action=normalize_action(self.action),
            action_label=self.action,
            stop_loss=self.stop_loss,
            target_price=self.target_price,
            confidence=normalize_confidence(self.confidence),
            confidence_label=self.confidence,
            timeframe=self.timeframe,
            analysis=self.analysis,
            risk_management=self.risk_management,
        )


class AnalysisReport(BaseModel):
    """Everything the dashboard page renders for one company."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    company: CompanySnapshot
    recommendation: TradeRecommendation
    chart_data: list[PriceSample] = Field(default_factory=list)

    @field_validator("recommendation", mode="before")
    @classmethod
    def parse_recommendation(cls, v: Any) -> Any:
        """Map raw action/confidence labels to their enums."""
        if isinstance(v, dict) and "actionLabel" not in v and "action_label" not in v:
            return RecommendationPayload.model_validate(v).to_domain()
        return v


def load_report(path: Path) -> AnalysisReport:
    """Load and validate an analysis report from JSON or YAML.

    Args:
        path: Path to a .json, .yaml or .yml report file

    Returns:
        Validated analysis report

    Raises:
        FileNotFoundError: If the report file doesn't exist
        ReportLoadError: If the file can't be parsed or fails validation
    """
    if not path.exists():
        raise FileNotFoundError(f"Analysis report not found: {path}")

    logger.info(f"Loading analysis report from {path}")

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            with path.open("r", encoding="utf-8") as f:
                raw_report: dict[str, Any] = yaml.safe_load(f) or {}
            report = AnalysisReport.model_validate(raw_report)
        else:
            report = AnalysisReport.model_validate_json(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ReportLoadError(path, f"malformed YAML: {e}") from e
    except ValidationError as e:
        raise ReportLoadError(path, str(e)) from e

    logger.debug(
        f"Loaded report for {report.company.symbol} with {len(report.chart_data)} price samples"
    )
    return report


@st.cache_data
def load_report_cached(path_str: str, mtime: float) -> AnalysisReport:
    """Cached wrapper around load_report keyed on path and modification time."""
    return load_report(Path(path_str))


def chart_frame(samples: list[PriceSample]) -> pl.DataFrame:
    """Convert price samples into the chart DataFrame, keeping their order."""
    return pl.DataFrame(
        [sample.model_dump() for sample in samples],
        schema=PRICE_SERIES_SCHEMA,
    )
