"""Stock Insight - Main Entry Point with CLI Commands.

Supports:
- stats: Print the derived price statistics of a report
- validate: Check that a report file is well-formed
- dashboard: Launch the Streamlit dashboard
"""

import argparse
import subprocess
import sys
from pathlib import Path

from loguru import logger

from src.analysis.metrics import compute_series_stats
from src.app.logic.data_loader import AnalysisReport, chart_frame, load_report
from src.app.logic.formatting import format_signed, format_volume, format_with_sign
from src.config.settings import configure_logging, get_settings
from src.core.exceptions import ReportLoadError

DASHBOARD_PAGE = Path(__file__).parent / "app" / "00_Dashboard.py"


def _load_or_exit(path: Path) -> AnalysisReport:
    try:
        return load_report(path)
    except (FileNotFoundError, ReportLoadError) as e:
        logger.error(f"Failed to load report: {e}")
        sys.exit(1)


def cmd_stats(args: argparse.Namespace) -> None:
    """Log the derived chart statistics of a report."""
    report = _load_or_exit(Path(args.report))
    stats = compute_series_stats(chart_frame(report.chart_data))

    if stats is None:
        logger.warning(f"No price data in report for {report.company.symbol}")
        return

    logger.info(f"=== {report.company.name} ({report.company.symbol}) ===")
    logger.info(f"  • Samples: {stats.sample_count}")
    logger.info(f"  • Net change: {format_signed(stats.net_change)}")
    logger.info(f"  • Percent change: {format_with_sign(stats.percent_change, stats.sign)}%")
    logger.info(f"  • Min price: {stats.min_price:.2f}")
    logger.info(f"  • Max price: {stats.max_price:.2f}")
    logger.info(f"  • Average volume: {format_volume(stats.average_volume)}")
    logger.info(f"  • Volatility: {stats.volatility:.1f}%")


def cmd_validate(args: argparse.Namespace) -> None:
    """Validate a report file."""
    report = _load_or_exit(Path(args.report))
    logger.success(
        f"✅ Report for {report.company.symbol} is valid "
        f"({len(report.chart_data)} price samples, action {report.recommendation.action.value})"
    )


def cmd_dashboard(args: argparse.Namespace) -> None:
    """Launch the Streamlit dashboard."""
    command = [sys.executable, "-m", "streamlit", "run", str(DASHBOARD_PAGE)]
    if args.port:
        command += ["--server.port", str(args.port)]
    logger.info(f"Starting dashboard: {' '.join(command)}")
    sys.exit(subprocess.call(command))


def main() -> None:
    """Main entry point with CLI argument parsing."""
    settings = get_settings()
    configure_logging(settings.log_level)

    parser = argparse.ArgumentParser(
        description="Stock Insight - Stock analysis dashboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    # Stats command
    parser_stats = subparsers.add_parser("stats", help="Print derived price statistics")
    parser_stats.add_argument(
        "report",
        nargs="?",
        default=str(settings.report_path),
        help="Path to the analysis report (default: configured report path)",
    )
    parser_stats.set_defaults(func=cmd_stats)

    # Validate command
    parser_validate = subparsers.add_parser("validate", help="Validate an analysis report")
    parser_validate.add_argument(
        "report",
        nargs="?",
        default=str(settings.report_path),
        help="Path to the analysis report (default: configured report path)",
    )
    parser_validate.set_defaults(func=cmd_validate)

    # Dashboard command
    parser_dashboard = subparsers.add_parser("dashboard", help="Launch the Streamlit dashboard")
    parser_dashboard.add_argument("--port", type=int, help="Server port")
    parser_dashboard.set_defaults(func=cmd_dashboard)

    # Parse arguments and execute
    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
