"""Exceptions raised at the data input boundary."""

from pathlib import Path


class ReportLoadError(Exception):
    """Raised when an analysis report cannot be parsed or validated."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid analysis report {path}: {reason}")
        self.path = path
        self.reason = reason
