"""
Validation Reports
==================

Summaries of validation runs over one or many soundings, with text and
JSON output.
"""

import json
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List

from sounding_validate.errors import ValidationErrors
from sounding_validate.sounding import Sounding
from sounding_validate.validate import collect_errors


@dataclass
class ValidationReport:
    """
    Result of validating a single sounding.

    Attributes
    ----------
    source : str
        Where the sounding came from (file path or label)
    n_levels : int
        Number of pressure levels
    errors : ValidationErrors
        Every failed check, in check order
    """
    source: str
    n_levels: int
    errors: ValidationErrors = field(default_factory=ValidationErrors)

    @property
    def passed(self) -> bool:
        return self.errors.is_empty()

    @property
    def n_errors(self) -> int:
        return len(self.errors)

    def counts_by_kind(self) -> Dict[str, int]:
        """Number of errors of each kind."""
        return dict(Counter(err.kind for err in self.errors))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "n_levels": self.n_levels,
            "passed": self.passed,
            "counts_by_kind": self.counts_by_kind(),
            **self.errors.to_dict(),
        }

    def __str__(self) -> str:
        status = "PASSED" if self.passed else "FAILED"
        lines = [f"{self.source}: {status} ({self.n_levels} levels)"]
        lines.extend(f"  {err}" for err in self.errors)
        return "\n".join(lines)


@dataclass
class ValidationSummary:
    """
    Collection of validation reports.

    Attributes
    ----------
    reports : list of ValidationReport
        One report per sounding
    timestamp : str
        When validation was run
    version : str
        sounding-validate version used
    """
    reports: List[ValidationReport] = field(default_factory=list)
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())
    version: str = ""

    def __post_init__(self):
        import sounding_validate
        self.version = sounding_validate.__version__

    @property
    def n_soundings(self) -> int:
        return len(self.reports)

    @property
    def n_passed(self) -> int:
        return sum(1 for r in self.reports if r.passed)

    @property
    def n_failed(self) -> int:
        return self.n_soundings - self.n_passed

    @property
    def all_passed(self) -> bool:
        return self.n_failed == 0

    def add_report(self, report: ValidationReport) -> None:
        self.reports.append(report)

    def render(self) -> str:
        """Multi-line text summary."""
        lines = [
            "=" * 60,
            "Sounding Validation Summary",
            "=" * 60,
            f"Version: {self.version}",
            f"Timestamp: {self.timestamp}",
            f"Soundings: {self.n_passed}/{self.n_soundings} passed",
            "-" * 60,
        ]
        for report in self.reports:
            lines.append(str(report))
        lines.append("=" * 60)
        if self.all_passed:
            lines.append("All soundings PASSED")
        else:
            lines.append(f"WARNING: {self.n_failed} sounding(s) FAILED")
        return "\n".join(lines)

    def print_summary(self) -> None:
        print(self.render())

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON export."""
        return {
            "version": self.version,
            "timestamp": self.timestamp,
            "n_soundings": self.n_soundings,
            "n_passed": self.n_passed,
            "all_passed": self.all_passed,
            "reports": [r.to_dict() for r in self.reports],
        }

    def save(self, filepath: str) -> None:
        """Save validation results to JSON file."""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)


def validate_sounding(
    snd: Sounding,
    source: str = "sounding",
    check_indices: bool = True,
) -> ValidationReport:
    """
    Validate a sounding and wrap the outcome in a report.

    Parameters
    ----------
    snd : Sounding
        Sounding to check
    source : str
        Label shown in the report
    check_indices : bool
        Also check the signs of CAPE, CIN and PWAT

    Returns
    -------
    report : ValidationReport
    """
    return ValidationReport(
        source=source,
        n_levels=snd.n_levels,
        errors=collect_errors(snd, check_indices=check_indices),
    )
