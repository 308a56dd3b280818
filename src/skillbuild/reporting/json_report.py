"""JSON validation report for CI consumption."""

from __future__ import annotations

from pathlib import Path

from skillbuild.constants.reporting import REPORT_SCHEMA_VERSION, REPORT_TEMP_PREFIX, REPORT_TEMP_SUFFIX
from skillbuild.io import write_json_atomic
from skillbuild.model import ValidationReport
from skillbuild.types import JsonObject


def build_report_payload(report: ValidationReport) -> JsonObject:
    """Return the versioned JSON payload for a validation report."""
    return {"schema_version": REPORT_SCHEMA_VERSION, **report.to_dict()}


def write_validation_report(path: Path, report: ValidationReport) -> None:
    """Write *report* as JSON to *path*, replacing any previous report."""
    write_json_atomic(
        path=path,
        payload=build_report_payload(report),
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )
