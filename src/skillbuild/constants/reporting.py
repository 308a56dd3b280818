"""Constants for validation output and JSON reports."""

from __future__ import annotations

PASS_MARK: str = "✓"
FAIL_MARK: str = "✗"

REPORT_SCHEMA_VERSION: str = "1.0.0"
REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

OUTPUT_TEMP_PREFIX: str = ".tmp-"
OUTPUT_TEMP_SUFFIX: str = ".md"
