"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "skillbuild"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: validate and compile Agent Skills rule files into AGENTS.md"
VALIDATOR_BANNER_SUFFIX: str = "Skill Validator"
VALIDATION_PASSED_MESSAGE: str = "All validations passed!"
VALIDATION_FAILED_MESSAGE: str = "Validation failed!"
SUMMARY_SEPARATOR: str = "---"
