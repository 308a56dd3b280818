"""Validation report writers."""

from .json_report import build_report_payload, write_validation_report

__all__ = ["build_report_payload", "write_validation_report"]
