"""Core data models for skillbuild."""

from .entities import RuleCheckResult, RuleResult, ValidationReport

__all__ = [
    "RuleCheckResult",
    "RuleResult",
    "ValidationReport",
]
