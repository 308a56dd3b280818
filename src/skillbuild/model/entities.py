"""Validation result entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from skillbuild.types import JsonObject


@dataclass(frozen=True)
class RuleResult:
    """Errors collected for a single rule file."""

    filename: str
    errors: tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return not self.errors

    def to_dict(self) -> JsonObject:
        return {
            "filename": self.filename,
            "passed": self.passed,
            "errors": list(self.errors),
        }


@dataclass(frozen=True)
class RuleCheckResult:
    """Outcome of checking every rule file in a rules directory."""

    rules_dir: Path
    rules_dir_found: bool
    results: tuple[RuleResult, ...] = ()

    @property
    def passed(self) -> bool:
        """True when the directory exists and every rule file is valid."""
        return self.rules_dir_found and all(result.passed for result in self.results)

    @property
    def failed(self) -> tuple[RuleResult, ...]:
        return tuple(result for result in self.results if not result.passed)

    def to_dict(self) -> JsonObject:
        return {
            "directory": str(self.rules_dir),
            "found": self.rules_dir_found,
            "passed": self.passed,
            "files": [result.to_dict() for result in self.results],
        }


@dataclass(frozen=True)
class ValidationReport:
    """Combined manifest and rule validation outcome for one skill."""

    skill_name: str
    skill_file: Path
    skill_file_valid: bool
    rules: RuleCheckResult

    @property
    def passed(self) -> bool:
        return self.skill_file_valid and self.rules.passed

    def to_dict(self) -> JsonObject:
        return {
            "skill": self.skill_name,
            "passed": self.passed,
            "skill_file": {"path": str(self.skill_file), "valid": self.skill_file_valid},
            "rules": self.rules.to_dict(),
        }
