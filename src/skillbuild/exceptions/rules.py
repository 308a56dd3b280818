"""Rule directory and rule file exceptions."""

from __future__ import annotations

from skillbuild.exceptions.base import SkillBuildError


class RulesDirectoryNotFoundError(SkillBuildError, FileNotFoundError):
    """Raised when a skill's rules directory does not exist."""


class RuleFileError(SkillBuildError, ValueError):
    """Raised when a rule file cannot be read as UTF-8 text."""
