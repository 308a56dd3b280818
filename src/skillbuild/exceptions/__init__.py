"""Shared exception hierarchy for skillbuild."""

from __future__ import annotations

from .base import SkillBuildError
from .config import ConfigError
from .rules import RuleFileError, RulesDirectoryNotFoundError

__all__ = [
    "ConfigError",
    "RuleFileError",
    "RulesDirectoryNotFoundError",
    "SkillBuildError",
]
