"""Configuration-related exceptions."""

from __future__ import annotations

from skillbuild.exceptions.base import SkillBuildError


class ConfigError(SkillBuildError, ValueError):
    """Raised when skill configuration is invalid."""
