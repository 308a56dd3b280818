"""Base exception for skillbuild."""

from __future__ import annotations


class SkillBuildError(Exception):
    """Base class for expected skillbuild failures."""
