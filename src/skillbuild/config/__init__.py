"""Skill configuration model and loading.

This package facade re-exports the public names so callers can use
``from skillbuild.config import ...``.
"""

from __future__ import annotations

from skillbuild.config.loader import load_skill_config
from skillbuild.config.model import SkillConfig

__all__ = [
    "SkillConfig",
    "load_skill_config",
]
