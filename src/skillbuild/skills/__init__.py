"""Registry of bundled skills and their default configs."""

from __future__ import annotations

from typing import TypeAlias

from collections.abc import Callable
from pathlib import Path

from skillbuild.config.model import SkillConfig
from skillbuild.exceptions import ConfigError

from . import terraform_best_practices, terramate_best_practices

SkillFactory: TypeAlias = Callable[[Path], SkillConfig]

BUNDLED_SKILLS: dict[str, SkillFactory] = {
    terraform_best_practices.SKILL_NAME: terraform_best_practices.build_config,
    terramate_best_practices.SKILL_NAME: terramate_best_practices.build_config,
}


def bundled_skill_names() -> tuple[str, ...]:
    """Return bundled skill names in sorted order."""
    return tuple(sorted(BUNDLED_SKILLS))


def get_skill(name: str, skill_dir: Path) -> SkillConfig:
    """Return the bundled default config for *name* rooted at *skill_dir*."""
    factory = BUNDLED_SKILLS.get(name)
    if factory is None:
        raise ConfigError(f"Unknown skill {name!r}. Bundled skills: {', '.join(bundled_skill_names())}")
    return factory(skill_dir)


def find_skill(name: str, skill_dir: Path) -> SkillConfig | None:
    """Like :func:`get_skill` but return ``None`` for skills that are not bundled."""
    if name not in BUNDLED_SKILLS:
        return None
    return get_skill(name, skill_dir)


__all__ = ["BUNDLED_SKILLS", "bundled_skill_names", "find_skill", "get_skill"]
