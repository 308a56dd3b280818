"""Build parameters for the terramate-best-practices skill."""

from __future__ import annotations

from pathlib import Path

from skillbuild.config.model import SkillConfig

SKILL_NAME: str = "terramate-best-practices"
TITLE: str = "Terramate Best Practices - Full Reference"
DESCRIPTION: str = "Comprehensive guide for Terramate CLI, Cloud, and Catalyst, maintained by Terramate."

# ``cli-`` already admits the more specific cli-* prefixes; they are listed
# so the invalid-prefix message documents every rule family.
VALID_PREFIXES: tuple[str, ...] = (
    "cli-",
    "cli-orchestration-",
    "cli-codegen-",
    "cli-config-",
    "cloud-",
    "catalyst-",
    "cicd-",
    "advanced-",
)

CODE_EXAMPLE_LANGUAGES: tuple[str, ...] = ("hcl", "bash", "yaml")


def build_config(skill_dir: Path) -> SkillConfig:
    return SkillConfig.for_skill_dir(
        SKILL_NAME,
        skill_dir,
        valid_prefixes=VALID_PREFIXES,
        code_example_languages=CODE_EXAMPLE_LANGUAGES,
        title=TITLE,
        description=DESCRIPTION,
    )
