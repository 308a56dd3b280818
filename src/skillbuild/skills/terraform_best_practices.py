"""Build parameters for the terraform-best-practices skill."""

from __future__ import annotations

from pathlib import Path

from skillbuild.config.model import SkillConfig

SKILL_NAME: str = "terraform-best-practices"
TITLE: str = "Terraform Best Practices - Full Reference"
DESCRIPTION: str = "Comprehensive optimization guide for Terraform and Infrastructure as Code, maintained by Terramate."

VALID_PREFIXES: tuple[str, ...] = (
    "org-",
    "state-",
    "security-",
    "module-",
    "resource-",
    "variable-",
    "output-",
    "language-",
    "provider-",
    "perf-",
    "test-",
)

CODE_EXAMPLE_LANGUAGES: tuple[str, ...] = ("hcl", "bash")


def build_config(skill_dir: Path) -> SkillConfig:
    return SkillConfig.for_skill_dir(
        SKILL_NAME,
        skill_dir,
        valid_prefixes=VALID_PREFIXES,
        code_example_languages=CODE_EXAMPLE_LANGUAGES,
        title=TITLE,
        description=DESCRIPTION,
    )
