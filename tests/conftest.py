"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from typing import TypeAlias

import shutil
from collections.abc import Callable
from pathlib import Path

import pytest

from skillbuild.config import SkillConfig
from skillbuild.skills import terraform_best_practices

RuleWriter: TypeAlias = Callable[..., Path]

REQUIRED_SECTION_BODIES: dict[str, str] = {
    "## Why It Matters": "It matters.",
    "## Incorrect": "```hcl\nresource \"null_resource\" \"bad\" {}\n```",
    "## Correct": "```hcl\nresource \"null_resource\" \"good\" {}\n```",
    "## References": "- https://developer.hashicorp.com/terraform",
}


def render_rule(
    name: str,
    *,
    priority: str | None = "HIGH",
    category: str | None = "Testing",
    omit_sections: tuple[str, ...] = (),
    title: str | None = None,
    code_lang: str = "hcl",
) -> str:
    """Render a rule file body that passes every check unless told otherwise."""
    lines = [title if title is not None else f"# {name}", ""]
    if priority is not None:
        lines.append(f"**Priority:** {priority}")
    if category is not None:
        lines.append(f"**Category:** {category}")
    lines.append("")
    for heading, body in REQUIRED_SECTION_BODIES.items():
        if heading in omit_sections:
            continue
        lines.extend([heading, "", body.replace("```hcl", f"```{code_lang}"), ""])
    return "\n".join(lines)


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture()
def repo_root(tmp_path: Path, fixtures_root: Path) -> Path:
    """Return a writable copy of the fixture repository (``skills/`` at its root)."""
    root = tmp_path / "repo"
    shutil.copytree(fixtures_root, root)
    return root


@pytest.fixture()
def terraform_skill_dir(repo_root: Path) -> Path:
    return repo_root / "skills" / terraform_best_practices.SKILL_NAME


@pytest.fixture()
def terraform_config(terraform_skill_dir: Path) -> SkillConfig:
    return terraform_best_practices.build_config(terraform_skill_dir)


@pytest.fixture()
def write_rule(terraform_config: SkillConfig) -> RuleWriter:
    """Return a helper that writes a rule file into the terraform fixture's rules dir."""

    def _write(filename: str, content: str | None = None, **kwargs: object) -> Path:
        path = terraform_config.rules_dir / filename
        text = content if content is not None else render_rule(filename.removesuffix(".md"), **kwargs)  # type: ignore[arg-type]
        path.write_text(text, encoding="utf-8")
        return path

    return _write
