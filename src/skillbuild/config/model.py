"""Config data model for skill builds."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from skillbuild.constants.config import OUTPUT_FILENAME, RULES_DIRNAME, SKILL_FILENAME
from skillbuild.constants.rules import CODE_FENCE, DEFAULT_REQUIRED_SECTIONS, DEFAULT_VALID_PRIORITIES


@dataclass(frozen=True)
class SkillConfig:
    """Resolved parameters for validating and compiling one skill."""

    skill_name: str
    skill_dir: Path
    rules_dir: Path
    skill_file: Path
    output_file: Path
    valid_prefixes: tuple[str, ...]
    code_example_languages: tuple[str, ...]
    title: str
    description: str = ""
    valid_priorities: tuple[str, ...] = DEFAULT_VALID_PRIORITIES
    required_sections: tuple[str, ...] = DEFAULT_REQUIRED_SECTIONS

    @classmethod
    def for_skill_dir(
        cls,
        skill_name: str,
        skill_dir: Path,
        *,
        valid_prefixes: tuple[str, ...],
        code_example_languages: tuple[str, ...],
        title: str,
        description: str = "",
        valid_priorities: tuple[str, ...] = DEFAULT_VALID_PRIORITIES,
        required_sections: tuple[str, ...] = DEFAULT_REQUIRED_SECTIONS,
    ) -> SkillConfig:
        """Build a config using the conventional ``rules/``, ``SKILL.md`` and ``AGENTS.md`` layout."""
        return cls(
            skill_name=skill_name,
            skill_dir=skill_dir,
            rules_dir=skill_dir / RULES_DIRNAME,
            skill_file=skill_dir / SKILL_FILENAME,
            output_file=skill_dir / OUTPUT_FILENAME,
            valid_prefixes=valid_prefixes,
            code_example_languages=code_example_languages,
            title=title,
            description=description,
            valid_priorities=valid_priorities,
            required_sections=required_sections,
        )

    @property
    def code_fences(self) -> tuple[str, ...]:
        """Opening fence markers accepted as code examples, e.g. ```` ```hcl ````."""
        return tuple(f"{CODE_FENCE}{lang}" for lang in self.code_example_languages)
