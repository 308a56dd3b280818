"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "skillbuild.yaml"
SKILLS_DIRNAME: str = "skills"
RULES_DIRNAME: str = "rules"
SKILL_FILENAME: str = "SKILL.md"
OUTPUT_FILENAME: str = "AGENTS.md"

LIST_OF_STRINGS_KEYS: tuple[str, ...] = (
    "valid_prefixes",
    "valid_priorities",
    "required_sections",
    "code_example_languages",
)
STRING_KEYS: tuple[str, ...] = ("title", "description", "rules_dir", "output_file")

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({*LIST_OF_STRINGS_KEYS, *STRING_KEYS})

# Keys a skill without bundled defaults must set in its config file.
REQUIRED_CUSTOM_SKILL_KEYS: tuple[str, ...] = (*LIST_OF_STRINGS_KEYS, "title")
