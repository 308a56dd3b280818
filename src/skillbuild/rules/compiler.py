"""Compile a skill's rule files into a single AGENTS.md document."""

from __future__ import annotations

import logging
from pathlib import Path

from skillbuild.config.model import SkillConfig
from skillbuild.constants.reporting import OUTPUT_TEMP_PREFIX, OUTPUT_TEMP_SUFFIX
from skillbuild.constants.rules import SECTION_SEPARATOR, TITLE_PREFIX
from skillbuild.exceptions import RuleFileError
from skillbuild.io import list_rule_files, read_rule_content, write_text_atomic

logger = logging.getLogger(__name__)


def render_agents_md(config: SkillConfig, filenames: list[str] | None = None) -> str:
    """Render the compiled document for *config*.

    The header is followed by every rule's raw content in sorted filename
    order, each terminated by the ``---`` separator.
    """
    if filenames is None:
        filenames = list_rule_files(config.rules_dir)

    parts = [f"{TITLE_PREFIX}{config.title}\n\n{config.description}{SECTION_SEPARATOR}"]
    for filename in sorted(filenames):
        try:
            content = read_rule_content(config.rules_dir, filename)
        except UnicodeDecodeError as exc:
            raise RuleFileError(f"Rule file {config.rules_dir / filename} is not valid UTF-8: {exc}") from exc
        parts.append(content + SECTION_SEPARATOR)
    return "".join(parts)


def build_agents_md(config: SkillConfig) -> Path:
    """Regenerate ``config.output_file`` from the current rule files and return its path."""
    logger.info("Building %s %s...", config.skill_name, config.output_file.name)

    filenames = list_rule_files(config.rules_dir)
    logger.info("Found %d rule files", len(filenames))

    output = render_agents_md(config, filenames)
    write_text_atomic(
        path=config.output_file,
        text=output,
        temp_prefix=OUTPUT_TEMP_PREFIX,
        temp_suffix=OUTPUT_TEMP_SUFFIX,
    )
    logger.info("Wrote %s", config.output_file)
    return config.output_file
