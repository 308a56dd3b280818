"""Structural validation of SKILL.md manifests and rule files.

Expected problems (missing files, malformed rule content) are collected
into error strings and boolean results. Unexpected ``OSError``s while
reading propagate to the caller.
"""

from __future__ import annotations

import logging
from pathlib import Path

from skillbuild.config.model import SkillConfig
from skillbuild.constants.reporting import FAIL_MARK, PASS_MARK
from skillbuild.constants.rules import (
    BYTE_ORDER_MARK,
    CATEGORY_MARKER,
    FRONTMATTER_DELIMITER,
    PRIORITY_MARKER,
    RULE_FILE_SUFFIX,
    TITLE_PREFIX,
)
from skillbuild.exceptions import RulesDirectoryNotFoundError
from skillbuild.io import list_rule_files, read_rule_content
from skillbuild.model import RuleCheckResult, RuleResult, ValidationReport

logger = logging.getLogger(__name__)


def validate_skill_file(skill_file: Path) -> bool:
    """Check that the skill manifest exists and opens with a frontmatter delimiter."""
    logger.info("Validating %s...", skill_file.name)

    if not skill_file.is_file():
        logger.error("ERROR: %s not found", skill_file.name)
        return False

    try:
        content = skill_file.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        logger.error("ERROR: %s is not valid UTF-8", skill_file.name)
        return False
    if not content.startswith(FRONTMATTER_DELIMITER):
        logger.error("ERROR: %s missing frontmatter", skill_file.name)
        return False

    logger.info("%s %s valid", PASS_MARK, skill_file.name)
    return True


def validate_rule_file(config: SkillConfig, filename: str) -> list[str]:
    """Return the convention violations for one rule file (empty when valid)."""
    try:
        content = read_rule_content(config.rules_dir, filename)
    except UnicodeDecodeError:
        return ["File is not valid UTF-8"]

    lines = content.split("\n")
    errors: list[str] = []

    if not filename.startswith(config.valid_prefixes):
        errors.append(f"Invalid prefix. Must start with: {', '.join(config.valid_prefixes)}")

    expected_title = f"{TITLE_PREFIX}{filename.removesuffix(RULE_FILE_SUFFIX)}"
    if lines[0].lstrip(BYTE_ORDER_MARK).strip() != expected_title:
        errors.append(f'Title should be "{expected_title}", got "{lines[0]}"')

    priority_line = _find_marker_line(lines, PRIORITY_MARKER)
    if priority_line is None:
        errors.append(f"Missing {PRIORITY_MARKER} line")
    else:
        priority = priority_line.removeprefix(PRIORITY_MARKER).strip()
        if not _is_valid_priority(priority, config.valid_priorities):
            errors.append(f'Invalid priority "{priority}". Must be one of: {", ".join(config.valid_priorities)}')

    if _find_marker_line(lines, CATEGORY_MARKER) is None:
        errors.append(f"Missing {CATEGORY_MARKER} line")

    for section in config.required_sections:
        if section not in content:
            errors.append(f"Missing section: {section}")

    if not any(fence in content for fence in config.code_fences):
        errors.append(f"Missing code examples ({', '.join(config.code_fences)})")

    return errors


def check_rules(config: SkillConfig) -> RuleCheckResult:
    """Validate every rule file in the skill's rules directory and log a line per file."""
    logger.info("Validating rule files...")

    try:
        filenames = list_rule_files(config.rules_dir)
    except RulesDirectoryNotFoundError:
        logger.error("ERROR: rules directory not found: %s", config.rules_dir)
        return RuleCheckResult(rules_dir=config.rules_dir, rules_dir_found=False)

    results: list[RuleResult] = []
    for filename in filenames:
        result = RuleResult(filename=filename, errors=tuple(validate_rule_file(config, filename)))
        results.append(result)
        if result.passed:
            logger.info("%s %s", PASS_MARK, filename)
            continue
        logger.error("\n%s %s:", FAIL_MARK, filename)
        for error in result.errors:
            logger.error("  - %s", error)

    return RuleCheckResult(rules_dir=config.rules_dir, rules_dir_found=True, results=tuple(results))


def validate_rules(config: SkillConfig) -> bool:
    """Return True only if the rules directory exists and every rule file is valid."""
    return check_rules(config).passed


def validate_skill(config: SkillConfig) -> ValidationReport:
    """Validate the manifest and all rule files of a skill."""
    skill_file_valid = validate_skill_file(config.skill_file)
    rules = check_rules(config)
    return ValidationReport(
        skill_name=config.skill_name,
        skill_file=config.skill_file,
        skill_file_valid=skill_file_valid,
        rules=rules,
    )


def _find_marker_line(lines: list[str], marker: str) -> str | None:
    return next((line for line in lines if line.startswith(marker)), None)


def _is_valid_priority(priority: str, valid_priorities: tuple[str, ...]) -> bool:
    """Match the leading label exactly so ``MEDIUM-HIGHX`` does not pass as ``MEDIUM-HIGH``.

    Text after the label (``HIGH (blast radius)``) is allowed.
    """
    parts = priority.split(maxsplit=1)
    return bool(parts) and parts[0] in valid_priorities
