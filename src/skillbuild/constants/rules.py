"""Rule-file convention markers and shared defaults."""

from __future__ import annotations

RULE_FILE_SUFFIX: str = ".md"
TITLE_PREFIX: str = "# "
PRIORITY_MARKER: str = "**Priority:**"
CATEGORY_MARKER: str = "**Category:**"
CODE_FENCE: str = "```"
FRONTMATTER_DELIMITER: str = "---"
BYTE_ORDER_MARK: str = "\ufeff"

# Separator placed after the header and after every rule in AGENTS.md.
SECTION_SEPARATOR: str = "\n\n---\n\n"

DEFAULT_VALID_PRIORITIES: tuple[str, ...] = (
    "CRITICAL",
    "HIGH",
    "MEDIUM-HIGH",
    "MEDIUM",
    "LOW-MEDIUM",
    "LOW",
)

DEFAULT_REQUIRED_SECTIONS: tuple[str, ...] = (
    "## Why It Matters",
    "## Incorrect",
    "## Correct",
    "## References",
)
