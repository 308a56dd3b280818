"""Rule-file validation and AGENTS.md compilation."""

from .compiler import build_agents_md, render_agents_md
from .validator import check_rules, validate_rule_file, validate_rules, validate_skill, validate_skill_file

__all__ = [
    "build_agents_md",
    "check_rules",
    "render_agents_md",
    "validate_rule_file",
    "validate_rules",
    "validate_skill",
    "validate_skill_file",
]
