"""CLI entrypoint for skillbuild."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from skillbuild import __version__
from skillbuild.config import SkillConfig, load_skill_config
from skillbuild.constants.branding import (
    CLI_DESCRIPTION,
    SUMMARY_SEPARATOR,
    VALIDATION_FAILED_MESSAGE,
    VALIDATION_PASSED_MESSAGE,
    VALIDATOR_BANNER_SUFFIX,
)
from skillbuild.constants.config import CONFIG_FILENAME, SKILLS_DIRNAME
from skillbuild.exceptions import ConfigError, SkillBuildError
from skillbuild.reporting import write_validation_report
from skillbuild.rules import build_agents_md, validate_skill
from skillbuild.skills import bundled_skill_names, find_skill


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="skillbuild", description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    build = subparsers.add_parser("build", help="Compile a skill's rule files into AGENTS.md")
    _add_skill_arguments(build)

    validate = subparsers.add_parser("validate", help="Check SKILL.md and every rule file of a skill")
    _add_skill_arguments(validate)
    validate.add_argument(
        "-o",
        "--report",
        type=Path,
        default=None,
        help="Also write a JSON validation report to this path",
    )

    subparsers.add_parser("list-skills", help="List bundled skills")

    return parser


def _add_skill_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-s", "--skill", required=True, help="Skill name, e.g. terraform-best-practices")
    parser.add_argument(
        "-r",
        "--root",
        type=Path,
        default=Path("."),
        help=f"Repository root holding the {SKILLS_DIRNAME}/ directory (default: current directory)",
    )
    parser.add_argument(
        "-d",
        "--skill-dir",
        type=Path,
        default=None,
        help=f"Skill directory (default: <root>/{SKILLS_DIRNAME}/<skill>)",
    )
    parser.add_argument("-c", "--config", type=Path, help=f"Explicit config file (default: <skill-dir>/{CONFIG_FILENAME})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "list-skills":
        for name in bundled_skill_names():
            print(name)
        return 0

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s")

    try:
        config = resolve_skill_config(
            args.skill,
            root=args.root,
            skill_dir=args.skill_dir,
            config_path=args.config,
        )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    if args.command == "build":
        return _handle_build(config)
    if args.command == "validate":
        return _handle_validate(config, report_path=args.report)

    parser.error(f"Unsupported command: {args.command}")
    return 2


def resolve_skill_config(
    skill_name: str,
    *,
    root: Path,
    skill_dir: Path | None = None,
    config_path: Path | None = None,
) -> SkillConfig:
    """Resolve every path once, here, and return the skill's config."""
    resolved_dir = (skill_dir if skill_dir is not None else root / SKILLS_DIRNAME / skill_name).resolve()
    defaults = find_skill(skill_name, resolved_dir)
    return load_skill_config(skill_name, resolved_dir, defaults=defaults, config_path=config_path)


def _handle_build(config: SkillConfig) -> int:
    try:
        build_agents_md(config)
    except SkillBuildError as exc:
        print(f"Build error: {exc}", file=sys.stderr)
        return 1
    return 0


def _handle_validate(config: SkillConfig, *, report_path: Path | None) -> int:
    """Run manifest + rule validation, print the verdict and return the exit code."""
    print(f"{_display_name(config.skill_name)} {VALIDATOR_BANNER_SUFFIX}\n")

    report = validate_skill(config)
    if report_path is not None:
        write_validation_report(report_path, report)

    print(f"\n{SUMMARY_SEPARATOR}")
    if report.passed:
        print(VALIDATION_PASSED_MESSAGE)
        return 0
    print(VALIDATION_FAILED_MESSAGE, file=sys.stderr)
    return 1


def _display_name(skill_name: str) -> str:
    """Turn ``terraform-best-practices`` into ``Terraform Best Practices``."""
    return " ".join(word.capitalize() for word in skill_name.replace("_", "-").split("-") if word)


if __name__ == "__main__":
    raise SystemExit(main())
