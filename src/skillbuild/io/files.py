"""Rule directory listing and rule file reading."""

from __future__ import annotations

from pathlib import Path

from skillbuild.constants.rules import RULE_FILE_SUFFIX
from skillbuild.exceptions import RulesDirectoryNotFoundError


def list_rule_files(rules_dir: Path) -> list[str]:
    """Return rule filenames in *rules_dir*, sorted lexicographically.

    Only regular files ending in ``.md`` are returned. Raises
    :class:`RulesDirectoryNotFoundError` when the directory is missing.
    """
    if not rules_dir.is_dir():
        raise RulesDirectoryNotFoundError(f"Rules directory not found: {rules_dir}")
    names = (entry.name for entry in rules_dir.iterdir() if entry.is_file())
    return sorted(name for name in names if name.endswith(RULE_FILE_SUFFIX))


def read_rule_content(rules_dir: Path, filename: str) -> str:
    """Return the raw text of a rule file.

    Content is returned unaltered: no newline translation and no BOM
    stripping, so compiled output reproduces the file byte for byte.
    """
    return (rules_dir / filename).read_bytes().decode("utf-8")
