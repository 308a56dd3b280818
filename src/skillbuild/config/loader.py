"""Config loading and normalization for skill builds."""

from __future__ import annotations

import difflib
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from skillbuild.config.model import SkillConfig
from skillbuild.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    LIST_OF_STRINGS_KEYS,
    REQUIRED_CUSTOM_SKILL_KEYS,
    STRING_KEYS,
)
from skillbuild.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_skill_config(
    skill_name: str,
    skill_dir: Path,
    *,
    defaults: SkillConfig | None = None,
    config_path: Path | None = None,
) -> SkillConfig:
    """Resolve the config for a skill from bundled defaults and ``skillbuild.yaml``.

    Values in the config file override *defaults*. When *defaults* is
    ``None`` the file must describe the skill completely. A missing
    default config file is not an error; a missing explicit one is.
    """
    skill_dir = skill_dir.resolve()
    path = config_path.resolve() if config_path else (skill_dir / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        if defaults is None:
            raise ConfigError(f"Unknown skill {skill_name!r} and no {CONFIG_FILENAME} found in {skill_dir}")
        return defaults

    raw = _read_mapping(path)
    logger.debug("Loaded skill config from %s", path)

    unknown = sorted(key for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        key = unknown[0]
        raise ConfigError(f"Unknown key {key!r} in {path}{_suggest_key(key, ALLOWED_CONFIG_KEYS)}")

    if defaults is None:
        missing = [key for key in REQUIRED_CUSTOM_SKILL_KEYS if key not in raw]
        if missing:
            raise ConfigError(f"Config for skill {skill_name!r} is missing required key(s): {', '.join(missing)}")
        defaults = SkillConfig.for_skill_dir(
            skill_name,
            skill_dir,
            valid_prefixes=(),
            code_example_languages=(),
            title="",
        )

    overrides: dict[str, Any] = {}
    for key in LIST_OF_STRINGS_KEYS:
        if key in raw:
            overrides[key] = _ensure_non_empty_strings(raw[key], key)
    for key in STRING_KEYS:
        if key in raw:
            overrides[key] = _ensure_string(raw[key], key, allow_empty=(key == "description"))

    for key in ("rules_dir", "output_file"):
        if key in overrides:
            overrides[key] = skill_dir / overrides[key]

    return replace(defaults, **overrides)


def _read_mapping(path: Path) -> dict[str, Any]:
    """Parse a YAML file that must contain a mapping (an empty file counts as ``{}``)."""
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")
    return raw


def _ensure_non_empty_strings(value: Any, key_name: str) -> tuple[str, ...]:
    """Coerce a value to a non-empty tuple of strings, raising ConfigError on type mismatch."""
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    if not value:
        raise ConfigError(f"{key_name} must not be empty")
    if any(not item.strip() for item in value):
        raise ConfigError(f"{key_name} must not contain blank entries")
    return tuple(value)


def _ensure_string(value: Any, key_name: str, *, allow_empty: bool = False) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{key_name} must be a string")
    if not allow_empty and not value.strip():
        raise ConfigError(f"{key_name} must not be empty")
    return value


def _suggest_key(key: str, allowed: frozenset[str]) -> str:
    """Return a ``did you mean`` hint for a misspelt config key, or an empty string."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    if not matches:
        return ""
    return f" (did you mean {matches[0]!r}?)"
