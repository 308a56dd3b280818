"""Shared file I/O helpers."""

from .files import list_rule_files, read_rule_content
from .json_io import write_json_atomic, write_text_atomic

__all__ = ["list_rule_files", "read_rule_content", "write_json_atomic", "write_text_atomic"]
