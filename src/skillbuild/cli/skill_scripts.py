"""Console-script wrappers that pin the CLI to one bundled skill.

Extra command-line arguments (``--root``, ``--report`` ...) are forwarded.
"""

from __future__ import annotations

import sys

from skillbuild.cli.main import main
from skillbuild.skills import terraform_best_practices, terramate_best_practices


def _run(command: str, skill_name: str) -> int:
    return main([command, "--skill", skill_name, *sys.argv[1:]])


def terraform_build() -> int:
    return _run("build", terraform_best_practices.SKILL_NAME)


def terraform_validate() -> int:
    return _run("validate", terraform_best_practices.SKILL_NAME)


def terramate_build() -> int:
    return _run("build", terramate_best_practices.SKILL_NAME)


def terramate_validate() -> int:
    return _run("validate", terramate_best_practices.SKILL_NAME)
